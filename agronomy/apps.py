# agronomy/apps.py
from django.apps import AppConfig


class AgronomyConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'agronomy'
    verbose_name = 'Agricultural Optimizer'
