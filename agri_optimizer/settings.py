"""Django settings for the agri_optimizer project.

Values come from the environment; a ``.env`` file next to ``manage.py`` is
loaded first when present.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / '.env')


def _env_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_float(name):
    value = os.getenv(name)
    return float(value) if value else None


SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'django-insecure-agri-optimizer-dev-key')
DEBUG = _env_bool('DJANGO_DEBUG', True)
ALLOWED_HOSTS = [h.strip() for h in os.getenv('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',') if h.strip()]

INSTALLED_APPS = [
    'django.contrib.sessions',
    'django.contrib.staticfiles',
    'rest_framework',
    'agronomy',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'agri_optimizer.urls'
WSGI_APPLICATION = 'agri_optimizer.wsgi.application'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
            ],
        },
    },
]

# Nothing is stored server side; per-tab results live in the signed session cookie.
DATABASES = {}
SESSION_ENGINE = 'django.contrib.sessions.backends.signed_cookies'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [],
    'DEFAULT_RENDERER_CLASSES': ['rest_framework.renderers.JSONRenderer'],
    'UNAUTHENTICATED_USER': None,
}

# External services
OPENWEATHER_API_KEY = os.getenv('OPENWEATHER_API_KEY', '')
OPENWEATHER_URL = os.getenv('OPENWEATHER_URL', 'https://api.openweathermap.org/data/2.5/weather')
YIELD_PREDICTION_URL = os.getenv('YIELD_PREDICTION_URL', '')
CROP_RECOMMENDATION_URL = os.getenv(
    'CROP_RECOMMENDATION_URL', 'https://agricultural-optimizer-api.onrender.com/api/recommend-crop'
)
CROP_RECOMMENDATION_API_KEY = os.getenv('CROP_RECOMMENDATION_API_KEY', '')
AGRI_HTTP_TIMEOUT = _env_float('AGRI_HTTP_TIMEOUT')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'filters': {
        'mask_secrets': {'()': 'agronomy.log.SensitiveDataFilter'},
    },
    'formatters': {
        'standard': {'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s'},
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
            'filters': ['mask_secrets'],
        },
    },
    'root': {'handlers': ['console'], 'level': 'WARNING'},
    'loggers': {
        'agronomy': {
            'level': os.getenv('DJANGO_LOG_LEVEL', 'INFO'),
        },
    },
}
