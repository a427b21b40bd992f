# agronomy/urls.py
from django.urls import path
from . import views
from . import api

app_name = 'agronomy'

urlpatterns = [
    path('', views.home, name='home'),
    path('yield/', views.submit_yield, name='submit_yield'),
    path('recommendation/', views.submit_recommendation, name='submit_recommendation'),
    path('api/predict-yield/', api.api_predict_yield, name='api_predict_yield'),
    path('api/recommend-crop/', api.api_recommend_crop, name='api_recommend_crop'),
    path('api/validate/<str:form_name>/', api.api_validate, name='api_validate'),
]
