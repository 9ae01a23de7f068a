"""
Contract URL Configuration
"""
from django.urls import path
from . import views

app_name = 'contracts'

urlpatterns = [
    path('download/text/', views.download_text, name='download_text'),
    path('download/html/', views.download_html, name='download_html'),
    path('download/pdf/', views.download_pdf, name='download_pdf'),
]
