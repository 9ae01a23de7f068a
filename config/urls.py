"""
URL configuration for the Local Talent contracts project.
"""
from django.urls import path, include

urlpatterns = [
    path('contracts/', include('apps.contracts.urls')),
    path('api/', include('apps.api.urls')),
]
