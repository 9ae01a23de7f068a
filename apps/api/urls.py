"""
API URL Configuration
"""
from django.urls import path
from . import views

app_name = 'api'

urlpatterns = [
    path('', views.health_check, name='health_check'),
    path('templates/', views.contract_templates, name='contract_templates'),
    path('templates/<str:template_id>/', views.contract_template_detail, name='contract_template_detail'),
    path('templates/<str:template_id>/render/', views.render_template, name='render_template'),
    path('templates/<str:template_id>/milestones/', views.generate_milestones, name='generate_milestones'),
    path('templates/<str:template_id>/draft/', views.create_contract_draft, name='create_contract_draft'),
    path('jurisdictions/', views.jurisdictions, name='jurisdictions'),
    path('milestone-statuses/', views.milestone_statuses, name='milestone_statuses'),
]
