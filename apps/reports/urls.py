"""
URL configuration for reports app.
"""

from django.urls import path
from . import views

app_name = 'reports'

urlpatterns = [
    path('last-week', views.completed_last_week_view, name='last_week'),
    path('pending', views.pending_work_view, name='pending'),
    path('closed-tasks', views.closed_tasks_view, name='closed_tasks'),
]
