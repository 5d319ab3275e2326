"""
URL configuration for tasks app.
"""

from django.urls import path
from . import views

app_name = 'tasks'

urlpatterns = [
    path('tasks', views.task_collection_view, name='task_collection'),
    path('tasks/<int:pk>', views.task_detail_view, name='task_detail'),
]
