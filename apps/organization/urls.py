"""
URL configuration for organization app.
"""

from django.urls import path
from . import views

app_name = 'organization'

urlpatterns = [
    path('teams', views.team_collection_view, name='teams'),
    path('projects', views.project_collection_view, name='projects'),
    path('tags', views.tag_collection_view, name='tags'),
]
