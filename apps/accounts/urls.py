"""
URL configuration for accounts app.
"""

from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    path('auth/signup', views.signup_view, name='signup'),
    path('auth/login', views.login_view, name='login'),
    path('auth/me', views.me_view, name='me'),
    path('users', views.user_list_view, name='user_list'),
]
