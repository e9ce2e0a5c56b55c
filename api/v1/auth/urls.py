"""
URL configuration for auth API endpoints.
"""

from django.urls import path

from api.v1.auth import views

app_name = "auth_api"

urlpatterns = [
    path("login", views.LoginView.as_view(), name="login"),
    path("refresh", views.RefreshSessionView.as_view(), name="refresh"),
    path("check", views.CheckSessionView.as_view(), name="check"),
    path("validate-session", views.ValidateSessionView.as_view(), name="validate-session"),
]
