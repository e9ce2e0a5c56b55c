"""
URL configuration for admin API endpoints.
"""

from django.urls import path

from api.v1.admin import views

app_name = "admin_api"

urlpatterns = [
    path("accounts", views.AccountsView.as_view(), name="accounts"),
    path("accounts/<str:email>", views.AccountDetailView.as_view(), name="account-detail"),
    path(
        "accounts/<str:email>/duration",
        views.AccountDurationView.as_view(),
        name="account-duration",
    ),
]
