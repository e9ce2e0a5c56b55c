"""
Integration tests for Admin API endpoints.
"""

import pytest
from django.urls import reverse

from accounts.domain.license_clock import MAX_DURATION_SECONDS
from accounts.infrastructure.models import Account as AccountModel
from device_sessions.infrastructure.models import DeviceSession as DeviceSessionModel
from tests.fakes import PASSWORD


@pytest.mark.django_db
@pytest.mark.integration
class TestAdminKey:
    """Admin endpoints require the admin key."""

    def test_missing_admin_key(self, api_client):
        response = api_client.get(reverse("admin_api:accounts"))

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "INVALID_ADMIN_KEY"

    def test_wrong_admin_key(self, api_client):
        response = api_client.get(reverse("admin_api:accounts"), HTTP_X_ADMIN_KEY="nope")

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "INVALID_ADMIN_KEY"

    def test_auth_endpoints_do_not_need_admin_key(self, api_client):
        response = api_client.get(reverse("auth_api:check"))

        assert response.status_code != 403


@pytest.mark.django_db
@pytest.mark.integration
class TestAccountsAPI:
    """Integration tests for account administration."""

    def test_create_account(self, admin_client):
        response = admin_client.post(
            reverse("admin_api:accounts"),
            {"email": "new@example.com", "password": "pw", "duration_seconds": 600},
            format="json",
        )

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "new@example.com"
        assert data["duration_seconds"] == 600
        # pylint: disable=no-member
        stored = AccountModel.objects.get(email="new@example.com")
        assert stored.password_hash != "pw"
        assert stored.activated_at is None

    def test_create_duplicate(self, admin_client, db_account):
        response = admin_client.post(
            reverse("admin_api:accounts"),
            {"email": "stored@example.com", "password": "pw", "duration_seconds": 600},
            format="json",
        )

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "ACCOUNT_ALREADY_EXISTS"

    def test_create_requires_positive_duration(self, admin_client):
        response = admin_client.post(
            reverse("admin_api:accounts"),
            {"email": "new@example.com", "password": "pw", "duration_seconds": 0},
            format="json",
        )

        assert response.status_code == 400

    def test_list_accounts(self, admin_client, db_account):
        response = admin_client.get(reverse("admin_api:accounts"))

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["email"] == "stored@example.com"
        assert data[0]["duration_seconds"] == 3600
        assert data[0]["activated_at"] is None
        assert data[0]["remaining_seconds"] is None

    def test_delete_account(self, admin_client, api_client, db_account):
        api_client.post(
            reverse("auth_api:login"),
            {"email": "stored@example.com", "password": PASSWORD, "device_id": "d1"},
            format="json",
        )

        response = admin_client.delete(
            reverse("admin_api:account-detail", kwargs={"email": "stored@example.com"})
        )

        assert response.status_code == 200
        # pylint: disable=no-member
        assert not AccountModel.objects.filter(email="stored@example.com").exists()
        assert not DeviceSessionModel.objects.filter(account_id="stored@example.com").exists()

    def test_delete_missing_account(self, admin_client):
        response = admin_client.delete(
            reverse("admin_api:account-detail", kwargs={"email": "missing@example.com"})
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "ACCOUNT_NOT_FOUND"

    def test_extend_license(self, admin_client, db_account):
        response = admin_client.patch(
            reverse("admin_api:account-duration", kwargs={"email": "stored@example.com"}),
            {"extra_seconds": 600},
            format="json",
        )

        assert response.status_code == 200
        assert response.json()["duration_seconds"] == 4200

    def test_extend_below_zero(self, admin_client, db_account):
        response = admin_client.patch(
            reverse("admin_api:account-duration", kwargs={"email": "stored@example.com"}),
            {"extra_seconds": -3601},
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_DURATION"

    def test_extend_zero(self, admin_client, db_account):
        response = admin_client.patch(
            reverse("admin_api:account-duration", kwargs={"email": "stored@example.com"}),
            {"extra_seconds": 0},
            format="json",
        )

        assert response.status_code == 400

    def test_extend_missing_account(self, admin_client):
        response = admin_client.patch(
            reverse("admin_api:account-duration", kwargs={"email": "missing@example.com"}),
            {"extra_seconds": 60},
            format="json",
        )

        assert response.status_code == 404

    def test_create_rejects_duration_above_maximum(self, admin_client):
        response = admin_client.post(
            reverse("admin_api:accounts"),
            {"email": "huge@example.com", "password": "pw", "duration_seconds": 10**12},
            format="json",
        )

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert "duration_seconds" in error["details"]
        # pylint: disable=no-member
        assert not AccountModel.objects.filter(email="huge@example.com").exists()

    def test_maximum_duration_supports_login_and_listing(self, admin_client):
        admin_client.post(
            reverse("admin_api:accounts"),
            {
                "email": "long@example.com",
                "password": "pw",
                "duration_seconds": MAX_DURATION_SECONDS,
            },
            format="json",
        )

        login = admin_client.post(
            reverse("auth_api:login"),
            {"email": "long@example.com", "password": "pw", "device_id": "d1"},
            format="json",
        )
        listing = admin_client.get(reverse("admin_api:accounts"))

        assert login.status_code == 200
        assert login.json()["expires_at"]
        assert listing.status_code == 200
        assert listing.json()[0]["license_expires_at"]

    def test_extend_above_maximum(self, admin_client, db_account):
        response = admin_client.patch(
            reverse("admin_api:account-duration", kwargs={"email": "stored@example.com"}),
            {"extra_seconds": MAX_DURATION_SECONDS},
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_DURATION"
        # pylint: disable=no-member
        assert AccountModel.objects.get(email="stored@example.com").duration_seconds == 3600

    def test_extend_by_out_of_range_amount(self, admin_client, db_account):
        response = admin_client.patch(
            reverse("admin_api:account-duration", kwargs={"email": "stored@example.com"}),
            {"extra_seconds": 10**12},
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.django_db
@pytest.mark.integration
class TestHealthEndpoints:
    """Integration tests for health endpoints."""

    def test_health(self, client):
        response = client.get(reverse("health"))
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health_db(self, client):
        response = client.get(reverse("health-db"))
        assert response.status_code == 200
        assert response.json()["database"] == "connected"

    def test_ready(self, client):
        response = client.get(reverse("ready"))
        assert response.status_code == 200
        assert response.json()["checks"] == {"database": True}
