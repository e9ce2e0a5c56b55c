"""
Unit tests for Account entity.
"""
from datetime import timedelta

import pytest

from accounts.domain.account import Account
from accounts.domain.license_clock import MAX_DURATION_SECONDS
from tests.fakes import T0


class TestAccountEntity:
    """Tests for Account entity."""

    def test_create_account(self):
        """Test creating an account."""
        account = Account.create(
            email="user@example.com",
            raw_password="s3cret",
            duration_seconds=3600,
            now=T0,
        )

        assert str(account.email) == "user@example.com"
        assert account.duration_seconds == 3600
        assert account.activated_at is None
        assert not account.is_activated
        assert account.password_hash != "s3cret"

    def test_create_requires_password(self):
        with pytest.raises(ValueError, match="Password is required"):
            Account.create(email="user@example.com", raw_password="", duration_seconds=60, now=T0)

    def test_create_rejects_invalid_email(self):
        with pytest.raises(ValueError, match="Invalid email"):
            Account.create(email="nope", raw_password="x", duration_seconds=60, now=T0)

    def test_negative_duration_rejected(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            Account.create(email="user@example.com", raw_password="x", duration_seconds=-1, now=T0)

    def test_duration_above_maximum_rejected(self):
        with pytest.raises(ValueError, match="exceeds the maximum"):
            Account.create(
                email="user@example.com",
                raw_password="x",
                duration_seconds=MAX_DURATION_SECONDS + 1,
                now=T0,
            )

    def test_maximum_duration_has_representable_expiry(self):
        account = Account.create(
            email="user@example.com",
            raw_password="x",
            duration_seconds=MAX_DURATION_SECONDS,
            now=T0,
        ).activate(T0)

        assert account.license_expires_at() > T0
        assert account.remaining_seconds(T0) == MAX_DURATION_SECONDS

    def test_check_password(self):
        account = Account.create(
            email="user@example.com", raw_password="s3cret", duration_seconds=60, now=T0
        )
        assert account.check_password("s3cret")
        assert not account.check_password("wrong")
        assert not account.check_password("")

    def test_activate_sets_timestamp_once(self):
        account = Account.create(
            email="user@example.com", raw_password="x", duration_seconds=60, now=T0
        )
        activated = account.activate(T0)
        again = activated.activate(T0 + timedelta(hours=1))

        assert activated.activated_at == T0
        assert again.activated_at == T0
        assert account.activated_at is None

    def test_remaining_seconds(self):
        account = Account.create(
            email="user@example.com", raw_password="x", duration_seconds=3600, now=T0
        )
        assert account.remaining_seconds(T0) is None

        activated = account.activate(T0)
        assert activated.remaining_seconds(T0 + timedelta(seconds=600)) == 3000
        assert activated.license_expires_at() == T0 + timedelta(seconds=3600)

    def test_extend_keeps_activation(self):
        account = Account.create(
            email="user@example.com", raw_password="x", duration_seconds=60, now=T0
        ).activate(T0)
        extended = account.extend(600, T0 + timedelta(seconds=60))

        assert extended.duration_seconds == 660
        assert extended.activated_at == T0

    def test_extend_rejects_zero(self):
        account = Account.create(
            email="user@example.com", raw_password="x", duration_seconds=60, now=T0
        )
        with pytest.raises(ValueError, match="non-zero"):
            account.extend(0, T0)

    def test_extend_rejects_negative_result(self):
        account = Account.create(
            email="user@example.com", raw_password="x", duration_seconds=60, now=T0
        )
        assert account.extend(-60, T0).duration_seconds == 0
        with pytest.raises(ValueError, match="cannot be negative"):
            account.extend(-61, T0)

    def test_extend_rejects_result_above_maximum(self):
        account = Account.create(
            email="user@example.com", raw_password="x", duration_seconds=60, now=T0
        )
        with pytest.raises(ValueError, match="exceeds the maximum"):
            account.extend(MAX_DURATION_SECONDS, T0)
