"""
Django implementation of AccountRepository port.

This adapter converts between domain entities and Django ORM models.
"""

from datetime import datetime
from typing import List, Optional, Tuple

from asgiref.sync import sync_to_async
from django.db import IntegrityError, transaction
from django.db.models import F

from accounts.domain.account import Account
from accounts.domain.license_clock import MAX_DURATION_SECONDS
from accounts.infrastructure.models import Account as AccountModel
from accounts.ports.account_repository import AccountRepository
from core.domain.exceptions import AccountAlreadyExistsError, InvalidDurationError
from core.domain.value_objects import Email
from core.infrastructure.database import translate_store_errors


class DjangoAccountRepository(AccountRepository):
    """
    Django ORM implementation of AccountRepository.

    The activation and extension writes are single conditional UPDATE
    statements so the database serialises concurrent callers.
    """

    def _to_domain(self, model: AccountModel) -> Account:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Account model

        Returns:
            Account domain entity
        """
        return Account(
            email=Email(model.email),
            password_hash=model.password_hash,
            duration_seconds=model.duration_seconds,
            activated_at=model.activated_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @translate_store_errors("add_account")
    def _add(self, account: Account) -> Account:
        try:
            with transaction.atomic():
                # pylint: disable=no-member
                model = AccountModel.objects.create(
                    email=str(account.email),
                    password_hash=account.password_hash,
                    duration_seconds=account.duration_seconds,
                    activated_at=account.activated_at,
                )
        except IntegrityError as e:
            raise AccountAlreadyExistsError(f"Account {account.email} already exists") from e
        return self._to_domain(model)

    async def add(self, account: Account) -> Account:
        return await sync_to_async(self._add)(account)

    @translate_store_errors("find_account")
    def _find_by_email(self, email: str) -> Optional[Account]:
        # pylint: disable=no-member
        model = AccountModel.objects.filter(email=email).first()
        return self._to_domain(model) if model else None

    async def find_by_email(self, email: str) -> Optional[Account]:
        return await sync_to_async(self._find_by_email)(email)

    @translate_store_errors("list_accounts")
    def _list_all(self) -> List[Account]:
        # pylint: disable=no-member
        return [self._to_domain(model) for model in AccountModel.objects.order_by("created_at")]

    async def list_all(self) -> List[Account]:
        return await sync_to_async(self._list_all)()

    @translate_store_errors("delete_account")
    def _delete(self, email: str) -> bool:
        # pylint: disable=no-member
        deleted, _ = AccountModel.objects.filter(email=email).delete()
        return deleted > 0

    async def delete(self, email: str) -> bool:
        return await sync_to_async(self._delete)(email)

    @translate_store_errors("activate_account")
    def _set_activation_time_if_unset(
        self, email: str, now: datetime
    ) -> Tuple[Optional[Account], bool]:
        # pylint: disable=no-member
        updated = AccountModel.objects.filter(email=email, activated_at__isnull=True).update(
            activated_at=now, updated_at=now
        )
        model = AccountModel.objects.filter(email=email).first()
        if model is None:
            return None, False
        return self._to_domain(model), updated == 1

    async def set_activation_time_if_unset(
        self, email: str, now: datetime
    ) -> Tuple[Optional[Account], bool]:
        return await sync_to_async(self._set_activation_time_if_unset)(email, now)

    @translate_store_errors("extend_duration")
    def _extend_duration(self, email: str, extra_seconds: int, now: datetime) -> Optional[Account]:
        # pylint: disable=no-member
        queryset = AccountModel.objects.filter(email=email)
        if extra_seconds < 0:
            queryset = queryset.filter(duration_seconds__gte=-extra_seconds)
        else:
            queryset = queryset.filter(duration_seconds__lte=MAX_DURATION_SECONDS - extra_seconds)
        updated = queryset.update(
            duration_seconds=F("duration_seconds") + extra_seconds, updated_at=now
        )
        model = AccountModel.objects.filter(email=email).first()
        if model is None:
            return None
        if updated == 0:
            raise InvalidDurationError("License duration out of range")
        return self._to_domain(model)

    async def extend_duration(
        self, email: str, extra_seconds: int, now: datetime
    ) -> Optional[Account]:
        return await sync_to_async(self._extend_duration)(email, extra_seconds, now)

    @translate_store_errors("account_exists")
    def _exists(self, email: str) -> bool:
        # pylint: disable=no-member
        return AccountModel.objects.filter(email=email).exists()

    async def exists(self, email: str) -> bool:
        return await sync_to_async(self._exists)(email)
