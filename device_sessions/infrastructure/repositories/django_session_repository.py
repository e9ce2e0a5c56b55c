"""
Django implementation of SessionRepository port.

This adapter converts between domain entities and Django ORM models.
"""

from datetime import datetime
from typing import Optional, Tuple

from asgiref.sync import sync_to_async
from django.db import transaction

from core.domain.value_objects import DeviceIdentifier, Email
from core.infrastructure.database import translate_store_errors
from device_sessions.domain.session import DeviceSession
from device_sessions.infrastructure.models import DeviceSession as DeviceSessionModel
from device_sessions.ports.session_repository import SessionRepository


class DjangoSessionRepository(SessionRepository):
    """
    Django ORM implementation of SessionRepository.

    One row per account. ``establish`` locks the row (where the backend
    supports it) and upserts inside one transaction; ``replace_token``
    is a single conditional UPDATE.
    """

    def _to_domain(self, model: DeviceSessionModel) -> DeviceSession:
        """
        Convert Django model to domain entity.

        Args:
            model: Django DeviceSession model

        Returns:
            DeviceSession domain entity
        """
        return DeviceSession(
            email=Email(model.account_id),
            device_id=DeviceIdentifier(model.device_id),
            token=model.token,
            established_at=model.established_at,
        )

    @translate_store_errors("find_session")
    def _find_by_account(self, email: str) -> Optional[DeviceSession]:
        # pylint: disable=no-member
        model = DeviceSessionModel.objects.filter(account_id=email).first()
        return self._to_domain(model) if model else None

    async def find_by_account(self, email: str) -> Optional[DeviceSession]:
        return await sync_to_async(self._find_by_account)(email)

    @translate_store_errors("establish_session")
    def _establish(self, session: DeviceSession) -> Tuple[DeviceSession, Optional[DeviceSession]]:
        email = str(session.email)
        with transaction.atomic():
            # pylint: disable=no-member
            current = DeviceSessionModel.objects.select_for_update().filter(account_id=email).first()
            previous = self._to_domain(current) if current else None
            model, _ = DeviceSessionModel.objects.update_or_create(
                account_id=email,
                defaults={
                    "device_id": str(session.device_id),
                    "token": session.token,
                    "established_at": session.established_at,
                },
            )
        return self._to_domain(model), previous

    async def establish(
        self, session: DeviceSession
    ) -> Tuple[DeviceSession, Optional[DeviceSession]]:
        return await sync_to_async(self._establish)(session)

    @translate_store_errors("replace_session_token")
    def _replace_token(
        self,
        email: str,
        device_id: str,
        expected_token: str,
        new_token: str,
        now: datetime,
    ) -> Optional[DeviceSession]:
        # pylint: disable=no-member
        updated = DeviceSessionModel.objects.filter(
            account_id=email, device_id=device_id, token=expected_token
        ).update(token=new_token, established_at=now, updated_at=now)
        if updated == 0:
            return None
        model = DeviceSessionModel.objects.filter(account_id=email).first()
        return self._to_domain(model) if model else None

    async def replace_token(
        self,
        email: str,
        device_id: str,
        expected_token: str,
        new_token: str,
        now: datetime,
    ) -> Optional[DeviceSession]:
        return await sync_to_async(self._replace_token)(
            email, device_id, expected_token, new_token, now
        )
