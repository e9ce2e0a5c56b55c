"""
Account administration handlers.

Handlers for listing, deleting and extending accounts.
"""

import logging
from typing import List

from accounts.application.commands.delete_account import DeleteAccountCommand
from accounts.application.commands.extend_license import ExtendLicenseCommand
from accounts.application.dto.account_dto import AccountDTO, ExtendLicenseResponseDTO
from accounts.application.queries.list_accounts import ListAccountsQuery
from accounts.domain.events import AccountDeleted, LicenseExtended
from accounts.domain.license_clock import Clock, system_clock
from accounts.ports.account_repository import AccountRepository
from core.domain.exceptions import AccountNotFoundError, InvalidDurationError
from core.infrastructure.events import event_bus
from core.metrics import accounts_deleted_total, licenses_extended_total

logger = logging.getLogger(__name__)


class ListAccountsHandler:
    """Handler for ListAccountsQuery."""

    def __init__(self, account_repository: AccountRepository, clock: Clock = system_clock):
        self.account_repository = account_repository
        self.clock = clock

    async def handle(self, query: ListAccountsQuery) -> List[AccountDTO]:
        """
        Handle list accounts query.

        Remaining time is computed against a single observation instant
        so every row in the listing is consistent.
        """
        now = self.clock()
        accounts = await self.account_repository.list_all()
        return [
            AccountDTO(
                email=str(account.email),
                duration_seconds=account.duration_seconds,
                activated_at=account.activated_at,
                remaining_seconds=account.remaining_seconds(now),
                license_expires_at=account.license_expires_at(),
                created_at=account.created_at,
            )
            for account in accounts
        ]


class DeleteAccountHandler:
    """Handler for DeleteAccountCommand."""

    def __init__(self, account_repository: AccountRepository):
        self.account_repository = account_repository

    async def handle(self, command: DeleteAccountCommand) -> None:
        """
        Handle delete account command.

        Raises:
            AccountNotFoundError: If the account does not exist
        """
        deleted = await self.account_repository.delete(command.email)
        if not deleted:
            raise AccountNotFoundError(f"Account {command.email} not found")

        accounts_deleted_total.inc()
        logger.info("Account %s deleted", command.email)
        await event_bus.publish(AccountDeleted(email=command.email))


class ExtendLicenseHandler:
    """Handler for ExtendLicenseCommand."""

    def __init__(self, account_repository: AccountRepository, clock: Clock = system_clock):
        self.account_repository = account_repository
        self.clock = clock

    async def handle(self, command: ExtendLicenseCommand) -> ExtendLicenseResponseDTO:
        """
        Handle extend license command.

        Raises:
            AccountNotFoundError: If the account does not exist
            InvalidDurationError: If the change is zero or would leave a
                negative duration
        """
        now = self.clock()
        account = await self.account_repository.find_by_email(command.email)
        if not account:
            raise AccountNotFoundError(f"Account {command.email} not found")

        try:
            account.extend(command.extra_seconds, now)
        except ValueError as e:
            raise InvalidDurationError(str(e)) from e

        updated = await self.account_repository.extend_duration(
            command.email, command.extra_seconds, now
        )
        if not updated:
            raise AccountNotFoundError(f"Account {command.email} not found")

        licenses_extended_total.inc()
        logger.info(
            "License for %s changed by %ds to %ds",
            command.email,
            command.extra_seconds,
            updated.duration_seconds,
        )
        await event_bus.publish(
            LicenseExtended(
                email=command.email,
                extra_seconds=command.extra_seconds,
                new_duration_seconds=updated.duration_seconds,
            )
        )

        return ExtendLicenseResponseDTO(
            email=command.email,
            duration_seconds=updated.duration_seconds,
            remaining_seconds=updated.remaining_seconds(now),
            message="License duration updated successfully",
        )
