"""
CreateAccountHandler.

Handler for provisioning an account.
"""

import logging

from accounts.application.commands.create_account import CreateAccountCommand
from accounts.application.dto.account_dto import CreateAccountResponseDTO
from accounts.domain.account import Account
from accounts.domain.events import AccountCreated
from accounts.domain.license_clock import MAX_DURATION_SECONDS, Clock, system_clock
from accounts.ports.account_repository import AccountRepository
from core.domain.exceptions import AccountAlreadyExistsError, InvalidDurationError
from core.infrastructure.events import event_bus
from core.metrics import accounts_created_total

logger = logging.getLogger(__name__)


class CreateAccountHandler:
    """Handler for CreateAccountCommand."""

    def __init__(self, account_repository: AccountRepository, clock: Clock = system_clock):
        """Initialize handler with repositories."""
        self.account_repository = account_repository
        self.clock = clock

    async def handle(self, command: CreateAccountCommand) -> CreateAccountResponseDTO:
        """
        Handle create account command.

        Args:
            command: CreateAccountCommand

        Returns:
            CreateAccountResponseDTO

        Raises:
            AccountAlreadyExistsError: If the email is taken
            InvalidDurationError: If the duration is not positive or too large
        """
        if command.duration_seconds <= 0:
            raise InvalidDurationError("License duration must be positive")
        if command.duration_seconds > MAX_DURATION_SECONDS:
            raise InvalidDurationError("License duration exceeds the maximum")

        if await self.account_repository.exists(command.email):
            raise AccountAlreadyExistsError(f"Account {command.email} already exists")

        account = Account.create(
            email=command.email,
            raw_password=command.password,
            duration_seconds=command.duration_seconds,
            now=self.clock(),
        )
        saved = await self.account_repository.add(account)

        accounts_created_total.inc()
        logger.info("Account %s created with %ds", saved.email, saved.duration_seconds)
        await event_bus.publish(
            AccountCreated(email=str(saved.email), duration_seconds=saved.duration_seconds)
        )

        return CreateAccountResponseDTO(
            email=str(saved.email),
            duration_seconds=saved.duration_seconds,
            message="Account created successfully",
        )
