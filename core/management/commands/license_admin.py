"""
Django management command for account and license administration.

Operator counterpart of the admin API, with durations in minutes:

    manage.py license_admin add user@example.com secret 60
    manage.py license_admin list
    manage.py license_admin extend user@example.com 30
    manage.py license_admin remove user@example.com
"""

import logging

from asgiref.sync import async_to_sync
from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError
from django.core.validators import validate_email

from accounts.application.commands.create_account import CreateAccountCommand
from accounts.application.commands.delete_account import DeleteAccountCommand
from accounts.application.commands.extend_license import ExtendLicenseCommand
from accounts.application.handlers.account_admin_handlers import (
    DeleteAccountHandler,
    ExtendLicenseHandler,
    ListAccountsHandler,
)
from accounts.application.handlers.create_account_handler import CreateAccountHandler
from accounts.application.queries.list_accounts import ListAccountsQuery
from accounts.domain.license_clock import MAX_DURATION_SECONDS
from accounts.infrastructure.repositories.django_account_repository import (
    DjangoAccountRepository,
)
from core.domain.exceptions import DomainException

logger = logging.getLogger(__name__)

SECONDS_PER_MINUTE = 60
MAX_MINUTES = MAX_DURATION_SECONDS // SECONDS_PER_MINUTE


class Command(BaseCommand):
    """Command to manage accounts and their licenses."""

    help = "Create, list, extend and remove licensed accounts"

    def add_arguments(self, parser):
        """Add command arguments."""
        subparsers = parser.add_subparsers(dest="action", required=True)

        add = subparsers.add_parser("add", help="Create an account")
        add.add_argument("email")
        add.add_argument("password")
        add.add_argument("minutes", type=int, help="Total license duration in minutes")

        subparsers.add_parser("list", help="List accounts")

        remove = subparsers.add_parser("remove", help="Delete an account")
        remove.add_argument("email")

        extend = subparsers.add_parser("extend", help="Change an account's license duration")
        extend.add_argument("email")
        extend.add_argument("minutes", type=int, help="Minutes to add; negative to remove")

    def handle(self, *args, **options):
        """Execute the command."""
        repository = DjangoAccountRepository()
        action = options["action"]
        try:
            if action == "add":
                self._add(repository, options)
            elif action == "list":
                self._list(repository)
            elif action == "remove":
                self._remove(repository, options)
            elif action == "extend":
                self._extend(repository, options)
        except DomainException as e:
            raise CommandError(f"{e.code}: {e.message}") from e

    def _check_minutes(self, minutes):
        if abs(minutes) > MAX_MINUTES:
            raise CommandError(f"minutes must be between -{MAX_MINUTES} and {MAX_MINUTES}")

    def _add(self, repository, options):
        try:
            validate_email(options["email"])
        except ValidationError as e:
            raise CommandError(f"Invalid email address: {options['email']}") from e
        self._check_minutes(options["minutes"])

        handler = CreateAccountHandler(account_repository=repository)
        result = async_to_sync(handler.handle)(
            CreateAccountCommand(
                email=options["email"],
                password=options["password"],
                duration_seconds=options["minutes"] * SECONDS_PER_MINUTE,
            )
        )
        self.stdout.write(
            self.style.SUCCESS(
                f"Created {result.email} with {result.duration_seconds // SECONDS_PER_MINUTE} minute(s)"
            )
        )

    def _list(self, repository):
        handler = ListAccountsHandler(account_repository=repository)
        accounts = async_to_sync(handler.handle)(ListAccountsQuery())
        if not accounts:
            self.stdout.write("No accounts")
            return

        self.stdout.write(f"{'EMAIL':<40} {'MINUTES':>8} {'REMAINING':>10}  ACTIVATED")
        for account in accounts:
            remaining = (
                "-"
                if account.remaining_seconds is None
                else str(account.remaining_seconds // SECONDS_PER_MINUTE)
            )
            activated = account.activated_at.isoformat() if account.activated_at else "never"
            self.stdout.write(
                f"{account.email:<40} {account.duration_seconds // SECONDS_PER_MINUTE:>8} "
                f"{remaining:>10}  {activated}"
            )

    def _remove(self, repository, options):
        handler = DeleteAccountHandler(account_repository=repository)
        async_to_sync(handler.handle)(DeleteAccountCommand(email=options["email"]))
        self.stdout.write(self.style.SUCCESS(f"Removed {options['email']}"))

    def _extend(self, repository, options):
        self._check_minutes(options["minutes"])
        handler = ExtendLicenseHandler(account_repository=repository)
        result = async_to_sync(handler.handle)(
            ExtendLicenseCommand(
                email=options["email"],
                extra_seconds=options["minutes"] * SECONDS_PER_MINUTE,
            )
        )
        self.stdout.write(
            self.style.SUCCESS(
                f"{result.email} now has {result.duration_seconds // SECONDS_PER_MINUTE} minute(s) in total"
            )
        )
