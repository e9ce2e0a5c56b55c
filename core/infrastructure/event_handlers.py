"""
Event handlers for domain events.

These handlers process domain events for side effects such as
audit logging.
"""

import logging

from accounts.domain.events import (
    AccountActivated,
    AccountCreated,
    AccountDeleted,
    LicenseExtended,
)
from core.domain.events import DomainEvent, EventHandler
from device_sessions.domain.events import SessionEstablished, SessionSuperseded

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger("audit")

AUDITED_EVENTS = (
    AccountCreated,
    AccountActivated,
    LicenseExtended,
    AccountDeleted,
    SessionEstablished,
    SessionSuperseded,
)


class AuditLogEventHandler(EventHandler):
    """
    Event handler for audit logging.

    Writes every domain event as one structured log record.
    """

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for audit logging.

        Args:
            event: Domain event to log
        """
        audit_logger.info(
            "Audit log: %s - %s",
            event.event_type,
            event.aggregate_id,
            extra=event.to_dict(),
        )


_audit_handler = AuditLogEventHandler()


def register_event_handlers():
    """Register all event handlers with the event bus."""
    from core.infrastructure.events import event_bus

    for event_type in AUDITED_EVENTS:
        event_bus.subscribe(event_type, _audit_handler)

    logger.info("Event handlers registered")
