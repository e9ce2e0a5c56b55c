"""
Database utilities shared by the ORM repositories.
"""

import functools
import logging
from typing import Callable, TypeVar

from django.db import DatabaseError

from core.domain.exceptions import AccountStoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def translate_store_errors(operation: str) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Wrap a synchronous repository method so driver failures surface as
    ``AccountStoreError`` instead of leaking ORM exceptions.

    ``IntegrityError`` is a ``DatabaseError`` subclass; repositories that
    need to react to it must catch it inside the wrapped function.

    Args:
        operation: Name used in the log line and error message
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except DatabaseError as e:
                logger.error("Account store failure during %s: %s", operation, e, exc_info=True)
                raise AccountStoreError(f"Account store failure during {operation}") from e

        return wrapper

    return decorator
