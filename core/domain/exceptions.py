"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class AuthenticationError(DomainException):
    """Base exception for credential and token failures."""

    pass


class InvalidCredentialsError(AuthenticationError):
    """Raised when an email/password pair does not verify."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token is malformed or its signature is bad."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message, code="INVALID_TOKEN")


class TokenExpiredError(AuthenticationError):
    """Raised when a bearer token is past its embedded expiry."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class UnknownAccountError(AuthenticationError):
    """Raised when a token names an account that no longer exists."""

    def __init__(self, message: str = "Account no longer exists"):
        super().__init__(message, code="UNKNOWN_ACCOUNT")


class AuthorizationError(DomainException):
    """Base exception for authenticated callers that may not proceed."""

    pass


class SessionSupersededError(AuthorizationError):
    """Raised when the token belongs to a device displaced by a newer login."""

    def __init__(self, message: str = "Session is active on another device"):
        super().__init__(message, code="SESSION_SUPERSEDED")


class LicenseExpiredError(AuthorizationError):
    """Raised when no license time remains."""

    def __init__(self, message: str = "License has expired"):
        super().__init__(message, code="LICENSE_EXPIRED")


class AccountException(DomainException):
    """Base exception for account administration errors."""

    pass


class AccountNotFoundError(AccountException):
    """Raised when an account is not found."""

    def __init__(self, message: str = "Account not found"):
        super().__init__(message, code="ACCOUNT_NOT_FOUND")


class AccountAlreadyExistsError(AccountException):
    """Raised when creating an account whose email is taken."""

    def __init__(self, message: str = "Account already exists"):
        super().__init__(message, code="ACCOUNT_ALREADY_EXISTS")


class InvalidDurationError(AccountException):
    """Raised when a license duration change would leave it negative."""

    def __init__(self, message: str = "Invalid license duration"):
        super().__init__(message, code="INVALID_DURATION")


class AccountStoreError(DomainException):
    """Raised when the account store cannot be reached or fails a write."""

    def __init__(self, message: str = "Account store unavailable"):
        super().__init__(message, code="STORE_UNAVAILABLE")
