"""
Token issuer.

Mints and verifies signed bearer tokens binding an account and a device.
A token never outlives the license: its lifetime is always the remaining
license time computed immediately before issuance.

Device exclusivity is not checked here; see SessionRegistry.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

import jwt

from accounts.domain.license_clock import Clock, system_clock
from core.domain.exceptions import InvalidTokenError, TokenExpiredError

DEFAULT_ALGORITHM = "HS256"
DEFAULT_ISSUER = "device-license-service"
REQUIRED_CLAIMS = ["sub", "device", "iat", "exp", "jti"]


@dataclass(frozen=True)
class TokenClaims:
    """Verified contents of a bearer token."""

    email: str
    device_id: str
    issued_at: datetime
    expires_at: datetime
    token_id: str


class TokenIssuer:
    """
    HMAC-signed JWT issuer.

    Expiry and issued-at are checked against the injected clock rather
    than by PyJWT, so a request evaluates license time and token time
    against the same instant.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = DEFAULT_ALGORITHM,
        issuer: str = DEFAULT_ISSUER,
        leeway_seconds: int = 0,
        clock: Optional[Clock] = None,
    ):
        if not secret:
            raise ValueError("Token secret is required")
        self.secret = secret
        self.algorithm = algorithm
        self.issuer = issuer
        self.leeway_seconds = leeway_seconds
        self.clock = clock or system_clock

    @staticmethod
    def expiry(now: datetime, ttl_seconds: int) -> datetime:
        """Expiry embedded in a token issued at ``now``, in whole seconds."""
        return datetime.fromtimestamp(int(now.timestamp()) + int(ttl_seconds), tz=timezone.utc)

    def issue(
        self,
        email: str,
        device_id: str,
        ttl_seconds: int,
        now: Optional[datetime] = None,
    ) -> str:
        """
        Issue a token expiring ``ttl_seconds`` from now.

        Args:
            email: Account email
            device_id: Device identifier
            ttl_seconds: Remaining license seconds; must be positive
            now: Issue time; defaults to the issuer clock

        Returns:
            Encoded token string
        """
        if ttl_seconds <= 0:
            raise ValueError("Token lifetime must be positive")
        issued_at = int((now or self.clock()).timestamp())
        payload = {
            "sub": email,
            "device": device_id,
            "iat": issued_at,
            "exp": issued_at + int(ttl_seconds),
            "iss": self.issuer,
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Verify signature, issuer, required claims and expiry.

        Raises:
            InvalidTokenError: Malformed token, bad signature, wrong issuer,
                missing claims, or issued in the future beyond leeway
            TokenExpiredError: Expiry has passed
        """
        if not token:
            raise InvalidTokenError("Token is required")
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                options={
                    "require": REQUIRED_CLAIMS,
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_nbf": False,
                },
            )
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e

        try:
            issued_at = int(payload["iat"])
            expires_at = int(payload["exp"])
        except (TypeError, ValueError) as e:
            raise InvalidTokenError("Invalid token timestamps") from e
        if not isinstance(payload["sub"], str) or not isinstance(payload["device"], str):
            raise InvalidTokenError("Invalid token subject")

        now = self.clock().timestamp()
        if issued_at > now + self.leeway_seconds:
            raise InvalidTokenError("Token issued in the future")
        if expires_at <= now - self.leeway_seconds:
            raise TokenExpiredError()

        return TokenClaims(
            email=payload["sub"],
            device_id=payload["device"],
            issued_at=datetime.fromtimestamp(issued_at, tz=timezone.utc),
            expires_at=datetime.fromtimestamp(expires_at, tz=timezone.utc),
            token_id=str(payload["jti"]),
        )
