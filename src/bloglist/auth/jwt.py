"""JWT token creation and verification.

Learn: JWT (JSON Web Token) provides stateless authentication. The
token carries the account id ("sub") plus issued-at and expiry, signed
with HMAC-SHA256 using the process-wide secret. Nothing is stored
server-side, so there is no revocation: a token is good until it expires.

The codec gets its secret from the Settings object it's constructed
with. It never reads the environment itself.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt

from bloglist.config import Settings
from bloglist.errors import AuthenticationError, FatalConfigError

REQUIRED_CLAIMS = ["sub", "iat", "exp"]


class TokenError(AuthenticationError):
    """Raised when a token fails verification."""


class MalformedTokenError(TokenError):
    """Not a parseable JWT, or missing required claims."""


class InvalidSignatureError(TokenError):
    """Signature doesn't match the signing secret."""


class TokenExpiredError(TokenError):
    """Token is past its exp claim."""


@dataclass(frozen=True)
class TokenClaims:
    """The verified contents of a bearer token."""

    subject_id: uuid.UUID
    issued_at: datetime
    expires_at: datetime
    username: Optional[str] = None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenCodec:
    """Issue and decode signed access tokens."""

    def __init__(
        self,
        settings: Settings,
        clock: Callable[[], datetime] = _utcnow,
    ):
        if not settings.jwt_secret:
            raise FatalConfigError("JWT signing secret is not configured")
        self._secret = settings.jwt_secret
        self._algorithm = settings.jwt_algorithm
        self.ttl = timedelta(minutes=settings.access_token_expire_minutes)
        self._clock = clock

    def issue(self, account) -> str:
        """Create a signed access token for an account."""
        now = self._clock()
        payload = {
            "sub": str(account.id),
            "username": account.username,
            "iat": now,
            "exp": now + self.ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> TokenClaims:
        """Verify and decode a token.

        Returns the claims on success.
        Raises MalformedTokenError, InvalidSignatureError or
        TokenExpiredError on failure.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError:
            raise TokenExpiredError("Token has expired")
        except jwt.InvalidSignatureError:
            raise InvalidSignatureError("Token signature is invalid")
        except jwt.InvalidTokenError as e:
            raise MalformedTokenError(f"Malformed token: {e}")

        try:
            subject_id = uuid.UUID(str(payload["sub"]))
        except ValueError:
            raise MalformedTokenError("Malformed token: subject is not an id")

        return TokenClaims(
            subject_id=subject_id,
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            username=payload.get("username"),
        )
