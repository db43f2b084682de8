"""FastAPI auth dependencies.

Learn: These are used as Depends() in routers and route handlers to
extract and validate the current identity from the request.

Identity extraction ends in one of three states:
- ANONYMOUS: no "Authorization: Bearer <token>" header. The request
  proceeds; handlers that need an identity use require_account and 401.
- REJECTED: a bearer token was sent but didn't decode, or its subject
  no longer exists. 401 immediately; the handler never runs.
- IDENTIFIED: the token decoded and resolved to a live account.

The outcome is returned as a RequestContext value rather than stashed
on the request object. FastAPI caches a dependency per request, so a
router-level Depends(extract_identity) and a handler's
Depends(require_account) share one extraction (and one DB session).
"""

import enum
from dataclasses import dataclass
from typing import Optional

import structlog
from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.auth.jwt import TokenCodec, TokenError
from bloglist.auth.password import PasswordHasher
from bloglist.db.engine import get_db
from bloglist.db.models import User
from bloglist.errors import AuthenticationError
from bloglist.services.account_service import AccountService

logger = structlog.get_logger()

BEARER_PREFIX = "Bearer "
TOKEN_REJECTED = "token missing or invalid"


class IdentityState(str, enum.Enum):
    IDENTIFIED = "identified"
    ANONYMOUS = "anonymous"
    REJECTED = "rejected"


@dataclass(frozen=True)
class RequestContext:
    """Who is making the request, as far as the auth pipeline knows."""

    state: IdentityState
    account: Optional[User] = None

    @property
    def is_identified(self) -> bool:
        return self.state is IdentityState.IDENTIFIED


ANONYMOUS = RequestContext(state=IdentityState.ANONYMOUS)


def get_token_codec(request: Request) -> TokenCodec:
    """The codec built once at startup by create_app()."""
    return request.app.state.token_codec


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_account_service(
    request: Request,
    db: AsyncSession = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> AccountService:
    settings = request.app.state.settings
    return AccountService(db, hasher, min_password_length=settings.min_password_length)


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Pull the token out of an Authorization header value, if any."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    return token or None


async def extract_identity(
    authorization: Optional[str] = Header(None),
    codec: TokenCodec = Depends(get_token_codec),
    accounts: AccountService = Depends(get_account_service),
) -> RequestContext:
    """Resolve the request's bearer token to an account.

    Raises AuthenticationError (401) for the REJECTED outcome.
    """
    token = bearer_token(authorization)
    if token is None:
        return ANONYMOUS

    try:
        claims = codec.decode(token)
    except TokenError as e:
        logger.info(
            "auth.token_rejected",
            state=IdentityState.REJECTED.value,
            reason=type(e).__name__,
        )
        raise AuthenticationError(TOKEN_REJECTED)

    account = await accounts.find_by_id(claims.subject_id)
    if account is None:
        logger.info(
            "auth.token_rejected",
            state=IdentityState.REJECTED.value,
            reason="UnknownSubject",
            subject_id=str(claims.subject_id),
        )
        raise AuthenticationError(TOKEN_REJECTED)

    return RequestContext(state=IdentityState.IDENTIFIED, account=account)


async def require_account(
    context: RequestContext = Depends(extract_identity),
) -> User:
    """The "hard" variant: 401 unless the request is IDENTIFIED."""
    if not context.is_identified:
        raise AuthenticationError(TOKEN_REJECTED)
    return context.account
