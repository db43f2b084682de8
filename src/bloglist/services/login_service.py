"""Login — exchange username + password for a bearer token.

Learn: Both failure paths (unknown username, wrong password) raise the
same AuthenticationError with the same message, and both pay for one
bcrypt verification, so neither the body nor the timing tells an
attacker which usernames exist.
"""

from dataclasses import dataclass

import structlog
from starlette.concurrency import run_in_threadpool

from bloglist.auth.jwt import TokenCodec
from bloglist.db.models import User
from bloglist.errors import AuthenticationError
from bloglist.services.account_service import AccountService

logger = structlog.get_logger()

INVALID_CREDENTIALS = "invalid username or password"


@dataclass(frozen=True)
class LoginResult:
    token: str
    account: User


class LoginService:
    def __init__(self, accounts: AccountService, codec: TokenCodec):
        self.accounts = accounts
        self.codec = codec

    async def login(self, username: str, password: str) -> LoginResult:
        account = await self.accounts.find_by_username(username)
        if account is None:
            await run_in_threadpool(self.accounts.hasher.verify_dummy, password)
            logger.info("auth.login_failed", username=username)
            raise AuthenticationError(INVALID_CREDENTIALS)

        if not await self.accounts.verify_password(account, password):
            logger.info("auth.login_failed", username=username)
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.info("auth.login_succeeded", user_id=str(account.id))
        return LoginResult(token=self.codec.issue(account), account=account)
