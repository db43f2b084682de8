"""Login API.

Learn: POST /login is mounted without the identity-extraction
dependency, so a client that sends a stale token along with its
credentials can still log in.
"""

from fastapi import APIRouter, Depends

from bloglist.auth.dependencies import get_account_service, get_token_codec
from bloglist.auth.jwt import TokenCodec
from bloglist.schemas.account import LoginRequest, LoginResponse
from bloglist.services.account_service import AccountService
from bloglist.services.login_service import LoginService

router = APIRouter()


def _svc(
    accounts: AccountService = Depends(get_account_service),
    codec: TokenCodec = Depends(get_token_codec),
) -> LoginService:
    return LoginService(accounts, codec)


@router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest, svc: LoginService = Depends(_svc)):
    """Username + password → bearer token."""
    result = await svc.login(body.username, body.password)
    account = result.account
    return LoginResponse(
        token=result.token,
        username=account.username,
        name=account.name,
        id=account.id,
    )
