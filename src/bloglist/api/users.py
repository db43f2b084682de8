"""User API routes — registration and listing."""

from fastapi import APIRouter, Depends

from bloglist.auth.dependencies import get_account_service
from bloglist.schemas.account import UserCreate, UserRead
from bloglist.services.account_service import AccountService

router = APIRouter(prefix="/users")


@router.post("", response_model=UserRead, status_code=201)
async def create_user(
    body: UserCreate,
    svc: AccountService = Depends(get_account_service),
):
    return await svc.create(
        username=body.username, name=body.name, password=body.password
    )


@router.get("", response_model=list[UserRead])
async def list_users(svc: AccountService = Depends(get_account_service)):
    return await svc.list_accounts()
