"""Account service — the credential store.

Learn: Service layer separates business logic from HTTP routing.
API routes call services, services call the database.

Usernames are unique. create() checks first so the common case gets a
clean ConflictError, and also catches the unique-constraint violation
so two concurrent registrations of one name still end with exactly
one winner. bcrypt runs in Starlette's thread pool to keep the event
loop free.
"""

import uuid

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from starlette.concurrency import run_in_threadpool

from bloglist.auth.password import PasswordHasher
from bloglist.db.models import User
from bloglist.errors import ConflictError, ValidationError

logger = structlog.get_logger()

MIN_PASSWORD_LENGTH = 3
DUPLICATE_USERNAME = "expected `username` to be unique"


class AccountService:
    """Business logic for accounts and their credentials."""

    def __init__(
        self,
        db: AsyncSession,
        hasher: PasswordHasher,
        min_password_length: int = MIN_PASSWORD_LENGTH,
    ):
        self.db = db
        self.hasher = hasher
        self.min_password_length = min_password_length

    async def create(self, username: str, name: str, password: str) -> User:
        if password is None or len(password) < self.min_password_length:
            raise ValidationError(
                f"password must be at least {self.min_password_length} characters long"
            )
        if await self.find_by_username(username) is not None:
            raise ConflictError(DUPLICATE_USERNAME)

        password_hash = await run_in_threadpool(self.hasher.hash, password)
        user = User(
            username=username, name=name, password_hash=password_hash, blogs=[]
        )
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise ConflictError(DUPLICATE_USERNAME)

        logger.info("accounts.created", user_id=str(user.id), username=username)
        return user

    async def find_by_username(self, username: str) -> User | None:
        result = await self.db.execute(select(User).where(User.username == username))
        return result.scalars().first()

    async def find_by_id(self, user_id: uuid.UUID) -> User | None:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalars().first()

    async def list_accounts(self) -> list[User]:
        result = await self.db.execute(
            select(User).options(selectinload(User.blogs)).order_by(User.created_at)
        )
        return list(result.scalars().all())

    async def verify_password(self, user: User, password: str) -> bool:
        return await run_in_threadpool(self.hasher.verify, password, user.password_hash)
