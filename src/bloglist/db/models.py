"""SQLAlchemy ORM models — single source of truth for the database schema.

Learn: Declarative ORM mapping with SQLAlchemy 2.0 style (Mapped[] + mapped_column).
Each class = one table. Alembic auto-generates migrations by comparing
these models to the actual DB.

Key concepts:
- UUID primary keys, stored natively on Postgres and as CHAR(32) elsewhere
- A user's blogs are an ordered relationship (creation order), not a
  denormalized id array; the FK on blogs.user_id is the single owner record
- created_at is set in Python so ordering has sub-second resolution on
  every backend
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_uuid() -> uuid.UUID:
    return uuid.uuid4()


class User(Base):
    """An account that can log in and own blogs.

    Learn: password_hash holds the bcrypt modular-crypt string (salt and
    cost embedded). The plaintext password is never stored, and no
    response schema exposes this column.
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=new_uuid)
    username: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )

    # Relationships
    blogs: Mapped[list["Blog"]] = relationship(
        back_populates="user", order_by="Blog.created_at"
    )


class Blog(Base):
    """A blog entry. user_id is the owner, fixed at creation."""

    __tablename__ = "blogs"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=new_uuid)
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    author: Mapped[str | None] = mapped_column(String(200), nullable=True)
    url: Mapped[str] = mapped_column(String(2000), nullable=False)
    likes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id"), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )

    # Relationships
    user: Mapped["User"] = relationship(back_populates="blogs")
