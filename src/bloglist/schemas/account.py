"""Pydantic schemas for accounts and login.

Learn: Pydantic v2 models validate request/response data. Separate
"Create" schemas (input) from "Read" schemas (output) for clean APIs.
No Read schema has a password_hash field, so the hash can't leak into
a response even by accident.

The password length rule lives in AccountService, not here, so a short
password gets the same {"error": ...} shape as a duplicate username.
"""

import uuid

from pydantic import BaseModel, Field


# ─── Accounts ───────────────────────────────────────────

class UserCreate(BaseModel):
    username: str = Field(..., min_length=3, max_length=100)
    name: str = Field(default="", max_length=100)
    password: str


class BlogSummary(BaseModel):
    """A blog as listed under its owner."""
    id: uuid.UUID
    title: str
    author: str | None = None
    url: str
    likes: int

    model_config = {"from_attributes": True}


class UserRead(BaseModel):
    id: uuid.UUID
    username: str
    name: str
    blogs: list[BlogSummary] = []

    model_config = {"from_attributes": True}


# ─── Login ──────────────────────────────────────────────

class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    token: str
    username: str
    name: str
    id: uuid.UUID
