"""Pydantic schemas for blogs."""

import uuid

from pydantic import BaseModel, Field


class BlogCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=300)
    author: str | None = Field(default=None, max_length=200)
    url: str = Field(..., min_length=1, max_length=2000)
    likes: int | None = Field(default=None, ge=0)


class BlogLikesUpdate(BaseModel):
    likes: int = Field(..., ge=0)


class OwnerSummary(BaseModel):
    """The owning account, as embedded in a blog listing."""
    id: uuid.UUID
    username: str
    name: str

    model_config = {"from_attributes": True}


class BlogRead(BaseModel):
    id: uuid.UUID
    title: str
    author: str | None = None
    url: str
    likes: int
    user: OwnerSummary | None = None

    model_config = {"from_attributes": True}


class AuthorCount(BaseModel):
    author: str
    blogs: int


class AuthorLikes(BaseModel):
    author: str
    likes: int


class BlogStats(BaseModel):
    total_likes: int
    favorite: BlogRead | None = None
    most_blogs: AuthorCount | None = None
    most_likes: AuthorLikes | None = None
