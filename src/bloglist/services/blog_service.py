"""Blog service — listing, creation, and owner-guarded mutation.

Learn: Ownership is enforced here, not in the routes, so every caller
goes through the same check. Order of checks for a mutation is fixed:
the blog must exist (404) before ownership is looked at (401), so a
non-owner learns nothing about blogs that don't exist.

A delete racing a concurrent likes update on the same blog is settled
by the database (last writer wins, or the update finds nothing); no
application-level locking.
"""

import uuid

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from bloglist.auth.ownership import ensure_owner
from bloglist.db.models import Blog, User
from bloglist.errors import AuthenticationError, NotFoundError

logger = structlog.get_logger()

BLOG_NOT_FOUND = "blog not found"


class BlogService:
    """Business logic for blogs."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_blogs(self) -> list[Blog]:
        result = await self.db.execute(
            select(Blog).options(selectinload(Blog.user)).order_by(Blog.created_at)
        )
        return list(result.scalars().all())

    async def get_blog(self, blog_id: uuid.UUID) -> Blog | None:
        result = await self.db.execute(
            select(Blog).where(Blog.id == blog_id).options(selectinload(Blog.user))
        )
        return result.scalars().first()

    async def create_blog(
        self,
        owner: User,
        title: str,
        url: str,
        author: str | None = None,
        likes: int | None = None,
    ) -> Blog:
        """Create a blog owned by owner. It joins the end of owner's blogs."""
        blog = Blog(
            title=title,
            author=author,
            url=url,
            likes=likes or 0,
            user_id=owner.id,
        )
        self.db.add(blog)
        await self.db.commit()
        logger.info("blogs.created", blog_id=str(blog.id), user_id=str(owner.id))
        return await self.get_blog(blog.id)

    async def _get_owned(self, account: User | None, blog_id: uuid.UUID) -> Blog:
        blog = await self.get_blog(blog_id)
        if blog is None:
            raise NotFoundError(BLOG_NOT_FOUND)
        if account is None:
            raise AuthenticationError()
        ensure_owner(account, blog)
        return blog

    async def delete_blog(self, account: User | None, blog_id: uuid.UUID) -> None:
        blog = await self._get_owned(account, blog_id)
        await self.db.delete(blog)
        await self.db.commit()
        logger.info("blogs.deleted", blog_id=str(blog_id), user_id=str(account.id))

    async def update_likes(
        self, account: User | None, blog_id: uuid.UUID, likes: int
    ) -> Blog:
        blog = await self._get_owned(account, blog_id)
        blog.likes = likes
        await self.db.commit()
        logger.info("blogs.likes_updated", blog_id=str(blog_id), likes=likes)
        return blog
