"""Blog API routes.

Learn: Reads are public. Creation needs an identified account (401
otherwise). Delete and update take the request's identity as-is and
let BlogService order the checks: the blog must exist (404) before
identity (401) and ownership (401) are looked at, so a missing blog is
a 404 for everyone.
"""

import uuid

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist import stats
from bloglist.auth.dependencies import RequestContext, extract_identity, require_account
from bloglist.db.engine import get_db
from bloglist.db.models import User
from bloglist.errors import NotFoundError
from bloglist.schemas.blog import BlogCreate, BlogLikesUpdate, BlogRead, BlogStats
from bloglist.services.blog_service import BLOG_NOT_FOUND, BlogService

router = APIRouter(prefix="/blogs")


def _svc(db: AsyncSession = Depends(get_db)) -> BlogService:
    return BlogService(db)


def _blog_id(blog_id: str) -> uuid.UUID:
    # An id that can't exist is just another missing blog.
    try:
        return uuid.UUID(blog_id)
    except ValueError:
        raise NotFoundError(BLOG_NOT_FOUND)


@router.get("", response_model=list[BlogRead])
async def list_blogs(svc: BlogService = Depends(_svc)):
    return await svc.list_blogs()


@router.get("/stats", response_model=BlogStats)
async def blog_stats(svc: BlogService = Depends(_svc)):
    """Totals and leaders across all blogs."""
    blogs = await svc.list_blogs()
    favorite = stats.favorite_blog(blogs)
    return BlogStats(
        total_likes=stats.total_likes(blogs),
        favorite=BlogRead.model_validate(favorite) if favorite else None,
        most_blogs=stats.most_blogs(blogs),
        most_likes=stats.most_likes(blogs),
    )


@router.post("", response_model=BlogRead, status_code=201)
async def create_blog(
    body: BlogCreate,
    account: User = Depends(require_account),
    svc: BlogService = Depends(_svc),
):
    return await svc.create_blog(
        owner=account,
        title=body.title,
        author=body.author,
        url=body.url,
        likes=body.likes,
    )


@router.delete("/{blog_id}", status_code=204)
async def delete_blog(
    blog_id: uuid.UUID = Depends(_blog_id),
    context: RequestContext = Depends(extract_identity),
    svc: BlogService = Depends(_svc),
):
    await svc.delete_blog(context.account, blog_id)
    return Response(status_code=204)


@router.put("/{blog_id}", response_model=BlogRead)
async def update_likes(
    body: BlogLikesUpdate,
    blog_id: uuid.UUID = Depends(_blog_id),
    context: RequestContext = Depends(extract_identity),
    svc: BlogService = Depends(_svc),
):
    """Set a blog's like count. Owner only."""
    return await svc.update_likes(context.account, blog_id, body.likes)
