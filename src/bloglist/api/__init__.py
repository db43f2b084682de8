"""API route aggregation.

All routers registered here get mounted in main.py.

Learn: Identity extraction is applied at the include_router level using
FastAPI's dependencies parameter, so every users/blogs request has its
bearer token checked before the handler runs. A bad token is a 401
even on a public listing. Health and login are mounted without it.
"""

from fastapi import APIRouter, Depends

from bloglist.api.blogs import router as blogs_router
from bloglist.api.health import router as health_router
from bloglist.api.login import router as login_router
from bloglist.api.users import router as users_router
from bloglist.auth.dependencies import extract_identity

# Runs before every handler in the router; FastAPI caches the result
# so handlers that also depend on it don't decode twice.
_identity = [Depends(extract_identity)]

api_router = APIRouter(prefix="/api")

# Open routes: no identity extraction
api_router.include_router(health_router, tags=["health"])
api_router.include_router(login_router, tags=["login"])

# Routes behind identity extraction
api_router.include_router(users_router, tags=["users"], dependencies=_identity)
api_router.include_router(blogs_router, tags=["blogs"], dependencies=_identity)
