"""Ownership authorization for blog mutations.

Learn: The only authorization rule in the service is "owner vs not
owner". A blog's user_id is set once at creation; a mutation is allowed
iff it matches the authenticated account's id. Callers check that the
blog exists first, so a 404 never reveals who owns what.
"""

import enum

from bloglist.db.models import Blog, User
from bloglist.errors import AuthorizationError


class Decision(str, enum.Enum):
    ALLOWED = "allowed"
    DENIED = "denied"


def authorize(account: User, blog: Blog) -> Decision:
    """Decide whether account may mutate blog."""
    if blog.user_id == account.id:
        return Decision.ALLOWED
    return Decision.DENIED


def ensure_owner(account: User, blog: Blog) -> None:
    """Raise AuthorizationError unless account owns blog."""
    if authorize(account, blog) is Decision.DENIED:
        raise AuthorizationError("unauthorized")
