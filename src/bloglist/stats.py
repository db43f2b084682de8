"""Summary statistics over a list of blogs.

Works on anything with title/author/likes attributes: ORM Blog rows
or BlogRead schemas. Empty input gives 0 / None rather than raising.
Ties go to the blog or author seen first.
"""

from collections import Counter
from typing import Iterable, Optional


def total_likes(blogs: Iterable) -> int:
    return sum(blog.likes or 0 for blog in blogs)


def favorite_blog(blogs: Iterable):
    """The blog with the most likes, or None."""
    favorite = None
    for blog in blogs:
        if favorite is None or (blog.likes or 0) > (favorite.likes or 0):
            favorite = blog
    return favorite


def most_blogs(blogs: Iterable) -> Optional[dict]:
    """{"author", "blogs"} for the author with the most blogs."""
    counts = Counter(blog.author for blog in blogs if blog.author)
    if not counts:
        return None
    author, count = counts.most_common(1)[0]
    return {"author": author, "blogs": count}


def most_likes(blogs: Iterable) -> Optional[dict]:
    """{"author", "likes"} for the author whose blogs have the most likes."""
    likes: Counter = Counter()
    for blog in blogs:
        if blog.author:
            likes[blog.author] += blog.likes or 0
    if not likes:
        return None
    author, total = likes.most_common(1)[0]
    return {"author": author, "likes": total}
