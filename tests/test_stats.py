"""Blog statistics helpers."""

from types import SimpleNamespace

import pytest

from bloglist import stats


def _blog(title, author, likes):
    return SimpleNamespace(title=title, author=author, likes=likes)


@pytest.fixture
def blogs():
    return [
        _blog("React patterns", "Michael Chan", 7),
        _blog("Go To Statement Considered Harmful", "Edsger W. Dijkstra", 5),
        _blog("Canonical string reduction", "Edsger W. Dijkstra", 12),
        _blog("First class tests", "Robert C. Martin", 10),
        _blog("TDD harms architecture", "Robert C. Martin", 0),
        _blog("Type wars", "Robert C. Martin", 2),
    ]


def test_total_likes(blogs):
    assert stats.total_likes(blogs) == 36


def test_total_likes_single_and_empty():
    assert stats.total_likes([_blog("a", "b", 5)]) == 5
    assert stats.total_likes([]) == 0


def test_favorite_blog(blogs):
    assert stats.favorite_blog(blogs).title == "Canonical string reduction"


def test_favorite_blog_tie_goes_to_first():
    first, second = _blog("first", "a", 3), _blog("second", "b", 3)
    assert stats.favorite_blog([first, second]) is first


def test_most_blogs(blogs):
    assert stats.most_blogs(blogs) == {"author": "Robert C. Martin", "blogs": 3}


def test_most_likes(blogs):
    assert stats.most_likes(blogs) == {"author": "Edsger W. Dijkstra", "likes": 17}


def test_empty_list():
    assert stats.favorite_blog([]) is None
    assert stats.most_blogs([]) is None
    assert stats.most_likes([]) is None
