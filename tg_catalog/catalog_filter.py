from __future__ import annotations

from enum import Enum
from typing import Iterable

from .post import Post


class Category(str, Enum):
    """Category selector values offered by the catalog view."""

    reviews = "reviews"
    notes = "notes"
    all = "all"


def coerce_category(value: Category | str) -> Category:
    if isinstance(value, Category):
        return value
    allowed = ", ".join(c.value for c in Category)
    if not isinstance(value, str):
        raise ValueError(f"Unknown category {value!r}; expected one of: {allowed}")
    try:
        return Category(value.strip().lower())
    except ValueError:
        raise ValueError(f"Unknown category {value!r}; expected one of: {allowed}") from None


def matches(post: Post, category: Category, needle: str) -> bool:
    if category is Category.reviews and not post.is_review:
        return False
    if category is Category.notes and post.is_review:
        return False
    if needle:
        return needle in post.raw_text
    return True


def filter_posts(
    posts: Iterable[Post], category: Category | str = Category.all, query: str = ""
) -> tuple[Post, ...]:
    """
    Return the visible subset of `posts`, keeping their order.

    The category restriction and the case-insensitive substring query both have
    to match; an empty query matches everything.
    """
    cat = coerce_category(category)
    needle = (query or "").lower()
    return tuple(p for p in posts if matches(p, cat, needle))
