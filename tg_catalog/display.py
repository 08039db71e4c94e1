from __future__ import annotations

from datetime import datetime

from .config_schema import DisplayConfig
from .post import Post

STAR_SLOTS = 5

_RU_MONTHS_SHORT: tuple[str, ...] = (
    "янв.",
    "февр.",
    "мар.",
    "апр.",
    "мая",
    "июн.",
    "июл.",
    "авг.",
    "сент.",
    "окт.",
    "нояб.",
    "дек.",
)


def display_title(post: Post, display: DisplayConfig) -> str:
    if post.title:
        return post.title
    if post.is_review:
        return display.untitled_review_placeholder
    return display.note_placeholder


def parse_date(value: str) -> datetime | None:
    s = (value or "").strip()
    if not s:
        return None
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(s)
    except ValueError:
        return None


def format_date_label(value: str, display: DisplayConfig) -> str:
    """Render an export date as e.g. '5 мар. 2024', or the placeholder when unparseable."""
    dt = parse_date(value)
    if dt is None:
        return display.date_placeholder
    return f"{dt.day} {_RU_MONTHS_SHORT[dt.month - 1]} {dt.year}"


def star_bar(rating: int) -> list[bool]:
    # Hidden entirely when there is no rating.
    if rating <= 0:
        return []
    return [slot <= rating for slot in range(1, STAR_SLOTS + 1)]


def photo_path(post: Post, display: DisplayConfig) -> str | None:
    if not post.photo:
        return None
    prefix = display.media_prefix or ""
    if prefix and not prefix.endswith("/"):
        prefix += "/"
    return f"{prefix}{post.photo.lstrip('/')}"
