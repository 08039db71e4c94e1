from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .normalize import ContentNode


@dataclass(frozen=True)
class Post:
    """A classified channel message, ready for display, search and filtering."""

    id: int
    date: str
    title: str | None
    content: tuple[ContentNode, ...]
    raw_text: str
    rating: int = 0
    tags: tuple[str, ...] = ()
    is_review: bool = False

    photo: str | None = None
    width: int | None = None
    height: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date,
            "title": self.title,
            "content": [
                {
                    "text": node.text,
                    "kind": node.kind.value if node.kind is not None else None,
                    "href": node.href,
                }
                for node in self.content
            ],
            "raw_text": self.raw_text,
            "rating": self.rating,
            "tags": list(self.tags),
            "is_review": self.is_review,
            "photo": self.photo,
            "width": self.width,
            "height": self.height,
        }
