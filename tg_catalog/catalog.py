from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from threading import Lock
from typing import Collection, Iterable

from .builder import build_posts
from .catalog_filter import Category, filter_posts
from .export import ChannelExport
from .post import Post
from .run_log import RunLogger


@dataclass(frozen=True)
class CatalogStats:
    total: int
    reviews: int
    notes: int
    rated: int
    titled: int
    with_photo: int
    top_tags: list[tuple[str, int]]


def catalog_stats(posts: Iterable[Post], *, top_n: int = 10) -> CatalogStats:
    items = list(posts)
    tag_counts: Counter[str] = Counter()
    for post in items:
        tag_counts.update(post.tags)

    reviews = sum(1 for p in items if p.is_review)
    return CatalogStats(
        total=len(items),
        reviews=reviews,
        notes=len(items) - reviews,
        rated=sum(1 for p in items if p.rating > 0),
        titled=sum(1 for p in items if p.title is not None),
        with_photo=sum(1 for p in items if p.photo),
        top_tags=tag_counts.most_common(max(0, top_n)),
    )


class CatalogCache:
    """
    Memoizes post building per export identity.

    Building is keyed by the export's content hash and the review tag set, so a
    changed export or a different classification config rebuilds the posts.
    Filtering is never cached.
    """

    def __init__(self, *, review_tags: Collection[str], max_entries: int = 4) -> None:
        if max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self._review_tags = frozenset(review_tags)
        self._max_entries = max_entries
        self._entries: dict[tuple[str, frozenset[str]], tuple[Post, ...]] = {}
        self._lock = Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def posts(
        self, export: ChannelExport, *, logger: RunLogger | None = None
    ) -> tuple[Post, ...]:
        key = (export.sha256, self._review_tags)

        with self._lock:
            cached = self._entries.get(key)
        if cached is not None:
            if logger is not None:
                logger.debug("catalog_cache_hit", export_sha256=export.sha256)
            return cached

        posts = build_posts(export.messages, review_tags=self._review_tags, logger=logger)

        with self._lock:
            if key not in self._entries and len(self._entries) >= self._max_entries:
                # Oldest entry goes first; dicts keep insertion order.
                oldest = next(iter(self._entries))
                del self._entries[oldest]
            self._entries[key] = posts

        return posts

    def view(
        self,
        export: ChannelExport,
        category: Category | str = Category.all,
        query: str = "",
        *,
        logger: RunLogger | None = None,
    ) -> tuple[Post, ...]:
        return filter_posts(self.posts(export, logger=logger), category, query)
