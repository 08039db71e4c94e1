from __future__ import annotations

from collections import Counter
from typing import Any, Collection, Iterable, Mapping

from .normalize import normalize
from .post import Post
from .run_log import RunLogger
from .runs import FormattedRun, RunKind, coerce_run
from .signals import extract_rating, extract_tags

SERVICE_MESSAGE_TYPE = "service"


def _coerce_id(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        v = value.strip()
        if v.lstrip("-").isdigit():
            return int(v)
    return None


def _coerce_str(value: Any) -> str | None:
    if isinstance(value, str):
        s = value.strip()
        return s if s else None
    return None


def _coerce_dimension(value: Any) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    return None


def _has_text(value: Any) -> bool:
    if isinstance(value, str):
        return bool(value)
    if isinstance(value, (list, tuple)):
        return len(value) > 0
    return False


def unknown_run_types(text: Any) -> tuple[str, ...]:
    """Source type strings of runs that fell back to RunKind.other, first-seen order."""
    if not isinstance(text, (list, tuple)):
        return ()

    out: list[str] = []
    for item in text:
        run = coerce_run(item)
        if (
            isinstance(run, FormattedRun)
            and run.kind is RunKind.other
            and run.source_type
            and run.source_type not in out
        ):
            out.append(run.source_type)
    return tuple(out)


def skip_reason(message: Mapping[str, Any]) -> str | None:
    """Return why a message produces no Post, or None when it is eligible."""
    if message.get("type") == SERVICE_MESSAGE_TYPE:
        return "service_message"
    if not _has_text(message.get("text")):
        return "empty_text"
    if _coerce_id(message.get("id")) is None:
        return "missing_id"
    return None


def is_review(
    rating: int,
    title_candidate: str | None,
    tags: Iterable[str],
    review_tags: Collection[str],
) -> bool:
    """
    A post is a review when ANY of these holds:
    - it has at least one star
    - it has a bold title
    - one of its tags is in the curated review tag set
    """
    if rating > 0:
        return True
    if title_candidate is not None:
        return True
    return any(tag in review_tags for tag in tags)


def build_post(
    message: Mapping[str, Any], *, review_tags: Collection[str]
) -> Post | None:
    post_id = _coerce_id(message.get("id"))
    if post_id is None or skip_reason(message) is not None:
        return None

    date = message.get("date")
    parsed = normalize(message.get("text"))
    rating = extract_rating(parsed.raw)
    tags = extract_tags(parsed.raw)

    return Post(
        id=post_id,
        date=date if isinstance(date, str) else "",
        title=parsed.title_candidate,
        content=parsed.content,
        raw_text=parsed.raw.lower(),
        rating=rating,
        tags=tags,
        is_review=is_review(rating, parsed.title_candidate, tags, review_tags),
        photo=_coerce_str(message.get("photo")),
        width=_coerce_dimension(message.get("width")),
        height=_coerce_dimension(message.get("height")),
    )


def build_posts(
    messages: Iterable[Any],
    *,
    review_tags: Collection[str],
    logger: RunLogger | None = None,
) -> tuple[Post, ...]:
    """Build posts in export order, dropping service, empty and malformed messages."""
    posts: list[Post] = []
    skipped = 0
    unknown_kinds: Counter[str] = Counter()

    for message in messages:
        if not isinstance(message, Mapping):
            skipped += 1
            if logger is not None:
                logger.debug("message_skipped", reason="not_a_mapping")
            continue

        reason = skip_reason(message)
        if reason is not None:
            skipped += 1
            if logger is not None:
                logger.debug(
                    "message_skipped",
                    post_id=_coerce_id(message.get("id")),
                    reason=reason,
                )
            continue

        post = build_post(message, review_tags=review_tags)
        if post is not None:
            posts.append(post)
            unknown_kinds.update(unknown_run_types(message.get("text")))

    if logger is not None:
        logger.info(
            "posts_built",
            posts=len(posts),
            skipped=skipped,
            reviews=sum(1 for p in posts if p.is_review),
        )
        if unknown_kinds:
            logger.warning(
                "unknown_run_kinds",
                source_types=dict(unknown_kinds.most_common()),
            )

    return tuple(posts)
