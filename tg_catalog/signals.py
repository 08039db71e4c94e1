from __future__ import annotations

import re

# U+2B50 with the emoji variation selector is tried first so it counts once.
_STAR_RE = re.compile("⭐️|⭐")

# Letters and digits only; `[^\W_]` drops the underscore that `\w` allows.
_TAG_RE = re.compile(r"#([^\W_]+)")


def extract_rating(raw: str) -> int:
    """Count star glyphs anywhere in the text."""
    return len(_STAR_RE.findall(raw or ""))


def normalize_tag(value: str) -> str:
    tag = (value or "").strip()
    if tag.startswith("#"):
        tag = tag[1:].strip()
    return tag.lower()


def extract_tags(raw: str) -> tuple[str, ...]:
    """
    Find #hashtags, lowercase them without the leading '#', and dedupe while
    keeping the order of first occurrence.
    """
    out: list[str] = []
    seen: set[str] = set()
    for match in _TAG_RE.finditer(raw or ""):
        tag = match.group(1).lower()
        if tag in seen:
            continue
        seen.add(tag)
        out.append(tag)
    return tuple(out)
