from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union


class RunKind(str, Enum):
    """Formatting kinds a Telegram text run can carry."""

    bold = "bold"
    italic = "italic"
    strikethrough = "strikethrough"
    hashtag = "hashtag"
    text_link = "text_link"
    other = "other"

    @classmethod
    def from_source(cls, value: Any) -> "RunKind":
        if isinstance(value, str):
            try:
                return cls(value.strip())
            except ValueError:
                pass
        return cls.other


@dataclass(frozen=True)
class PlainString:
    """A bare string entry inside a message's run list."""

    text: str = ""


@dataclass(frozen=True)
class FormattedRun:
    """
    A styled run from the export, e.g. {"type": "bold", "text": "Title"}.

    `source_type` keeps the export's original type string so runs that fall
    back to RunKind.other can still be told apart.
    """

    kind: RunKind
    text: str = ""
    href: str | None = None
    source_type: str | None = None


TextRun = Union[PlainString, FormattedRun]


def _coerce_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _coerce_href(value: Any) -> str | None:
    if isinstance(value, str):
        s = value.strip()
        return s if s else None
    return None


def coerce_run(item: Any) -> TextRun:
    """
    Best-effort conversion of one export run entry into a TextRun.

    Never raises: missing text becomes "" and unknown types become RunKind.other.
    """
    if isinstance(item, (PlainString, FormattedRun)):
        return item

    if isinstance(item, str):
        return PlainString(item)

    if isinstance(item, Mapping):
        source_type = item.get("type")
        return FormattedRun(
            kind=RunKind.from_source(source_type),
            text=_coerce_text(item.get("text")),
            href=_coerce_href(item.get("href")),
            source_type=source_type if isinstance(source_type, str) else None,
        )

    return FormattedRun(kind=RunKind.other)
