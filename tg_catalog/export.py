from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Sequence

from .errors import ExportError


@dataclass(frozen=True)
class ChannelExport:
    """
    A loaded Telegram export document (the `result.json` of a channel).

    When no `sha256` is given it is computed from `name` and `messages`, so
    every export carries a content identity.
    """

    messages: Sequence[Any]
    name: str | None = None
    sha256: str = ""

    def __post_init__(self) -> None:
        if not self.sha256:
            identity = export_sha256({"name": self.name, "messages": list(self.messages)})
            object.__setattr__(self, "sha256", identity)


def export_sha256(document: Any) -> str:
    """Stable identity of an export's contents, independent of key order."""
    payload = json.dumps(
        document,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    ).encode("utf-8")
    return hashlib.sha256(payload).hexdigest()


def export_from_document(document: Any) -> ChannelExport:
    """
    Wrap an already-parsed export document.

    A missing `messages` key is an empty channel; a non-list `messages` value is
    an ExportError since nothing in it can be trusted.
    """
    if not isinstance(document, Mapping):
        raise ExportError("Export document must be a JSON object")

    messages = document.get("messages")
    if messages is None:
        messages = []
    if not isinstance(messages, list):
        raise ExportError("Export field `messages` must be a list")

    name = document.get("name")
    return ChannelExport(
        messages=tuple(messages),
        name=(name.strip() or None) if isinstance(name, str) else None,
        sha256=export_sha256(document),
    )


def load_export(path: str | Path) -> ChannelExport:
    p = Path(path)

    if not p.exists():
        raise ExportError(f"Export file not found: {p}")

    try:
        raw_text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ExportError(f"Failed to read export file: {p}") from e

    try:
        document = json.loads(raw_text)
    except json.JSONDecodeError as e:
        raise ExportError(f"Failed to parse JSON in {p}: {e}") from e

    try:
        return export_from_document(document)
    except ExportError as e:
        raise ExportError(f"{e} ({p})") from e
