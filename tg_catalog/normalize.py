from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Any, Iterable, Sequence, Union

from .runs import FormattedRun, PlainString, RunKind, TextRun, coerce_run


@dataclass(frozen=True)
class ContentNode:
    """One display unit of a message; `kind` is None for plain strings."""

    text: str
    kind: RunKind | None = None
    href: str | None = None


@dataclass(frozen=True)
class ParseResult:
    content: tuple[ContentNode, ...]
    raw: str
    title_candidate: str | None = None


MessageText = Union[str, Sequence[Any]]


def _node_for(run: TextRun) -> ContentNode:
    if isinstance(run, PlainString):
        return ContentNode(text=run.text)

    kind = run.kind
    if kind is RunKind.text_link:
        return ContentNode(text=run.text, kind=kind, href=run.href)
    if kind in (
        RunKind.bold,
        RunKind.italic,
        RunKind.strikethrough,
        RunKind.hashtag,
    ):
        return ContentNode(text=run.text, kind=kind)
    return ContentNode(text=run.text, kind=RunKind.other)


@dataclass(frozen=True)
class _Fold:
    """Fold state: first bold text and the runs seen so far, newest first."""

    title_candidate: str | None = None
    trail: tuple[Any, TextRun] | None = None


def _step(acc: _Fold, run: TextRun) -> _Fold:
    title = acc.title_candidate
    if (
        title is None
        and isinstance(run, FormattedRun)
        and run.kind is RunKind.bold
    ):
        title = run.text

    return _Fold(title_candidate=title, trail=(acc.trail, run))


def _unwind(trail: tuple[Any, TextRun] | None) -> list[TextRun]:
    runs: list[TextRun] = []
    while trail is not None:
        trail, run = trail
        runs.append(run)
    runs.reverse()
    return runs


def normalize_runs(runs: Iterable[Any]) -> ParseResult:
    folded = reduce(_step, (coerce_run(item) for item in runs), _Fold())
    ordered = _unwind(folded.trail)
    return ParseResult(
        content=tuple(_node_for(run) for run in ordered),
        raw="".join(run.text for run in ordered),
        title_candidate=folded.title_candidate,
    )


def normalize(text: MessageText | None) -> ParseResult:
    """
    Convert a message's `text` field into a content tree, a flattened raw string
    and the first bold run as title candidate.

    A bare string carries no formatting, so it comes back as a single plain node
    with no title. Anything that is neither a string nor a list of runs is
    treated as empty text.
    """
    if isinstance(text, str):
        return ParseResult(content=(ContentNode(text=text),), raw=text)

    if isinstance(text, (list, tuple)):
        return normalize_runs(text)

    return ParseResult(content=(), raw="")
