from __future__ import annotations

from dataclasses import dataclass

from .runs import RunKind


@dataclass(frozen=True)
class StyleDescriptor:
    """How a renderer should present one content node."""

    element: str
    css_classes: tuple[str, ...] = ()
    block: bool = False


_PLAIN = StyleDescriptor(element="span")

_STYLES: dict[RunKind, StyleDescriptor] = {
    RunKind.bold: StyleDescriptor(
        element="strong",
        css_classes=("font-bold", "text-slate-900", "dark:text-slate-100"),
    ),
    RunKind.italic: StyleDescriptor(
        element="em",
        css_classes=(
            "italic",
            "text-slate-700",
            "dark:text-slate-300",
            "border-l-2",
            "border-slate-300",
            "pl-2",
            "my-2",
            "block",
        ),
        block=True,
    ),
    RunKind.hashtag: StyleDescriptor(
        element="span",
        css_classes=(
            "text-blue-600",
            "dark:text-blue-300",
            "font-medium",
            "bg-blue-50",
            "dark:bg-blue-900/30",
            "px-1",
            "rounded",
            "mx-0.5",
            "text-sm",
        ),
    ),
    RunKind.text_link: StyleDescriptor(
        element="a",
        css_classes=("text-blue-600", "hover:underline"),
    ),
    RunKind.strikethrough: StyleDescriptor(
        element="s",
        css_classes=("decoration-slate-400", "text-slate-500"),
    ),
}


def format_style(kind: RunKind | None) -> StyleDescriptor:
    # Plain strings and unknown kinds share the generic span.
    if kind is None:
        return _PLAIN
    return _STYLES.get(kind, _PLAIN)
