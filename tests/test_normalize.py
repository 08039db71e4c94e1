from __future__ import annotations

import unittest

from tg_catalog.normalize import ContentNode, normalize
from tg_catalog.runs import FormattedRun, PlainString, RunKind


class TestNormalize(unittest.TestCase):
    def test_extracts_bold_title_and_concatenates_text(self) -> None:
        result = normalize(
            [
                {"type": "bold", "text": "Title"},
                "\nОписание",
                {"type": "hashtag", "text": "#фентези"},
            ]
        )

        self.assertEqual(result.title_candidate, "Title")
        self.assertEqual(result.raw, "Title\nОписание#фентези")
        self.assertEqual(len(result.content), 3)
        self.assertEqual(result.content[0], ContentNode(text="Title", kind=RunKind.bold))
        self.assertEqual(result.content[1], ContentNode(text="\nОписание"))
        self.assertEqual(result.content[2].kind, RunKind.hashtag)

    def test_italic_and_strikethrough_reach_raw(self) -> None:
        result = normalize(
            [
                {"type": "italic", "text": "quote"},
                {"type": "strikethrough", "text": "old"},
            ]
        )
        self.assertEqual(result.raw, "quoteold")
        self.assertIsNone(result.title_candidate)

    def test_bare_string_round_trips(self) -> None:
        result = normalize("Just text")
        self.assertEqual(result.raw, "Just text")
        self.assertIsNone(result.title_candidate)
        self.assertEqual(result.content, (ContentNode(text="Just text"),))

    def test_first_bold_wins(self) -> None:
        result = normalize(
            [
                "intro ",
                {"type": "bold", "text": "First"},
                {"type": "bold", "text": "Second"},
                {"type": "bold", "text": "Third"},
            ]
        )
        self.assertEqual(result.title_candidate, "First")

    def test_text_link_keeps_href(self) -> None:
        result = normalize(
            [{"type": "text_link", "text": "read", "href": "https://example.com/b"}]
        )
        node = result.content[0]
        self.assertEqual(node.kind, RunKind.text_link)
        self.assertEqual(node.href, "https://example.com/b")
        self.assertEqual(result.raw, "read")
        self.assertIsNone(result.title_candidate)

    def test_unknown_kind_is_kept_in_raw(self) -> None:
        result = normalize(
            [
                {"type": "spoiler", "text": "hidden "},
                {"type": "custom_emoji", "text": "⭐"},
                "tail",
            ]
        )
        self.assertEqual(result.raw, "hidden ⭐tail")
        self.assertEqual(result.content[0].kind, RunKind.other)
        self.assertEqual(result.content[1].kind, RunKind.other)

    def test_missing_text_is_empty(self) -> None:
        result = normalize([{"type": "italic"}, {"type": "bold", "text": None}, "x"])
        self.assertEqual(result.raw, "x")
        self.assertEqual(result.title_candidate, "")
        self.assertEqual(len(result.content), 3)

    def test_accepts_typed_runs(self) -> None:
        result = normalize(
            [
                PlainString("a"),
                FormattedRun(kind=RunKind.bold, text="b"),
                FormattedRun(kind=RunKind.other, text="c", source_type="mention"),
            ]
        )
        self.assertEqual(result.raw, "abc")
        self.assertEqual(result.title_candidate, "b")

    def test_raw_is_ordered_concatenation(self) -> None:
        runs = [
            "one ",
            {"type": "bold", "text": "two "},
            {"type": "unknown", "text": "three "},
            {"type": "text_link", "text": "four", "href": "x"},
        ]
        expected = "".join(r if isinstance(r, str) else r["text"] for r in runs)
        self.assertEqual(normalize(runs).raw, expected)

    def test_non_text_input_is_empty(self) -> None:
        result = normalize(None)
        self.assertEqual(result.raw, "")
        self.assertEqual(result.content, ())
        self.assertIsNone(result.title_candidate)

    def test_long_run_lists_keep_order(self) -> None:
        runs = [{"type": "bold", "text": str(i % 10)} for i in range(20000)]
        result = normalize(runs)

        self.assertEqual(len(result.content), 20000)
        self.assertEqual(result.raw, "0123456789" * 2000)
        self.assertEqual(result.title_candidate, "0")
        self.assertEqual(result.content[-1], ContentNode(text="9", kind=RunKind.bold))

    def test_is_deterministic(self) -> None:
        runs = [{"type": "bold", "text": "T"}, "body #tag"]
        self.assertEqual(normalize(runs), normalize(runs))


if __name__ == "__main__":
    unittest.main()
