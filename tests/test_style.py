from __future__ import annotations

import unittest

from tg_catalog.runs import RunKind
from tg_catalog.style import format_style


class TestFormatStyle(unittest.TestCase):
    def test_known_kinds_map_to_elements(self) -> None:
        self.assertEqual(format_style(RunKind.bold).element, "strong")
        self.assertEqual(format_style(RunKind.italic).element, "em")
        self.assertEqual(format_style(RunKind.strikethrough).element, "s")
        self.assertEqual(format_style(RunKind.text_link).element, "a")
        self.assertIn("font-medium", format_style(RunKind.hashtag).css_classes)

    def test_italic_is_block(self) -> None:
        self.assertTrue(format_style(RunKind.italic).block)
        self.assertFalse(format_style(RunKind.bold).block)

    def test_plain_and_unknown_fall_back_to_span(self) -> None:
        self.assertEqual(format_style(None).element, "span")
        self.assertEqual(format_style(RunKind.other).element, "span")
        self.assertEqual(format_style(RunKind.other).css_classes, ())


if __name__ == "__main__":
    unittest.main()
