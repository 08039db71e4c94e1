from __future__ import annotations

import unittest

from tg_catalog.signals import extract_rating, extract_tags, normalize_tag

STAR = "⭐"
STAR_VS = "⭐️"


class TestExtractRating(unittest.TestCase):
    def test_counts_stars_with_variation_selector(self) -> None:
        self.assertEqual(extract_rating(STAR_VS * 3), 3)

    def test_no_stars(self) -> None:
        self.assertEqual(extract_rating("No stars"), 0)
        self.assertEqual(extract_rating(""), 0)

    def test_mixed_forms_and_interleaving(self) -> None:
        self.assertEqual(extract_rating(f"Оценка: {STAR} {STAR_VS}x{STAR}!"), 3)

    def test_monotonic_in_glyph_count(self) -> None:
        counts = [extract_rating(STAR * n) for n in range(6)]
        self.assertEqual(counts, [0, 1, 2, 3, 4, 5])


class TestExtractTags(unittest.TestCase):
    def test_dedupes_case_insensitively_in_first_seen_order(self) -> None:
        self.assertEqual(
            extract_tags("#Фентези #фентези #mystery"),
            ("фентези", "mystery"),
        )

    def test_punctuation_and_underscore_end_a_tag(self) -> None:
        self.assertEqual(extract_tags("#sci_fi, #книги."), ("sci", "книги"))

    def test_adjacent_tags_are_distinct(self) -> None:
        self.assertEqual(extract_tags("#a#b #A"), ("a", "b"))

    def test_digits_are_part_of_tag(self) -> None:
        self.assertEqual(extract_tags("#top10 #2024"), ("top10", "2024"))

    def test_lone_hash_is_ignored(self) -> None:
        self.assertEqual(extract_tags("# nothing here #"), ())

    def test_normalize_tag(self) -> None:
        self.assertEqual(normalize_tag(" #Детектив "), "детектив")
        self.assertEqual(normalize_tag("#"), "")


if __name__ == "__main__":
    unittest.main()
