from __future__ import annotations

import random
import unittest
from datetime import datetime, timedelta, timezone
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from myprs_core.formatting import (  # noqa: E402
    display_width,
    fit,
    parse_iso_timestamp,
    relative_time_ago,
)

NARROW = "abcdefgXYZ 0123-_/"
WIDE = "漢字日本語テスト한국어ｆｕｌｌ"


def _corpus(seed: int = 7, count: int = 300) -> list[str]:
    rng = random.Random(seed)
    alphabet = NARROW + WIDE
    return ["".join(rng.choice(alphabet) for _ in range(rng.randint(0, 40))) for _ in range(count)]


class DisplayWidthTests(unittest.TestCase):
    def test_ascii(self):
        self.assertEqual(display_width("hello"), 5)

    def test_wide_glyphs_count_two(self):
        self.assertEqual(display_width("漢字"), 4)
        self.assertEqual(display_width("aｂc"), 4)

    def test_empty(self):
        self.assertEqual(display_width(""), 0)


class FitTests(unittest.TestCase):
    def test_pads_short_text(self):
        self.assertEqual(fit("abc", 6), "abc   ")

    def test_exact_width_is_unchanged(self):
        self.assertEqual(fit("abcdef", 6), "abcdef")
        self.assertEqual(fit("漢字ab", 6), "漢字ab")

    def test_truncates_ascii(self):
        self.assertEqual(fit("abcdefghij", 8), "abcde...")

    def test_wide_glyph_not_split_at_boundary(self):
        # 2 + 2 + 3 = 7 fits, the third glyph would need 9 columns
        result = fit("漢字日本語", 8)
        self.assertEqual(result, "漢字... ")
        self.assertEqual(display_width(result), 8)

    def test_tiny_width_keeps_ellipsis(self):
        self.assertEqual(fit("abcdef", 3), "...")

    def test_width_always_exact(self):
        for text in _corpus():
            for width in range(4, 41, 3):
                with self.subTest(text=text, width=width):
                    self.assertEqual(display_width(fit(text, width)), width)

    def test_short_text_only_padded(self):
        for text in _corpus(seed=11):
            width = display_width(text) + 2
            with self.subTest(text=text):
                self.assertEqual(fit(text, width), text + "  ")

    def test_long_text_ends_with_ellipsis(self):
        for text in _corpus(seed=13):
            width = 10
            if display_width(text) <= width:
                continue
            with self.subTest(text=text):
                body = fit(text, width).rstrip(" ")
                self.assertTrue(body.endswith("..."))
                self.assertLessEqual(display_width(body), width)
                self.assertTrue(text.startswith(body[:-3]))


class RelativeTimeTests(unittest.TestCase):
    now = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)

    def ago(self, **kwargs) -> str:
        return relative_time_ago(self.now, self.now - timedelta(**kwargs))

    def test_under_a_minute(self):
        self.assertEqual(self.ago(seconds=30), "less than a minute ago")

    def test_minutes_and_hours(self):
        self.assertEqual(self.ago(minutes=1), "about 1 minute ago")
        self.assertEqual(self.ago(minutes=42), "about 42 minutes ago")
        self.assertEqual(self.ago(hours=5, minutes=10), "about 5 hours ago")

    def test_days_months_years(self):
        self.assertEqual(self.ago(days=3), "about 3 days ago")
        self.assertEqual(self.ago(days=45), "about 1 month ago")
        self.assertEqual(self.ago(days=400), "about 1 year ago")
        self.assertEqual(self.ago(days=800), "about 2 years ago")


class TimestampTests(unittest.TestCase):
    def test_zulu_suffix(self):
        parsed = parse_iso_timestamp("2026-10-15T08:30:00Z")
        self.assertEqual(parsed, datetime(2026, 10, 15, 8, 30, tzinfo=timezone.utc))

    def test_invalid(self):
        self.assertIsNone(parse_iso_timestamp("not a date"))
        self.assertIsNone(parse_iso_timestamp(None))


if __name__ == "__main__":
    unittest.main()
