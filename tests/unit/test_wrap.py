# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

import string
import unittest

from forgepdf.errors import UndefinedCharacterWidthError
from forgepdf.render.wrap import estimate_line_count, wrap_budget

# One font unit per character at font size 1000, so widths read as cell units.
UNIT_METRICS = {char: 1.0 for char in string.ascii_letters + string.digits + " .,-"}


def _lines(text: str, width: float, *, metrics=None, margin: float = 0.0, fallback: float = 0.0):
    return estimate_line_count(
        width,
        text,
        UNIT_METRICS if metrics is None else metrics,
        1000,
        margin,
        fallback,
    )


class TestWrapBudget(unittest.TestCase):
    def test_scales_by_font_size(self) -> None:
        budget = wrap_budget(40, font_size=10, cell_margin=1, page_width_fallback=100)
        self.assertAlmostEqual(budget, (40 - 2) * 1000 / 10)

    def test_zero_width_uses_fallback(self) -> None:
        budget = wrap_budget(0, font_size=1000, cell_margin=0, page_width_fallback=25)
        self.assertAlmostEqual(budget, 25)

    def test_rejects_non_positive_font_size(self) -> None:
        with self.assertRaises(ValueError):
            wrap_budget(10, font_size=0, cell_margin=0, page_width_fallback=0)


class TestEstimateLineCount(unittest.TestCase):
    def test_empty_text_is_one_line(self) -> None:
        self.assertEqual(_lines("", 10), 1)

    def test_text_that_fits_is_one_line(self) -> None:
        self.assertEqual(_lines("abc", 3), 1)

    def test_breaks_after_last_space(self) -> None:
        self.assertEqual(_lines("ab cd", 3), 2)

    def test_space_within_budget_keeps_single_line(self) -> None:
        self.assertEqual(_lines("ab cd", 5), 1)

    def test_words_without_spaces_break_per_character(self) -> None:
        cases = (
            ("abcdefg", 3, 3),
            ("abcdef", 3, 2),
            ("abcdefghij", 4, 3),
            ("ab", 1, 2),
        )
        for text, width, expected in cases:
            with self.subTest(text=text, width=width):
                self.assertEqual(_lines(text, width), expected)

    def test_character_wider_than_cell_takes_own_line(self) -> None:
        metrics = {"W": 5.0}
        self.assertEqual(_lines("W", 3, metrics=metrics), 1)
        self.assertEqual(_lines("WWW", 3, metrics=metrics), 3)

    def test_explicit_newlines_always_break(self) -> None:
        for count in range(1, 6):
            text = "x\n" * count + "x"
            with self.subTest(count=count):
                self.assertGreaterEqual(_lines(text, 100), count + 1)
                self.assertEqual(_lines(text, 100), count + 1)

    def test_newline_checked_before_width(self) -> None:
        self.assertEqual(_lines("abc\ndef", 3), 2)

    def test_trailing_newline_does_not_add_line(self) -> None:
        self.assertEqual(_lines("a\n", 10), 1)
        self.assertEqual(_lines("\n", 10), 1)

    def test_double_trailing_newline_adds_one_blank_line(self) -> None:
        self.assertEqual(_lines("a\n\n", 10), 2)

    def test_carriage_returns_ignored(self) -> None:
        self.assertEqual(_lines("a\r\nb", 10), 2)
        self.assertEqual(_lines("ab\r\r", 2), 1)

    def test_break_at_end_of_text_adds_no_empty_line(self) -> None:
        # The trailing space overflows, nothing is left for a new line.
        self.assertEqual(_lines("abc ", 3), 1)

    def test_zero_width_uses_fallback(self) -> None:
        self.assertEqual(_lines("abcdefg", 0, fallback=3), 3)

    def test_cell_margin_reduces_budget(self) -> None:
        self.assertEqual(_lines("abcde", 5), 1)
        self.assertEqual(_lines("abcde", 5, margin=1), 2)

    def test_mixed_words_and_long_word(self) -> None:
        # "aa" + "bbbbbbb" (broken in two) + "c"
        self.assertEqual(_lines("aa bbbbbbb c", 4), 4)

    def test_idempotent(self) -> None:
        text = "The quick brown fox\njumps over the lazy dog"
        first = _lines(text, 7)
        second = _lines(text, 7)
        self.assertEqual(first, second)

    def test_undefined_character_width(self) -> None:
        with self.assertRaises(UndefinedCharacterWidthError) as ctx:
            _lines("ab漢", 10)
        self.assertEqual(ctx.exception.character, "漢")

    def test_newline_needs_no_width(self) -> None:
        self.assertEqual(_lines("a\nb", 10, metrics={"a": 1.0, "b": 1.0}), 2)


if __name__ == "__main__":
    unittest.main()
