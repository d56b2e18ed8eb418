#!/usr/bin/env python3
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

import unittest

from contractgen.render.text import (
    PT_TO_MM,
    font_line_height,
    pdf_safe_text,
    wrap_lines_to_width,
    wrap_text,
)


class TestPdfSafeText(unittest.TestCase):
    def test_replaces_common_symbols(self) -> None:
        self.assertEqual(pdf_safe_text("€ 5 • ok…"), "EUR 5 - ok...")

    def test_keeps_latin1_accents(self) -> None:
        self.assertEqual(pdf_safe_text("Città Quantità"), "Città Quantità")

    def test_unmappable_characters_are_replaced(self) -> None:
        self.assertEqual(pdf_safe_text("a你b"), "a?b")


class TestLineHeight(unittest.TestCase):
    def test_font_line_height(self) -> None:
        self.assertAlmostEqual(font_line_height(10), 10 * PT_TO_MM * 1.2)
        self.assertAlmostEqual(font_line_height(10, 1.5), 10 * PT_TO_MM * 1.5)


class TestWrapText(unittest.TestCase):
    def test_wraps_on_spaces(self) -> None:
        self.assertEqual(wrap_text("aaa bbb ccc", 7, len), ["aaa bbb", "ccc"])

    def test_long_words_are_split(self) -> None:
        self.assertEqual(wrap_text("abcdefghij", 4, len), ["abcd", "efgh", "ij"])

    def test_blank_lines_are_preserved(self) -> None:
        self.assertEqual(wrap_text("a\n\nb", 10, len), ["a", "", "b"])

    def test_repeated_spaces_collapse(self) -> None:
        self.assertEqual(wrap_lines_to_width(len, ["a   b  "], 10), ["a b"])

    def test_every_line_fits(self) -> None:
        text = "lorem ipsum dolor sit amet consectetur adipiscing elit " * 10
        lines = wrap_text(text, 25, len)
        self.assertTrue(all(len(line) <= 25 for line in lines))
        self.assertEqual(" ".join(lines), text.strip())


if __name__ == "__main__":
    unittest.main()
