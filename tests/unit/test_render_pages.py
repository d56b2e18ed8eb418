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

from contractgen.core.errors import OverflowInvariantViolation
from contractgen.render.document import PagePhase
from tests.test_support import make_layout, page_texts


class TestPageManager(unittest.TestCase):
    def test_start_opens_first_page_with_header_and_footer(self) -> None:
        context, document, pages = make_layout()
        record = pages.start()
        self.assertEqual(record.index, 1)
        self.assertEqual((record.header_draws, record.footer_draws), (1, 1))
        self.assertIsNotNone(record.stamp_region)
        self.assertEqual(context.y, context.geometry.content_start_y)
        texts = page_texts(context.surface, 1)
        self.assertEqual(texts[0], "Green Trade S.r.l.")
        self.assertEqual(texts[-1], "Page 1 of --")
        with self.assertRaises(RuntimeError):
            pages.start()

    def test_no_break_when_block_fits(self) -> None:
        context, document, pages = make_layout()
        pages.start()
        context.cursor.y = 259.0
        self.assertFalse(pages.check_new_page(10.0))
        self.assertEqual(document.page_count, 1)
        self.assertIs(document.page(1).phase, PagePhase.CONTENT)

    def test_break_opens_new_page_and_resets_cursor(self) -> None:
        context, document, pages = make_layout()
        pages.start()
        context.cursor.y = 265.0
        with self.assertLogs("contractgen.render.pages", level="DEBUG"):
            self.assertTrue(pages.check_new_page(10.0))
        self.assertEqual(document.page_count, 2)
        self.assertEqual(context.current_page(), 2)
        self.assertEqual(context.y, context.geometry.content_start_y)
        record = document.page(2)
        self.assertEqual((record.header_draws, record.footer_draws), (1, 1))
        self.assertEqual(page_texts(context.surface, 2)[-1], "Page 2 of --")

    def test_never_breaks_from_top_of_band(self) -> None:
        context, document, pages = make_layout()
        pages.start()
        self.assertFalse(pages.check_new_page(500.0))
        self.assertEqual(document.page_count, 1)

    def test_atomic_block_taller_than_band_raises(self) -> None:
        context, document, pages = make_layout()
        pages.start()
        context.cursor.y = 200.0
        with self.assertRaises(OverflowInvariantViolation) as caught:
            pages.check_new_page(context.geometry.available_height + 1, atomic=True)
        self.assertAlmostEqual(caught.exception.available_height, 211.0)
        self.assertEqual(document.page_count, 1)

    def test_atomic_block_moves_to_next_page(self) -> None:
        context, document, pages = make_layout()
        pages.start()
        context.cursor.y = 200.0
        self.assertTrue(pages.check_new_page(100.0, atomic=True))
        self.assertEqual(document.page_count, 2)


class TestLayoutContext(unittest.TestCase):
    def test_contexts_are_independent(self) -> None:
        first, _doc_a, _pages_a = make_layout()
        second, _doc_b, _pages_b = make_layout()
        first.advance(40.0)
        self.assertEqual(second.y, second.geometry.content_start_y)
        self.assertIsNot(first.surface, second.surface)

    def test_preserve_cursor_restores_on_error(self) -> None:
        context, _document, _pages = make_layout()
        with self.assertRaises(KeyError):
            with context.preserve_cursor():
                context.advance(12.0)
                raise KeyError("boom")
        self.assertTrue(context.at_content_top)
        self.assertAlmostEqual(context.remaining_height(), 211.0)


if __name__ == "__main__":
    unittest.main()
