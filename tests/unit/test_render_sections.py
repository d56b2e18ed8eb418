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
from unittest import mock

from contractgen.render.sections import SectionComposer
from contractgen.render.text_flow import TextFlow
from tests.test_support import make_layout, page_texts, text_y


class TestSectionComposer(unittest.TestCase):
    def setUp(self) -> None:
        self.context, self.document, self.pages = make_layout()
        self.pages.start()
        self.flow = TextFlow(self.context, self.pages)
        self.sections = SectionComposer(self.context, self.pages, self.flow)

    def test_section_draws_title_then_lines(self) -> None:
        start = self.context.y
        self.sections.section("BUYER:", ["Name: A", "City: B"])
        style = self.context.spec.style
        texts = page_texts(self.context.surface, 1)
        self.assertLess(texts.index("BUYER:"), texts.index("Name: A"))
        title_y = text_y(self.context.surface, 1, "BUYER:")
        self.assertAlmostEqual(title_y, start + style.section_gap_mm)
        expected = (
            start
            + style.section_gap_mm
            + style.section_title_advance_mm
            + 2 * style.line_height(style.body_size)
        )
        self.assertAlmostEqual(self.context.y, expected)

    def test_title_is_never_orphaned(self) -> None:
        self.context.cursor.y = 258.0
        self.sections.section("SELLER:", ["Name: A"])
        self.assertNotIn("SELLER:", page_texts(self.context.surface, 1))
        self.assertEqual(self.document.page_count, 2)
        self.assertAlmostEqual(
            text_y(self.context.surface, 2, "SELLER:"),
            self.context.geometry.content_start_y,
        )
        self.assertIn("Name: A", page_texts(self.context.surface, 2))

    def test_callable_content_is_invoked(self) -> None:
        render = mock.Mock()
        self.sections.section("TERMS:", render)
        render.assert_called_once_with()

    def test_empty_content_draws_only_title(self) -> None:
        before = page_texts(self.context.surface, 1)
        self.sections.section("PRODUCT:", [])
        self.assertEqual(page_texts(self.context.surface, 1), [*before, "PRODUCT:"])


if __name__ == "__main__":
    unittest.main()
