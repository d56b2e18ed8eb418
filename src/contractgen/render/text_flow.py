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

from __future__ import annotations

import logging

from .context import LayoutContext
from .pages import PageManager
from .surface import BLACK, Color, FontStyle
from .text import wrap_text

logger = logging.getLogger(__name__)


class TextFlow:
    """Wrap text to the column and draw it line by line, breaking pages as needed."""

    def __init__(self, context: LayoutContext, pages: PageManager) -> None:
        self.context = context
        self.pages = pages

    def wrap_width(self, x: float, max_width: float | None = None) -> float:
        geometry = self.context.geometry
        column = geometry.content_width - (x - geometry.margin_left)
        if max_width is None:
            return column
        if max_width > column:
            logger.debug("clamping wrap width %.1f mm to the %.1f mm column", max_width, column)
            return column
        return max_width

    def draw_wrapped(
        self,
        text: str | None,
        x: float,
        *,
        size: float,
        style: FontStyle = "normal",
        color: Color = BLACK,
        max_width: float | None = None,
    ) -> float:
        context = self.context
        if not text:
            return context.y
        surface = context.surface
        surface.set_font(size, style)
        surface.set_color(*color)
        lines = wrap_text(text, self.wrap_width(x, max_width), surface.string_width)
        line_height = context.spec.style.line_height(size)
        for line in lines:
            if self.pages.check_new_page(line_height):
                surface.set_font(size, style)
                surface.set_color(*color)
            surface.draw_text(line, x, context.y)
            context.advance(line_height)
        return context.y
