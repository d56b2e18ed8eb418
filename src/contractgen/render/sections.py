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

from collections.abc import Callable, Sequence

from .context import LayoutContext
from .pages import PageManager
from .surface import Color
from .text_flow import TextFlow

SectionContent = Sequence[str] | Callable[[], None] | None


class SectionComposer:
    def __init__(self, context: LayoutContext, pages: PageManager, flow: TextFlow) -> None:
        self.context = context
        self.pages = pages
        self.flow = flow

    def section(
        self,
        title: str,
        content: SectionContent,
        *,
        color: Color | None = None,
        body_size: float | None = None,
    ) -> None:
        """Draw a titled block; the title always keeps at least one body line below it."""
        context = self.context
        surface = context.surface
        style = context.spec.style
        size = style.body_size if body_size is None else body_size

        context.advance(style.section_gap_mm)
        self.pages.check_new_page(style.section_title_advance_mm + style.line_height(size))

        surface.set_font(style.section_title_size, "bold")
        surface.set_color(*(color or style.accent_color))
        surface.draw_text(title, context.geometry.margin_left, context.y)
        context.advance(style.section_title_advance_mm)

        if content is None:
            return
        if callable(content):
            content()
            return
        for line in content:
            self.flow.draw_wrapped(
                line,
                context.geometry.margin_left,
                size=size,
                color=style.text_color,
            )
