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

from typing import Final, Literal, Protocol

FontStyle = Literal["normal", "bold", "italic", "bold_italic"]
Color = tuple[int, int, int]
ImageRef = str | bytes

BLACK: Final[Color] = (0, 0, 0)
WHITE: Final[Color] = (255, 255, 255)
FONT_STYLES: Final[frozenset[str]] = frozenset({"normal", "bold", "italic", "bold_italic"})


class DrawingSurface(Protocol):
    """Primitive drawing sink targeted by the layout engine.

    Coordinates are millimetres from the top-left corner of the page; the ``y`` passed to
    ``draw_text`` is the text baseline. Pages are numbered from 1.
    """

    page_width: float
    page_height: float

    def set_font(self, size: float, style: FontStyle = "normal") -> None: ...

    def set_color(self, r: int, g: int, b: int) -> None: ...

    def set_line_width(self, width: float) -> None: ...

    def string_width(self, text: str) -> float: ...

    def draw_text(self, text: str, x: float, y: float) -> None: ...

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None: ...

    def draw_rect(self, x: float, y: float, w: float, h: float, *, fill: bool = False) -> None: ...

    def draw_image(self, ref: ImageRef, x: float, y: float, w: float, h: float) -> None: ...

    def new_page(self) -> int: ...

    def select_page(self, index: int) -> None: ...

    def current_page_index(self) -> int: ...

    def page_count(self) -> int: ...
