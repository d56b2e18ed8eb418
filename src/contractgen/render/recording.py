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

from dataclasses import dataclass
from typing import Literal, Protocol

from fpdf import FPDF

from .images import load_image
from .surface import FONT_STYLES, FontStyle, ImageRef
from .text import PT_TO_MM, pdf_safe_text

CommandOp = Literal["font", "color", "line_width", "text", "line", "rect", "image"]

FPDF_STYLES: dict[str, str] = {
    "normal": "",
    "bold": "B",
    "italic": "I",
    "bold_italic": "BI",
}


@dataclass(frozen=True)
class DrawCommand:
    op: CommandOp
    args: tuple[object, ...]


class TextMeasurer(Protocol):
    def __call__(self, text: str, size: float, style: FontStyle) -> float: ...


class FpdfTextMeasurer:
    """Measure strings with the fpdf2 core-font metrics used at serialization time."""

    def __init__(self, font_family: str = "Helvetica") -> None:
        self._pdf = FPDF(unit="mm")
        self._font_family = font_family

    def __call__(self, text: str, size: float, style: FontStyle) -> float:
        self._pdf.set_font(self._font_family, FPDF_STYLES[style], size)
        return float(self._pdf.get_string_width(pdf_safe_text(text)))


class FixedWidthMeasurer:
    """Every character is ``ratio`` em wide; handy for deterministic layouts."""

    def __init__(self, ratio: float = 0.5) -> None:
        self._ratio = ratio

    def __call__(self, text: str, size: float, style: FontStyle) -> float:
        return len(text) * float(size) * PT_TO_MM * self._ratio


class RecordingSurface:
    """Drawing surface that keeps a tagged command list per page.

    Selecting an earlier page appends further commands to that page, so a later pass can
    paint over what was drawn there before.
    """

    def __init__(
        self,
        page_width: float,
        page_height: float,
        *,
        measurer: TextMeasurer | None = None,
        font_family: str = "Helvetica",
    ) -> None:
        self.page_width = float(page_width)
        self.page_height = float(page_height)
        self.font_family = font_family
        self._measurer: TextMeasurer = measurer or FpdfTextMeasurer(font_family)
        self._pages: list[list[DrawCommand]] = []
        self._current = 0
        self._font_size = 11.0
        self._font_style: FontStyle = "normal"

    @property
    def pages(self) -> tuple[tuple[DrawCommand, ...], ...]:
        return tuple(tuple(commands) for commands in self._pages)

    def commands(self, index: int) -> tuple[DrawCommand, ...]:
        self._check_index(index)
        return tuple(self._pages[index - 1])

    def set_font(self, size: float, style: FontStyle = "normal") -> None:
        if style not in FONT_STYLES:
            raise ValueError(f"unknown font style: {style}")
        self._font_size = float(size)
        self._font_style = style
        self._record("font", self._font_size, style)

    def set_color(self, r: int, g: int, b: int) -> None:
        for channel in (r, g, b):
            if not 0 <= int(channel) <= 255:
                raise ValueError("color channels must be between 0 and 255")
        self._record("color", int(r), int(g), int(b))

    def set_line_width(self, width: float) -> None:
        self._record("line_width", float(width))

    def string_width(self, text: str) -> float:
        return self._measurer(text, self._font_size, self._font_style)

    def draw_text(self, text: str, x: float, y: float) -> None:
        self._record("text", text, float(x), float(y))

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._record("line", float(x1), float(y1), float(x2), float(y2))

    def draw_rect(self, x: float, y: float, w: float, h: float, *, fill: bool = False) -> None:
        self._record("rect", float(x), float(y), float(w), float(h), bool(fill))

    def draw_image(self, ref: ImageRef, x: float, y: float, w: float, h: float) -> None:
        self._require_page()
        payload = load_image(ref)
        self._record("image", payload, float(x), float(y), float(w), float(h))

    def new_page(self) -> int:
        self._pages.append([])
        self._current = len(self._pages)
        return self._current

    def select_page(self, index: int) -> None:
        self._check_index(index)
        self._current = index

    def current_page_index(self) -> int:
        return self._current

    def page_count(self) -> int:
        return len(self._pages)

    def _record(self, op: CommandOp, *args: object) -> None:
        self._require_page()
        self._pages[self._current - 1].append(DrawCommand(op, tuple(args)))

    def _require_page(self) -> None:
        if self._current == 0:
            raise ValueError("no page to draw on; call new_page() first")

    def _check_index(self, index: int) -> None:
        if not 1 <= index <= len(self._pages):
            raise ValueError(f"page index out of range: {index}")
