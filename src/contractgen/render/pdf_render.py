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

import io
from typing import Any, cast

from fpdf import FPDF

from .recording import FPDF_STYLES, DrawCommand, RecordingSurface
from .text import pdf_safe_text

_DEFAULT_FONT_SIZE = 11.0


def render_pdf_bytes(surface: RecordingSurface) -> bytes:
    """Replay every recorded page onto a fresh fpdf2 document."""
    pdf = FPDF(unit="mm", format=cast(Any, (surface.page_width, surface.page_height)))
    pdf.set_auto_page_break(False)
    pdf.set_margins(0, 0, 0)
    pdf.set_font(surface.font_family, "", _DEFAULT_FONT_SIZE)
    for commands in surface.pages:
        pdf.add_page()
        for command in commands:
            _apply_command(pdf, command, font_family=surface.font_family)
    return bytes(pdf.output())


def _apply_command(pdf: FPDF, command: DrawCommand, *, font_family: str) -> None:
    args: tuple[Any, ...] = command.args
    op = command.op
    if op == "font":
        size, style = args
        pdf.set_font(font_family, FPDF_STYLES[style], size)
    elif op == "color":
        r, g, b = args
        pdf.set_text_color(r, g, b)
        pdf.set_draw_color(r, g, b)
        pdf.set_fill_color(r, g, b)
    elif op == "line_width":
        pdf.set_line_width(args[0])
    elif op == "text":
        text, x, y = args
        pdf.text(x, y, pdf_safe_text(text))
    elif op == "line":
        x1, y1, x2, y2 = args
        pdf.line(x1, y1, x2, y2)
    elif op == "rect":
        x, y, w, h, fill = args
        pdf.rect(x, y, w, h, style="F" if fill else "D")
    elif op == "image":
        payload, x, y, w, h = args
        pdf.image(io.BytesIO(payload), x=x, y=y, w=w, h=h)
    else:
        raise ValueError(f"unknown draw command: {op}")
