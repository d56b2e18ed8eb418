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

PT_TO_MM = 0.3527777778

_PDF_REPLACEMENTS = {
    "€": "EUR",
    "•": "-",
    "–": "-",
    "—": "-",
    "‘": "'",
    "’": "'",
    "“": '"',
    "”": '"',
    "…": "...",
    " ": " ",
    "\t": "    ",
}

Measure = Callable[[str], float]


def pdf_safe_text(text: str) -> str:
    """Map text onto the latin-1 repertoire of the PDF core fonts."""
    for source, target in _PDF_REPLACEMENTS.items():
        if source in text:
            text = text.replace(source, target)
    return text.encode("latin-1", errors="replace").decode("latin-1")


def font_line_height(size_pt: float, multiplier: float = 1.2) -> float:
    return float(size_pt) * PT_TO_MM * multiplier


def wrap_text(text: str, max_width: float, measure: Measure) -> list[str]:
    return wrap_lines_to_width(measure, text.splitlines(), max_width)


def wrap_lines_to_width(measure: Measure, lines: Sequence[str], max_width: float) -> list[str]:
    wrapped: list[str] = []
    for line in lines:
        line = line.rstrip()
        if not line:
            wrapped.append("")
            continue
        words = line.split(" ")
        current = ""
        for word in words:
            if not word:
                continue
            candidate = word if not current else f"{current} {word}"
            if measure(candidate) <= max_width:
                current = candidate
                continue
            if current:
                wrapped.append(current)
                current = ""
            if measure(word) <= max_width:
                current = word
                continue
            parts: list[str] = []
            chunk = ""
            for ch in word:
                next_chunk = f"{chunk}{ch}"
                if chunk and measure(next_chunk) > max_width:
                    parts.append(chunk)
                    chunk = ch
                else:
                    chunk = next_chunk
            if chunk:
                parts.append(chunk)
            wrapped.extend(parts[:-1])
            current = parts[-1] if parts else ""
        if current:
            wrapped.append(current)
    return wrapped
