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

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from .geometry import COORDINATE_EPSILON, LayoutGeometry
from .spec import ContractSpec
from .surface import DrawingSurface


@dataclass
class Cursor:
    y: float
    page_index: int = 1


class LayoutContext:
    """Mutable layout state for exactly one generation call."""

    def __init__(
        self,
        surface: DrawingSurface,
        geometry: LayoutGeometry,
        spec: ContractSpec,
    ) -> None:
        self.surface = surface
        self.geometry = geometry
        self.spec = spec
        self.cursor = Cursor(y=geometry.content_start_y)
        self.logo_enabled = True

    @property
    def y(self) -> float:
        return self.cursor.y

    @property
    def at_content_top(self) -> bool:
        return abs(self.cursor.y - self.geometry.content_start_y) < COORDINATE_EPSILON

    def remaining_height(self) -> float:
        return self.geometry.content_end_y - self.cursor.y

    def advance(self, dy: float) -> float:
        self.cursor.y += dy
        return self.cursor.y

    def reset_to_content_top(self) -> None:
        self.cursor.y = self.geometry.content_start_y

    def current_page(self) -> int:
        return self.cursor.page_index

    @contextmanager
    def preserve_cursor(self) -> Iterator[None]:
        saved = self.cursor.y
        try:
            yield
        finally:
            self.cursor.y = saved
