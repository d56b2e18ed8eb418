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


class MissingRequiredInputError(ValueError):
    """The order, or both counterparties, were not supplied."""


class DrawingBackendError(RuntimeError):
    """A drawing surface could not perform a primitive (e.g. an undecodable logo)."""


class OverflowInvariantViolation(RuntimeError):
    """An atomic block is taller than the whole content band."""

    def __init__(self, required_height: float, available_height: float) -> None:
        self.required_height = required_height
        self.available_height = available_height
        super().__init__(
            f"atomic block needs {required_height:.1f} mm but the content band is only "
            f"{available_height:.1f} mm tall"
        )
