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

from pathlib import Path

from ...render.document import Document, save_document
from ..api import console_err


def _resolve_output_path(output: str | None, default_name: str) -> Path:
    if not output:
        return Path(default_name)
    path = Path(output).expanduser()
    if path.is_dir() or output.endswith(("/", "\\")):
        return path / default_name
    return path


def _write_document(document: Document, path: Path, *, quiet: bool) -> Path:
    written = save_document(document, path)
    if not quiet:
        console_err.print(f"[dim]- wrote {written}[/dim]")
    return written
