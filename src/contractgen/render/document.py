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
from dataclasses import dataclass
from datetime import date
from enum import Enum
from pathlib import Path

from ..core.models import CompanyProfile, Order
from .geometry import LayoutGeometry
from .labels import ContractLabels
from .pdf_render import render_pdf_bytes
from .recording import RecordingSurface
from .spec import ContractSpec
from .surface import DrawingSurface

logger = logging.getLogger(__name__)


class PagePhase(str, Enum):
    HEADER = "header"
    FOOTER = "footer"
    CONTENT = "content"
    FINAL = "final"


@dataclass(frozen=True)
class StampRegion:
    x: float
    y: float
    width: float
    height: float


@dataclass
class PageRecord:
    index: int
    phase: PagePhase = PagePhase.HEADER
    header_draws: int = 0
    footer_draws: int = 0
    stamp_total: int | None = None
    stamp_region: StampRegion | None = None


class Document:
    """Pages produced by one generation call plus the registry the finalizer works from."""

    def __init__(
        self,
        surface: DrawingSurface,
        geometry: LayoutGeometry,
        spec: ContractSpec,
        company: CompanyProfile,
        labels: ContractLabels,
    ) -> None:
        self.surface = surface
        self.geometry = geometry
        self.spec = spec
        self.company = company
        self.labels = labels
        self.pages: list[PageRecord] = []
        self.sealed = False

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def register_page(self, index: int) -> PageRecord:
        if self.sealed:
            raise RuntimeError("document is sealed; no pages can be added")
        if index != len(self.pages) + 1:
            raise RuntimeError(f"page {index} registered out of order")
        record = PageRecord(index=index)
        self.pages.append(record)
        return record

    def page(self, index: int) -> PageRecord:
        if not 1 <= index <= len(self.pages):
            raise ValueError(f"page index out of range: {index}")
        return self.pages[index - 1]

    def seal(self) -> None:
        self.sealed = True

    def serialize(self) -> bytes:
        if not self.sealed:
            raise RuntimeError("document must be finalized before serialization")
        if isinstance(self.surface, RecordingSurface):
            return render_pdf_bytes(self.surface)
        serializer = getattr(self.surface, "serialize", None)
        if serializer is None:
            raise TypeError(f"{type(self.surface).__name__} cannot be serialized")
        return bytes(serializer())


def save_document(document: Document, path: str | Path) -> Path:
    output_path = Path(path)
    payload = document.serialize()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(payload)
    logger.debug("wrote %d bytes to %s", len(payload), output_path)
    return output_path


def contract_filename(
    order: Order,
    labels: ContractLabels,
    *,
    today: date | None = None,
    preview: bool = False,
) -> str:
    if preview:
        return labels.preview_filename
    day = today or date.today()
    number = "".join(ch if ch.isalnum() or ch in "-_" else "_" for ch in order.order_number)
    return f"{labels.filename_prefix}_{number}_{day.isoformat()}.pdf"
