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

from ..core.errors import OverflowInvariantViolation
from ..core.models import CompanyProfile
from .context import LayoutContext
from .document import Document, PagePhase, PageRecord
from .geometry import COORDINATE_EPSILON
from .header_footer import draw_footer, draw_header
from .labels import ContractLabels

logger = logging.getLogger(__name__)


class PageManager:
    """Single place where overflow is detected and new pages are opened."""

    def __init__(
        self,
        context: LayoutContext,
        document: Document,
        company: CompanyProfile,
        labels: ContractLabels,
    ) -> None:
        self.context = context
        self.document = document
        self.company = company
        self.labels = labels

    def start(self) -> PageRecord:
        if self.document.page_count:
            raise RuntimeError("document already has pages")
        return self._open_page()

    def check_new_page(self, required_height: float, *, atomic: bool = False) -> bool:
        context = self.context
        geometry = context.geometry
        if atomic and required_height > geometry.available_height + COORDINATE_EPSILON:
            raise OverflowInvariantViolation(required_height, geometry.available_height)
        self._mark_content()
        if context.y + required_height <= geometry.content_end_y + COORDINATE_EPSILON:
            return False
        if context.at_content_top:
            return False
        logger.debug(
            "page break after page %d (y=%.1f, need %.1f mm)",
            context.current_page(),
            context.y,
            required_height,
        )
        self._open_page()
        self._mark_content()
        return True

    def _open_page(self) -> PageRecord:
        context = self.context
        index = context.surface.new_page()
        record = self.document.register_page(index)
        context.cursor.page_index = index

        record.phase = PagePhase.HEADER
        draw_header(context, self.company, self.labels)
        record.header_draws += 1

        record.phase = PagePhase.FOOTER
        record.stamp_region = draw_footer(
            context,
            self.company,
            self.labels,
            page_index=index,
            total_pages=None,
        )
        record.footer_draws += 1

        context.reset_to_content_top()
        return record

    def _mark_content(self) -> None:
        self.document.page(self.context.current_page()).phase = PagePhase.CONTENT
