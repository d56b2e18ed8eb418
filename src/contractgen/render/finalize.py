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

from .document import Document, PagePhase
from .header_footer import draw_page_stamp

logger = logging.getLogger(__name__)


def finalize(document: Document) -> Document:
    """Stamp every page with the final page total and seal the document.

    Calling it again on a sealed document whose stamps are already final is a no-op.
    """
    total = document.page_count
    if document.sealed and all(record.stamp_total == total for record in document.pages):
        return document
    if total == 0:
        raise RuntimeError("cannot finalize a document without pages")

    surface = document.surface
    for record in document.pages:
        surface.select_page(record.index)
        record.stamp_region = draw_page_stamp(
            surface,
            document.geometry,
            document.spec,
            document.labels,
            page_index=record.index,
            total_pages=total,
            erase=record.stamp_region,
        )
        record.stamp_total = total
        record.phase = PagePhase.FINAL
    document.seal()
    logger.debug("finalized %d page(s)", total)
    return document
