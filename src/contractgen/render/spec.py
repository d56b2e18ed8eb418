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

from dataclasses import dataclass, field, replace

from .geometry import LayoutGeometry, compute_geometry, page_size_mm
from .surface import Color
from .text import font_line_height


@dataclass(frozen=True)
class PageSpec:
    size: str = "A4"
    width_mm: float | None = None
    height_mm: float | None = None
    margin_left_mm: float = 20.0
    margin_right_mm: float = 20.0
    margin_top_mm: float = 12.0
    margin_bottom_mm: float = 12.0
    header_height_mm: float = 46.0
    footer_height_mm: float = 16.0


@dataclass(frozen=True)
class StyleSpec:
    font_family: str = "Helvetica"
    accent_color: Color = (60, 122, 95)
    text_color: Color = (0, 0, 0)
    muted_color: Color = (100, 100, 100)
    rule_color: Color = (200, 200, 200)
    footer_color: Color = (120, 120, 120)
    title_size: float = 18.0
    meta_size: float = 12.0
    section_title_size: float = 14.0
    body_size: float = 11.0
    legal_size: float = 10.0
    header_name_size: float = 16.0
    header_detail_size: float = 9.0
    footer_size: float = 8.0
    line_height_factor: float = 1.2
    title_advance_mm: float = 12.0
    meta_advance_mm: float = 6.0
    meta_rule_gap_mm: float = 6.0
    section_gap_mm: float = 5.0
    section_title_advance_mm: float = 7.0
    payment_label_gap_mm: float = 3.0
    payment_label_advance_mm: float = 6.0
    legal_reserve_mm: float = 25.0
    legal_gap_mm: float = 0.0
    logo_size_mm: float = 30.0
    logo_gap_mm: float = 5.0

    def line_height(self, size_pt: float) -> float:
        return font_line_height(size_pt, self.line_height_factor)


@dataclass(frozen=True)
class SignatureSpec:
    title_size: float = 12.0
    label_size: float = 10.0
    gap_before_mm: float = 5.0
    title_advance_mm: float = 7.0
    box_height_mm: float = 28.0
    box_gap_mm: float = 20.0
    label_inset_mm: float = 5.0
    label_offset_mm: float = 8.0
    date_offset_mm: float = 4.0

    @property
    def block_height(self) -> float:
        return self.gap_before_mm + self.title_advance_mm + self.box_height_mm


@dataclass(frozen=True)
class ContractSpec:
    page: PageSpec = field(default_factory=PageSpec)
    style: StyleSpec = field(default_factory=StyleSpec)
    signature: SignatureSpec = field(default_factory=SignatureSpec)
    language: str = "en"
    generator_name: str = "Trade Management System"

    def geometry(self) -> LayoutGeometry:
        page = self.page
        page_w, page_h = page_size_mm(page.size, page.width_mm, page.height_mm)
        return compute_geometry(
            page_w,
            page_h,
            margin_left=page.margin_left_mm,
            margin_right=page.margin_right_mm,
            margin_top=page.margin_top_mm,
            margin_bottom=page.margin_bottom_mm,
            header_height=page.header_height_mm,
            footer_height=page.footer_height_mm,
        )

    def with_language(self, language: str | None) -> "ContractSpec":
        if not language:
            return self
        return replace(self, language=language)
