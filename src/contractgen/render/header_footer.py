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

from ..core.errors import DrawingBackendError
from ..core.models import CompanyProfile
from .context import LayoutContext
from .document import StampRegion
from .geometry import LayoutGeometry
from .labels import ContractLabels
from .spec import ContractSpec
from .surface import WHITE, DrawingSurface
from .text import PT_TO_MM

logger = logging.getLogger(__name__)

PAGE_TOTAL_PLACEHOLDER = "--"

# Header band offsets, measured from the top margin
HEADER_NAME_OFFSET_MM = 15.0
HEADER_DETAILS_OFFSET_MM = 20.0
HEADER_DETAIL_STEP_MM = 4.0
HEADER_RULE_INSET_MM = 5.0
HEADER_RULE_WIDTH_MM = 0.5

# Footer offsets, measured upwards from the bottom margin
FOOTER_RULE_OFFSET_MM = 12.0
FOOTER_ATTRIBUTION_OFFSET_MM = 8.0
FOOTER_WEBSITE_OFFSET_MM = 4.0
FOOTER_RULE_WIDTH_MM = 0.3
STAMP_MIN_WIDTH_MM = 40.0


def header_detail_lines(company: CompanyProfile, labels: ContractLabels) -> list[str]:
    lines: list[str] = []
    if company.address:
        lines.append(company.address)
    locality = " ".join(
        part for part in (company.postal_code, company.city, company.province) if part
    )
    if locality:
        lines.append(locality)
    if company.phone:
        lines.append(labels.header_phone.format(value=company.phone))
    if company.email:
        lines.append(labels.header_email.format(value=company.email))
    if company.vat_number:
        lines.append(labels.header_vat.format(value=company.vat_number))
    return lines


def draw_header(context: LayoutContext, company: CompanyProfile, labels: ContractLabels) -> None:
    surface = context.surface
    geometry = context.geometry
    spec = context.spec
    style = spec.style
    top = geometry.margin_top
    text_x = geometry.margin_left

    with context.preserve_cursor():
        if company.logo and context.logo_enabled:
            try:
                surface.draw_image(
                    company.logo,
                    geometry.margin_left,
                    top,
                    style.logo_size_mm,
                    style.logo_size_mm,
                )
            except DrawingBackendError as exc:
                context.logo_enabled = False
                logger.warning("company logo skipped, using a text-only header: %s", exc)
            else:
                text_x = geometry.margin_left + style.logo_size_mm + style.logo_gap_mm

        surface.set_font(style.header_name_size, "bold")
        surface.set_color(*style.accent_color)
        surface.draw_text(company.name or spec.generator_name, text_x, top + HEADER_NAME_OFFSET_MM)

        details = header_detail_lines(company, labels)
        if details:
            surface.set_font(style.header_detail_size, "normal")
            surface.set_color(*style.text_color)
            context.cursor.y = top + HEADER_DETAILS_OFFSET_MM
            for line in details:
                surface.draw_text(line, text_x, context.y)
                context.advance(HEADER_DETAIL_STEP_MM)

        rule_y = top + geometry.header_height - HEADER_RULE_INSET_MM
        surface.set_line_width(HEADER_RULE_WIDTH_MM)
        surface.set_color(*style.rule_color)
        surface.draw_line(geometry.margin_left, rule_y, geometry.content_right, rule_y)


def draw_footer(
    context: LayoutContext,
    company: CompanyProfile,
    labels: ContractLabels,
    *,
    page_index: int,
    total_pages: int | None,
) -> StampRegion:
    surface = context.surface
    geometry = context.geometry
    spec = context.spec
    style = spec.style
    footer_y = geometry.page_h - geometry.margin_bottom

    with context.preserve_cursor():
        rule_y = footer_y - FOOTER_RULE_OFFSET_MM
        surface.set_line_width(FOOTER_RULE_WIDTH_MM)
        surface.set_color(*style.rule_color)
        surface.draw_line(geometry.margin_left, rule_y, geometry.content_right, rule_y)

        surface.set_font(style.footer_size, "normal")
        surface.set_color(*style.footer_color)
        surface.draw_text(
            labels.attribution.format(generator=spec.generator_name),
            geometry.margin_left,
            footer_y - FOOTER_ATTRIBUTION_OFFSET_MM,
        )
        if company.website:
            surface.draw_text(
                company.website,
                geometry.margin_left,
                footer_y - FOOTER_WEBSITE_OFFSET_MM,
            )
        return draw_page_stamp(
            surface,
            geometry,
            spec,
            labels,
            page_index=page_index,
            total_pages=total_pages,
        )


def page_stamp_text(labels: ContractLabels, page_index: int, total_pages: int | None) -> str:
    total = PAGE_TOTAL_PLACEHOLDER if total_pages is None else str(total_pages)
    return labels.page_stamp.format(index=page_index, total=total)


def draw_page_stamp(
    surface: DrawingSurface,
    geometry: LayoutGeometry,
    spec: ContractSpec,
    labels: ContractLabels,
    *,
    page_index: int,
    total_pages: int | None,
    erase: StampRegion | None = None,
) -> StampRegion:
    """Draw the right-aligned page stamp, optionally painting over a previous one first."""
    style = spec.style
    footer_y = geometry.page_h - geometry.margin_bottom
    text = page_stamp_text(labels, page_index, total_pages)

    surface.set_font(style.footer_size, "normal")
    text_width = surface.string_width(text)
    width = max(STAMP_MIN_WIDTH_MM, text_width)
    if erase is not None:
        width = max(width, erase.width)
    region = StampRegion(
        x=geometry.content_right - width,
        y=footer_y - style.footer_size * PT_TO_MM,
        width=width,
        height=style.line_height(style.footer_size),
    )
    if erase is not None:
        surface.set_color(*WHITE)
        surface.draw_rect(region.x, region.y, region.width, region.height, fill=True)

    surface.set_color(*style.footer_color)
    surface.draw_text(text, geometry.content_right - text_width, footer_y)
    return region
