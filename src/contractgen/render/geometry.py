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

from dataclasses import dataclass

# Tolerance for coordinate comparisons (cursor at band top, fits exactly)
COORDINATE_EPSILON = 0.01

PAGE_SIZES_MM: dict[str, tuple[float, float]] = {
    "A4": (210.0, 297.0),
    "A5": (148.0, 210.0),
    "LETTER": (215.9, 279.4),
    "LEGAL": (215.9, 355.6),
}


@dataclass(frozen=True)
class LayoutGeometry:
    page_w: float
    page_h: float
    margin_left: float
    margin_right: float
    margin_top: float
    margin_bottom: float
    header_height: float
    footer_height: float
    content_start_y: float
    content_end_y: float
    content_width: float
    available_height: float

    @property
    def content_right(self) -> float:
        return self.page_w - self.margin_right


def page_size_mm(
    size: str,
    width_mm: float | None = None,
    height_mm: float | None = None,
) -> tuple[float, float]:
    if width_mm and height_mm:
        return (float(width_mm), float(height_mm))
    key = size.strip().upper()
    if key not in PAGE_SIZES_MM:
        raise ValueError(f"unknown page size: {size}")
    return PAGE_SIZES_MM[key]


def compute_geometry(
    page_w: float,
    page_h: float,
    *,
    margin_left: float,
    margin_right: float,
    margin_top: float,
    margin_bottom: float,
    header_height: float,
    footer_height: float,
) -> LayoutGeometry:
    content_start_y = margin_top + header_height
    content_end_y = page_h - margin_bottom - footer_height
    return LayoutGeometry(
        page_w=float(page_w),
        page_h=float(page_h),
        margin_left=float(margin_left),
        margin_right=float(margin_right),
        margin_top=float(margin_top),
        margin_bottom=float(margin_bottom),
        header_height=float(header_height),
        footer_height=float(footer_height),
        content_start_y=float(content_start_y),
        content_end_y=float(content_end_y),
        content_width=float(page_w - margin_left - margin_right),
        available_height=float(content_end_y - content_start_y),
    )


def validate_geometry(geometry: LayoutGeometry) -> LayoutGeometry:
    """Reject geometry that leaves no room for content; raised once per generation."""
    if geometry.page_w <= 0 or geometry.page_h <= 0:
        raise ValueError("page dimensions must be positive")
    for label, value in (
        ("margin_left", geometry.margin_left),
        ("margin_right", geometry.margin_right),
        ("margin_top", geometry.margin_top),
        ("margin_bottom", geometry.margin_bottom),
        ("header_height", geometry.header_height),
        ("footer_height", geometry.footer_height),
    ):
        if value < 0:
            raise ValueError(f"{label} must be non-negative")
    if geometry.content_width <= 0:
        raise ValueError("margins leave no horizontal room for content")
    if geometry.available_height <= 0:
        raise ValueError("header, footer and margins leave no vertical room for content")
    return geometry
