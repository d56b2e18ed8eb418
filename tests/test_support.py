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

import io
import json
import os
import struct
import zlib
from contextlib import contextmanager
from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from unittest import mock

from PIL import Image

from contractgen.core.models import CompanyProfile, Order, Party
from contractgen.render.context import LayoutContext
from contractgen.render.contract import generate_contract
from contractgen.render.document import Document
from contractgen.render.labels import labels_for
from contractgen.render.pages import PageManager
from contractgen.render.recording import DrawCommand, FixedWidthMeasurer, RecordingSurface
from contractgen.render.spec import ContractSpec

# =============================================================================
# Test Constants
# =============================================================================

TEST_CREATED_AT = datetime(2025, 3, 14, 9, 30)
TEST_TODAY = date(2025, 3, 14)
LONG_PAYMENT_TERMS = ("Payment within thirty days of invoice date, bank transfer. " * 40)[:2000]


# =============================================================================
# Environment Helpers
# =============================================================================


@contextmanager
def temp_env(overrides: dict[str, str], *, clear: bool = False):
    with mock.patch.dict(os.environ, overrides, clear=clear):
        yield


# =============================================================================
# Record Builders
# =============================================================================


def make_order(**overrides: object) -> Order:
    """Scenario A order: a single page contract with no discount."""
    values: dict[str, object] = {
        "order_number": "1001",
        "created_at": TEST_CREATED_AT,
        "price": Decimal("0.30"),
        "discount": Decimal(0),
        "payment_terms": "30 giorni",
    }
    values.update(overrides)
    return Order(**values)  # type: ignore[arg-type]


def make_party(**overrides: object) -> Party:
    values: dict[str, object] = {
        "name": "Acme Foods S.p.A.",
        "address": "Via Milano 10",
        "city": "Bologna",
        "vat_number": "IT01234567890",
    }
    values.update(overrides)
    return Party(**values)  # type: ignore[arg-type]


def make_company(**overrides: object) -> CompanyProfile:
    values: dict[str, object] = {
        "name": "Green Trade S.r.l.",
        "address": "Via Roma 1",
        "postal_code": "00100",
        "city": "Roma",
        "province": "RM",
        "phone": "+39 06 000000",
        "email": "info@greentrade.example",
        "vat_number": "IT09876543210",
        "website": "www.greentrade.example",
    }
    values.update(overrides)
    return CompanyProfile(**values)  # type: ignore[arg-type]


def contract_input_record(**overrides: object) -> dict[str, object]:
    """Input JSON in the camelCase shape the order store exports."""
    record: dict[str, object] = {
        "order": {
            "orderNumber": "1001",
            "createdAt": "2025-03-14T09:30:00",
            "price": "0.30",
            "discount": 0,
            "product": "Tomatoes",
            "paymentTerms": "30 giorni",
        },
        "buyer": {
            "name": "Acme Foods S.p.A.",
            "address": "Via Milano 10",
            "city": "Bologna",
            "vatNumber": "IT01234567890",
        },
        "seller": {"name": "Sunny Farms S.r.l.", "city": "Latina"},
        "company": {"name": "Green Trade S.r.l.", "city": "Roma"},
    }
    record.update(overrides)
    return record


def write_json(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def png_bytes(size: tuple[int, int] = (4, 4)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, (60, 122, 95)).save(buffer, format="PNG")
    return buffer.getvalue()


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    crc = zlib.crc32(kind + data) & 0xFFFFFFFF
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", crc)


def oversized_png(width: int = 20000, height: int = 20000) -> bytes:
    """PNG whose header declares more pixels than Pillow agrees to open."""
    header = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    return (
        b"\x89PNG\r\n\x1a\n"
        + _png_chunk(b"IHDR", header)
        + _png_chunk(b"IDAT", zlib.compress(b""))
        + _png_chunk(b"IEND", b"")
    )


# =============================================================================
# Layout Builders
# =============================================================================


def make_surface(spec: ContractSpec | None = None) -> RecordingSurface:
    geometry = (spec or ContractSpec()).geometry()
    return RecordingSurface(geometry.page_w, geometry.page_h, measurer=FixedWidthMeasurer())


def make_layout(
    spec: ContractSpec | None = None,
    company: CompanyProfile | None = None,
) -> tuple[LayoutContext, Document, PageManager]:
    spec = spec or ContractSpec()
    company = company or make_company()
    labels = labels_for(spec.language)
    surface = make_surface(spec)
    geometry = spec.geometry()
    context = LayoutContext(surface, geometry, spec)
    document = Document(surface, geometry, spec, company, labels)
    pages = PageManager(context, document, company, labels)
    return context, document, pages


def generate(
    order: Order | None = None,
    buyer: Party | None = None,
    seller: Party | None = None,
    company: CompanyProfile | None = None,
    **kwargs: object,
) -> Document:
    kwargs.setdefault("measurer", FixedWidthMeasurer())
    return generate_contract(
        order or make_order(),
        buyer or make_party(),
        seller or make_party(name="Sunny Farms S.r.l.", city="Palermo"),
        company or make_company(),
        **kwargs,  # type: ignore[arg-type]
    )


def with_language(spec: ContractSpec | None, language: str) -> ContractSpec:
    return replace(spec or ContractSpec(), language=language)


# =============================================================================
# Surface Inspection
# =============================================================================


def commands(surface: RecordingSurface, index: int, op: str) -> list[DrawCommand]:
    return [command for command in surface.commands(index) if command.op == op]


def page_texts(surface: RecordingSurface, index: int) -> list[str]:
    return [str(command.args[0]) for command in commands(surface, index, "text")]


def all_texts(surface: RecordingSurface) -> list[str]:
    texts: list[str] = []
    for index in range(1, surface.page_count() + 1):
        texts.extend(page_texts(surface, index))
    return texts


def text_y(surface: RecordingSurface, index: int, text: str) -> float:
    for command in commands(surface, index, "text"):
        if command.args[0] == text:
            return float(command.args[2])
    raise AssertionError(f"text not found on page {index}: {text!r}")
