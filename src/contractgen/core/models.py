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

from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import Decimal

from .validation import (
    lookup,
    optional_date,
    optional_datetime,
    optional_decimal,
    optional_str,
    require_decimal,
    require_decimal_range,
    require_dict,
    require_str,
)

PREVIEW_ORDER_NUMBER = "PREVIEW"

_DISCOUNT_MIN = Decimal(0)
_DISCOUNT_MAX = Decimal(100)


@dataclass(frozen=True)
class Order:
    order_number: str
    created_at: datetime
    price: Decimal
    discount: Decimal = Decimal(0)
    product: str | None = None
    product_type: str | None = None
    origin: str | None = None
    packaging: str | None = None
    quantity: str | None = None
    delivery_date: date | None = None
    payment_terms: str | None = None
    actual_weight: Decimal | None = None
    invoice_amount: Decimal | None = None

    def __post_init__(self) -> None:
        require_decimal_range(
            Decimal(self.discount),
            min_val=_DISCOUNT_MIN,
            max_val=_DISCOUNT_MAX,
            label="discount",
        )

    def as_preview(self) -> "Order":
        return replace(self, order_number=PREVIEW_ORDER_NUMBER)


@dataclass(frozen=True)
class Party:
    name: str | None = None
    address: str | None = None
    city: str | None = None
    vat_number: str | None = None
    sdi: str | None = None
    phone: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class CompanyProfile:
    name: str | None = None
    address: str | None = None
    city: str | None = None
    postal_code: str | None = None
    province: str | None = None
    phone: str | None = None
    email: str | None = None
    vat_number: str | None = None
    website: str | None = None
    logo: str | bytes | None = None

    def merged_with(self, other: "CompanyProfile") -> "CompanyProfile":
        """Return a profile where fields set on ``other`` take precedence."""
        updates = {
            name: value
            for name, value in vars(other).items()
            if value is not None
        }
        return replace(self, **updates)


def order_from_dict(data: object, *, now: datetime | None = None) -> Order:
    """Build an Order from a store record (camelCase) or a TOML table (snake_case)."""
    record = require_dict(data, label="order")
    created_at = optional_datetime(
        lookup(record, "createdAt", "created_at"),
        label="order.createdAt",
    )
    discount = optional_decimal(lookup(record, "discount"), label="order.discount")
    if discount is None:
        discount = Decimal(0)
    require_decimal_range(
        discount,
        min_val=_DISCOUNT_MIN,
        max_val=_DISCOUNT_MAX,
        label="order.discount",
    )
    return Order(
        order_number=require_str(
            lookup(record, "orderNumber", "order_number"),
            label="order.orderNumber",
        ),
        created_at=created_at or now or datetime.now(),
        price=require_decimal(lookup(record, "price"), label="order.price"),
        discount=discount,
        product=optional_str(lookup(record, "product"), label="order.product"),
        product_type=optional_str(
            lookup(record, "type", "productType", "product_type"),
            label="order.type",
        ),
        origin=optional_str(lookup(record, "origin"), label="order.origin"),
        packaging=optional_str(lookup(record, "packaging"), label="order.packaging"),
        quantity=optional_str(lookup(record, "quantity"), label="order.quantity"),
        delivery_date=optional_date(
            lookup(record, "deliveryDate", "delivery_date"),
            label="order.deliveryDate",
        ),
        payment_terms=optional_str(
            lookup(record, "paymentTerms", "payment_terms"),
            label="order.paymentTerms",
        ),
        actual_weight=optional_decimal(
            lookup(record, "actualWeight", "actual_weight"),
            label="order.actualWeight",
        ),
        invoice_amount=optional_decimal(
            lookup(record, "invoiceAmount", "invoice_amount"),
            label="order.invoiceAmount",
        ),
    )


def party_from_dict(data: object, *, label: str = "party") -> Party:
    record = require_dict(data, label=label)
    return Party(
        name=optional_str(lookup(record, "name"), label=f"{label}.name"),
        address=optional_str(lookup(record, "address"), label=f"{label}.address"),
        city=optional_str(lookup(record, "city"), label=f"{label}.city"),
        vat_number=optional_str(
            lookup(record, "vatNumber", "vat_number"),
            label=f"{label}.vatNumber",
        ),
        sdi=optional_str(lookup(record, "sdi", "sdiCode", "sdi_code"), label=f"{label}.sdi"),
        phone=optional_str(lookup(record, "phone"), label=f"{label}.phone"),
        email=optional_str(lookup(record, "email"), label=f"{label}.email"),
    )


def company_from_dict(data: Mapping[str, object] | None) -> CompanyProfile:
    if not data:
        return CompanyProfile()
    record = require_dict(data, label="company")
    logo = lookup(record, "logo")
    if isinstance(logo, (bytes, bytearray)):
        logo_value: str | bytes | None = bytes(logo)
    else:
        logo_value = optional_str(logo, label="company.logo")
    return CompanyProfile(
        name=optional_str(lookup(record, "name"), label="company.name"),
        address=optional_str(lookup(record, "address"), label="company.address"),
        city=optional_str(lookup(record, "city"), label="company.city"),
        postal_code=optional_str(
            lookup(record, "postalCode", "postal_code"),
            label="company.postalCode",
        ),
        province=optional_str(lookup(record, "province"), label="company.province"),
        phone=optional_str(lookup(record, "phone"), label="company.phone"),
        email=optional_str(lookup(record, "email"), label="company.email"),
        vat_number=optional_str(
            lookup(record, "vatNumber", "vat_number"),
            label="company.vatNumber",
        ),
        website=optional_str(lookup(record, "website"), label="company.website"),
        logo=logo_value,
    )
