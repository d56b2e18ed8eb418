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
from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal

from ..core.errors import MissingRequiredInputError
from ..core.models import CompanyProfile, Order, Party
from .context import LayoutContext
from .document import Document
from .finalize import finalize
from .geometry import validate_geometry
from .labels import ContractLabels, labels_for
from .pages import PageManager
from .recording import RecordingSurface, TextMeasurer
from .sections import SectionComposer
from .spec import ContractSpec
from .surface import DrawingSurface
from .text_flow import TextFlow

logger = logging.getLogger(__name__)

_CENTS = Decimal("0.01")
_HUNDRED = Decimal(100)


def format_amount(value: Decimal) -> str:
    return str(Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP))


def format_number(value: Decimal) -> str:
    """Render a decimal without exponent or trailing zeros (``10``, ``12.5``)."""
    return f"{Decimal(value).normalize():f}"


def final_price(price: Decimal, discount: Decimal) -> Decimal:
    discounted = Decimal(price) * (1 - Decimal(discount) / _HUNDRED)
    return discounted.quantize(_CENTS, rounding=ROUND_HALF_UP)


def party_lines(party: Party | None, labels: ContractLabels) -> list[str]:
    """Identity fields always print (``N/A`` when unknown); contact fields only when set."""
    party = party or Party()
    na = labels.not_available
    lines = [
        labels.party_name.format(value=party.name or na),
        labels.party_address.format(value=party.address or na),
        labels.party_city.format(value=party.city or na),
        labels.party_vat.format(value=party.vat_number or na),
    ]
    for template, value in (
        (labels.party_sdi, party.sdi),
        (labels.party_phone, party.phone),
        (labels.party_email, party.email),
    ):
        if value:
            lines.append(template.format(value=value))
    return lines


def product_lines(order: Order, labels: ContractLabels) -> list[str]:
    return [
        template.format(value=value)
        for template, value in (
            (labels.product, order.product),
            (labels.product_type, order.product_type),
            (labels.origin, order.origin),
            (labels.packaging, order.packaging),
            (labels.quantity, order.quantity),
        )
        if value
    ]


def commercial_lines(order: Order, labels: ContractLabels) -> list[str]:
    lines = [labels.price.format(value=format_amount(order.price))]
    if order.discount > 0:
        lines.append(labels.discount.format(value=format_number(order.discount)))
        lines.append(
            labels.final_price.format(value=format_amount(final_price(order.price, order.discount)))
        )
    if order.delivery_date is not None:
        lines.append(
            labels.delivery_date.format(value=order.delivery_date.strftime(labels.date_format))
        )
    if order.actual_weight is not None:
        lines.append(labels.actual_weight.format(value=format_number(order.actual_weight)))
    if order.invoice_amount is not None:
        lines.append(labels.invoice_amount.format(value=format_amount(order.invoice_amount)))
    return lines


class ContractAssembler:
    """Fixed top-level sequence of a sales contract, driven over one layout context."""

    def __init__(
        self,
        context: LayoutContext,
        document: Document,
        company: CompanyProfile,
        labels: ContractLabels,
    ) -> None:
        self.context = context
        self.document = document
        self.labels = labels
        self.pages = PageManager(context, document, company, labels)
        self.flow = TextFlow(context, self.pages)
        self.sections = SectionComposer(context, self.pages, self.flow)

    def build(self, order: Order, buyer: Party | None, seller: Party | None) -> Document:
        labels = self.labels
        self.pages.start()
        self._title()
        self._order_meta(order)
        self.sections.section(labels.buyer_section, party_lines(buyer, labels))
        self.sections.section(labels.seller_section, party_lines(seller, labels))
        self.sections.section(labels.product_section, product_lines(order, labels))
        self.sections.section(labels.commercial_section, self._commercial(order))
        self._legal()
        self._signatures()
        return finalize(self.document)

    def _legal(self) -> None:
        style = self.context.spec.style
        self.pages.check_new_page(style.legal_reserve_mm)
        self.context.advance(style.legal_gap_mm)
        self.sections.section(
            self.labels.legal_section,
            self.labels.legal_terms,
            body_size=style.legal_size,
        )

    def _title(self) -> None:
        context = self.context
        surface = context.surface
        style = context.spec.style
        self.pages.check_new_page(style.line_height(style.title_size))
        surface.set_font(style.title_size, "bold")
        surface.set_color(*style.accent_color)
        width = surface.string_width(self.labels.title)
        surface.draw_text(self.labels.title, (context.geometry.page_w - width) / 2, context.y)
        context.advance(style.title_advance_mm)

    def _order_meta(self, order: Order) -> None:
        context = self.context
        surface = context.surface
        geometry = context.geometry
        style = context.spec.style
        labels = self.labels
        self.pages.check_new_page(style.meta_advance_mm + style.meta_rule_gap_mm)

        surface.set_font(style.meta_size, "normal")
        surface.set_color(*style.text_color)
        surface.draw_text(
            labels.order_number.format(value=order.order_number),
            geometry.margin_left,
            context.y,
        )
        created = labels.order_date.format(value=order.created_at.strftime(labels.date_format))
        created_x = geometry.content_right - surface.string_width(created)
        surface.draw_text(created, created_x, context.y)
        context.advance(style.meta_advance_mm)

        surface.set_line_width(0.5)
        surface.set_color(*style.rule_color)
        surface.draw_line(geometry.margin_left, context.y, geometry.content_right, context.y)
        context.advance(style.meta_rule_gap_mm)

    def _commercial(self, order: Order) -> Callable[[], None]:
        def render() -> None:
            context = self.context
            surface = context.surface
            geometry = context.geometry
            style = context.spec.style
            for line in commercial_lines(order, self.labels):
                self.flow.draw_wrapped(
                    line,
                    geometry.margin_left,
                    size=style.body_size,
                    color=style.text_color,
                )
            if not order.payment_terms:
                return
            context.advance(style.payment_label_gap_mm)
            self.pages.check_new_page(
                style.payment_label_advance_mm + style.line_height(style.body_size)
            )
            surface.set_font(style.body_size, "bold")
            surface.set_color(*style.text_color)
            surface.draw_text(self.labels.payment_terms, geometry.margin_left, context.y)
            context.advance(style.payment_label_advance_mm)
            self.flow.draw_wrapped(
                order.payment_terms,
                geometry.margin_left,
                size=style.body_size,
                color=style.text_color,
                max_width=geometry.content_width,
            )

        return render

    def _signatures(self) -> None:
        context = self.context
        surface = context.surface
        geometry = context.geometry
        style = context.spec.style
        signature = context.spec.signature
        labels = self.labels

        self.pages.check_new_page(signature.block_height, atomic=True)
        context.advance(signature.gap_before_mm)
        surface.set_font(signature.title_size, "bold")
        surface.set_color(*style.accent_color)
        surface.draw_text(labels.signatures_section, geometry.margin_left, context.y)
        context.advance(signature.title_advance_mm)

        box_y = context.y
        box_width = (geometry.content_width - signature.box_gap_mm) / 2
        surface.set_line_width(0.5)
        surface.set_font(signature.label_size, "normal")
        for box_x, role in (
            (geometry.margin_left, labels.buyer_signature),
            (geometry.margin_left + box_width + signature.box_gap_mm, labels.seller_signature),
        ):
            surface.set_color(*style.muted_color)
            surface.draw_rect(box_x, box_y, box_width, signature.box_height_mm)
            label_x = box_x + signature.label_inset_mm
            surface.draw_text(role, label_x, box_y + signature.label_offset_mm)
            surface.draw_text(
                labels.signature_date,
                label_x,
                box_y + signature.box_height_mm - signature.date_offset_mm,
            )
        context.advance(signature.box_height_mm)


def generate_contract(
    order: Order | None,
    buyer: Party | None,
    seller: Party | None,
    company: CompanyProfile | None = None,
    *,
    spec: ContractSpec | None = None,
    surface: DrawingSurface | None = None,
    measurer: TextMeasurer | None = None,
    preview: bool = False,
) -> Document:
    """Lay out a sales contract and return the finalized, sealed document.

    Every call owns its own layout context and surface; nothing is shared between calls.
    """
    if order is None:
        raise MissingRequiredInputError("an order is required to generate a contract")
    if buyer is None and seller is None:
        raise MissingRequiredInputError("at least one of buyer or seller is required")

    spec = spec or ContractSpec()
    labels = labels_for(spec.language)
    geometry = validate_geometry(spec.geometry())
    company = company or CompanyProfile()
    if preview:
        order = order.as_preview()
    if surface is None:
        surface = RecordingSurface(
            geometry.page_w,
            geometry.page_h,
            measurer=measurer,
            font_family=spec.style.font_family,
        )
    elif surface.page_count():
        raise ValueError("surface must be empty")

    context = LayoutContext(surface, geometry, spec)
    document = Document(surface, geometry, spec, company, labels)
    logger.debug("laying out contract %s (%s)", order.order_number, spec.language)
    ContractAssembler(context, document, company, labels).build(order, buyer, seller)
    logger.info("contract %s laid out on %d page(s)", order.order_number, document.page_count)
    return document
