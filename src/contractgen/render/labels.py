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
from typing import Final


@dataclass(frozen=True)
class ContractLabels:
    title: str
    order_number: str
    order_date: str
    buyer_section: str
    seller_section: str
    product_section: str
    commercial_section: str
    legal_section: str
    signatures_section: str
    party_name: str
    party_address: str
    party_city: str
    party_vat: str
    party_sdi: str
    party_phone: str
    party_email: str
    product: str
    product_type: str
    origin: str
    packaging: str
    quantity: str
    price: str
    discount: str
    final_price: str
    delivery_date: str
    actual_weight: str
    invoice_amount: str
    payment_terms: str
    legal_terms: tuple[str, ...]
    buyer_signature: str
    seller_signature: str
    signature_date: str
    header_phone: str
    header_email: str
    header_vat: str
    page_stamp: str
    attribution: str
    not_available: str
    filename_prefix: str
    preview_filename: str
    date_format: str


ENGLISH: Final = ContractLabels(
    title="SALES CONTRACT",
    order_number="Order No.: {value}",
    order_date="Date: {value}",
    buyer_section="BUYER:",
    seller_section="SELLER:",
    product_section="SUBJECT OF SALE:",
    commercial_section="COMMERCIAL TERMS:",
    legal_section="TERMS AND CONDITIONS:",
    signatures_section="SIGNATURES:",
    party_name="Company name: {value}",
    party_address="Address: {value}",
    party_city="City: {value}",
    party_vat="VAT number: {value}",
    party_sdi="SDI code: {value}",
    party_phone="Phone: {value}",
    party_email="Email: {value}",
    product="Product: {value}",
    product_type="Type: {value}",
    origin="Origin: {value}",
    packaging="Packaging: {value}",
    quantity="Quantity: {value}",
    price="Price: EUR {value}/kg",
    discount="Discount: {value}%",
    final_price="Final price: EUR {value}/kg",
    delivery_date="Delivery date: {value}",
    actual_weight="Actual weight: {value} kg",
    invoice_amount="Invoice amount: EUR {value}",
    payment_terms="Payment terms:",
    legal_terms=(
        "- This contract is governed by Italian law.",
        "- Goods travel at the buyer's risk.",
        "- Any complaint must be notified within 24 hours of delivery.",
        "- Payment must be made according to the agreed terms.",
        "- Disputes fall under the court of territorial jurisdiction.",
    ),
    buyer_signature="Buyer signature",
    seller_signature="Seller signature",
    signature_date="Date: _______________",
    header_phone="Tel: {value}",
    header_email="Email: {value}",
    header_vat="VAT: {value}",
    page_stamp="Page {index} of {total}",
    attribution="Document generated automatically by {generator}",
    not_available="N/A",
    filename_prefix="Contract",
    preview_filename="Contract_Preview.pdf",
    date_format="%Y-%m-%d",
)

ITALIAN: Final = ContractLabels(
    title="CONTRATTO DI COMPRAVENDITA",
    order_number="Ordine N.: {value}",
    order_date="Data: {value}",
    buyer_section="COMPRATORE:",
    seller_section="VENDITORE:",
    product_section="OGGETTO DELLA VENDITA:",
    commercial_section="CONDIZIONI COMMERCIALI:",
    legal_section="TERMINI E CONDIZIONI:",
    signatures_section="FIRME:",
    party_name="Ragione Sociale: {value}",
    party_address="Indirizzo: {value}",
    party_city="Città: {value}",
    party_vat="P.IVA: {value}",
    party_sdi="Codice SDI: {value}",
    party_phone="Telefono: {value}",
    party_email="Email: {value}",
    product="Prodotto: {value}",
    product_type="Tipologia: {value}",
    origin="Origine: {value}",
    packaging="Imballaggio: {value}",
    quantity="Quantità: {value}",
    price="Prezzo: EUR {value}/KG",
    discount="Sconto: {value}%",
    final_price="Prezzo Finale: EUR {value}/KG",
    delivery_date="Data Consegna: {value}",
    actual_weight="Peso Effettivo: {value} KG",
    invoice_amount="Importo Fattura: EUR {value}",
    payment_terms="Condizioni di Pagamento:",
    legal_terms=(
        "- Il presente contratto è regolato dalla legge italiana.",
        "- La merce viaggia a rischio e pericolo del compratore.",
        "- Eventuali reclami devono essere comunicati entro 24 ore dalla consegna.",
        "- Il pagamento deve essere effettuato secondo i termini concordati.",
        "- Per controversie è competente il Tribunale di competenza territoriale.",
    ),
    buyer_signature="Firma Compratore",
    seller_signature="Firma Venditore",
    signature_date="Data: _______________",
    header_phone="Tel: {value}",
    header_email="Email: {value}",
    header_vat="P.IVA: {value}",
    page_stamp="Pagina {index} di {total}",
    attribution="Documento generato automaticamente dal {generator}",
    not_available="N/A",
    filename_prefix="Contratto",
    preview_filename="Anteprima_Contratto.pdf",
    date_format="%d/%m/%Y",
)

LABELS: Final[dict[str, ContractLabels]] = {
    "en": ENGLISH,
    "it": ITALIAN,
}


def labels_for(language: str) -> ContractLabels:
    key = language.strip().lower()
    if key not in LABELS:
        supported = ", ".join(sorted(LABELS))
        raise ValueError(f"unsupported language: {language} (expected one of: {supported})")
    return LABELS[key]
