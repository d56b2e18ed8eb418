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

import json
from dataclasses import dataclass
from pathlib import Path

from ...core.models import (
    CompanyProfile,
    Order,
    Party,
    company_from_dict,
    order_from_dict,
    party_from_dict,
)
from ...core.validation import require_dict


@dataclass(frozen=True)
class ContractInput:
    order: Order | None
    buyer: Party | None
    seller: Party | None
    company: CompanyProfile | None


def _read_json(path: str | Path, *, label: str) -> object:
    input_path = Path(path).expanduser()
    if not input_path.is_file():
        raise FileNotFoundError(f"{label} not found: {input_path}")
    try:
        with input_path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except json.JSONDecodeError as exc:
        raise ValueError(f"{label} is not valid JSON ({input_path}): {exc}") from exc


def load_contract_input(path: str | Path) -> ContractInput:
    """Read ``{"order", "buyer", "seller", "company"}``; every key may be absent or null."""
    data = require_dict(_read_json(path, label="contract input"), label="contract input")
    order = data.get("order")
    buyer = data.get("buyer")
    seller = data.get("seller")
    company = data.get("company")
    return ContractInput(
        order=None if order is None else order_from_dict(order),
        buyer=None if buyer is None else party_from_dict(buyer, label="buyer"),
        seller=None if seller is None else party_from_dict(seller, label="seller"),
        company=None if company is None else company_from_dict(company),
    )


def load_company_profile(path: str | Path) -> CompanyProfile:
    data = require_dict(_read_json(path, label="company profile"), label="company")
    return company_from_dict(data)
