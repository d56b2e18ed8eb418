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
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any


def require_dict(value: object, *, label: str) -> dict[Any, Any]:
    """Validate that value is a dict."""
    if not isinstance(value, dict):
        raise ValueError(f"{label} must be an object")
    return value


def lookup(mapping: Mapping[str, object], *keys: str) -> object:
    """Return the first present, non-null value among alternative key spellings."""
    for key in keys:
        value = mapping.get(key)
        if value is not None:
            return value
    return None


def optional_str(value: object, *, label: str) -> str | None:
    """Normalize an optional text field; blank strings count as absent."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"{label} must be a string")
    if isinstance(value, (int, float, Decimal)):
        value = str(value)
    if not isinstance(value, str):
        raise ValueError(f"{label} must be a string")
    text = value.strip()
    return text or None


def require_str(value: object, *, label: str) -> str:
    text = optional_str(value, label=label)
    if text is None:
        raise ValueError(f"{label} is required")
    return text


def optional_decimal(value: object, *, label: str) -> Decimal | None:
    """Parse a decimal from a number or numeric string; blank strings count as absent."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"{label} must be a number")
    if isinstance(value, Decimal):
        parsed = value
    elif isinstance(value, int):
        parsed = Decimal(value)
    elif isinstance(value, float):
        parsed = Decimal(repr(value))
    elif isinstance(value, str):
        text = value.strip().replace(",", ".")
        if not text:
            return None
        try:
            parsed = Decimal(text)
        except InvalidOperation as exc:
            raise ValueError(f"{label} must be a number") from exc
    else:
        raise ValueError(f"{label} must be a number")
    if not parsed.is_finite():
        raise ValueError(f"{label} must be a finite number")
    return parsed


def require_decimal(value: object, *, label: str) -> Decimal:
    parsed = optional_decimal(value, label=label)
    if parsed is None:
        raise ValueError(f"{label} is required")
    return parsed


def require_decimal_range(
    value: Decimal,
    *,
    min_val: Decimal,
    max_val: Decimal,
    label: str,
) -> Decimal:
    """Validate that a decimal value is within range [min_val, max_val]."""
    if value < min_val or value > max_val:
        raise ValueError(f"{label} must be between {min_val} and {max_val}")
    return value


def optional_date(value: object, *, label: str) -> date | None:
    """Parse an ISO-8601 date; datetimes are truncated to their date."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"{label} must be an ISO-8601 date")
    text = value.strip()
    if not text:
        return None
    try:
        if "T" in text or " " in text:
            return _parse_datetime_text(text).date()
        return date.fromisoformat(text)
    except ValueError as exc:
        raise ValueError(f"{label} must be an ISO-8601 date") from exc


def optional_datetime(value: object, *, label: str) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    if not isinstance(value, str):
        raise ValueError(f"{label} must be an ISO-8601 timestamp")
    text = value.strip()
    if not text:
        return None
    try:
        return _parse_datetime_text(text)
    except ValueError as exc:
        raise ValueError(f"{label} must be an ISO-8601 timestamp") from exc


def _parse_datetime_text(text: str) -> datetime:
    if text.endswith("Z"):
        text = f"{text[:-1]}+00:00"
    return datetime.fromisoformat(text)
