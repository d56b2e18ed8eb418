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

import tomllib
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import TypeVar

from ..core.models import CompanyProfile, company_from_dict
from ..render.geometry import PAGE_SIZES_MM, validate_geometry
from ..render.labels import LABELS
from ..render.spec import ContractSpec, PageSpec, SignatureSpec, StyleSpec
from .installer import DEFAULT_PAPER_SIZE, resolve_config_path

_SpecT = TypeVar("_SpecT", PageSpec, StyleSpec, SignatureSpec)


@dataclass(frozen=True)
class UiDefaults:
    quiet: bool = False
    no_color: bool = False


@dataclass(frozen=True)
class AppConfig:
    path: Path
    paper_size: str
    spec: ContractSpec = field(default_factory=ContractSpec)
    company: CompanyProfile = field(default_factory=CompanyProfile)
    ui: UiDefaults = field(default_factory=UiDefaults)


def load_app_config(path: str | Path | None = None, *, paper_size: str | None = None) -> AppConfig:
    config_path = resolve_config_path(path, paper_size=paper_size)
    data = _load_toml(config_path)

    page = _parse_spec_section(PageSpec(), _get_dict(data, "page"), section="page")
    resolved_paper_size = (paper_size or page.size or DEFAULT_PAPER_SIZE).strip().upper()
    if resolved_paper_size not in PAGE_SIZES_MM and not (page.width_mm and page.height_mm):
        raise ValueError(f"page.size: unknown page size: {resolved_paper_size}")
    page = replace(page, size=resolved_paper_size)

    document_cfg = _get_dict(data, "document")
    language = _parse_language(document_cfg.get("language"), field="document.language")
    generator_name = _parse_optional_str(
        document_cfg.get("generator_name"),
        field="document.generator_name",
    )
    spec = ContractSpec(
        page=page,
        style=_parse_spec_section(StyleSpec(), _get_dict(data, "style"), section="style"),
        signature=_parse_spec_section(
            SignatureSpec(),
            _get_dict(data, "signature"),
            section="signature",
        ),
        language=language or ContractSpec.language,
        generator_name=generator_name or ContractSpec.generator_name,
    )
    validate_geometry(spec.geometry())

    return AppConfig(
        path=config_path,
        paper_size=resolved_paper_size,
        spec=spec,
        company=_parse_company(_get_dict(data, "company"), base_dir=config_path.parent),
        ui=_parse_ui_defaults(_get_dict(data, "ui")),
    )


def _parse_spec_section(default: _SpecT, cfg: dict[str, object], *, section: str) -> _SpecT:
    updates: dict[str, object] = {}
    for spec_field in fields(default):
        name = spec_field.name
        if name not in cfg:
            continue
        current = getattr(default, name)
        label = f"{section}.{name}"
        value = cfg[name]
        if isinstance(current, str):
            parsed = _parse_optional_str(value, field=label)
            if parsed is None:
                raise ValueError(f"{label} must be a non-empty string")
            updates[name] = parsed
        elif isinstance(current, tuple):
            updates[name] = _parse_color(value, field=label)
        elif current is None:
            updates[name] = _parse_optional_positive_number(value, field=label)
        elif _is_size_field(name):
            updates[name] = _parse_positive_number(value, field=label)
        else:
            updates[name] = _parse_non_negative_number(value, field=label)
    return replace(default, **updates)


def _is_size_field(name: str) -> bool:
    return name.endswith("_size") or name in {"line_height_factor", "box_height_mm"}


def _parse_company(cfg: dict[str, object], *, base_dir: Path) -> CompanyProfile:
    company = company_from_dict(cfg)
    logo = company.logo
    if isinstance(logo, str) and not logo.startswith("data:"):
        logo_path = Path(logo).expanduser()
        if not logo_path.is_absolute():
            logo_path = base_dir / logo_path
        company = replace(company, logo=str(logo_path))
    return company


def _parse_ui_defaults(cfg: dict[str, object]) -> UiDefaults:
    return UiDefaults(
        quiet=_parse_bool(cfg.get("quiet"), field="ui.quiet", default=False),
        no_color=_parse_bool(cfg.get("no_color"), field="ui.no_color", default=False),
    )


def _parse_language(value: object, *, field: str) -> str | None:
    language = _parse_optional_str(value, field=field)
    if language is None:
        return None
    normalized = language.lower()
    if normalized not in LABELS:
        supported = ", ".join(sorted(LABELS))
        raise ValueError(f"{field} must be one of: {supported}")
    return normalized


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_optional_str(value: object, *, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    normalized = value.strip()
    return normalized or None


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{field} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"{field} must be a boolean")
    raise ValueError(f"{field} must be a boolean")


def _parse_number(value: object, *, field: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{field} must be a number")
    return float(value)


def _parse_non_negative_number(value: object, *, field: str) -> float:
    parsed = _parse_number(value, field=field)
    if parsed < 0:
        raise ValueError(f"{field} must be a non-negative number")
    return parsed


def _parse_positive_number(value: object, *, field: str) -> float:
    parsed = _parse_number(value, field=field)
    if parsed <= 0:
        raise ValueError(f"{field} must be a positive number")
    return parsed


def _parse_optional_positive_number(value: object, *, field: str) -> float | None:
    if value is None or value == 0:
        return None
    return _parse_positive_number(value, field=field)


def _parse_color(value: object, *, field: str) -> tuple[int, int, int]:
    if isinstance(value, str):
        text = value.strip().lstrip("#")
        if len(text) == 6:
            try:
                return (int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16))
            except ValueError as exc:
                raise ValueError(f"{field} must be a hex colour or [r, g, b]") from exc
    if isinstance(value, (list, tuple)) and len(value) == 3:
        channels = []
        for channel in value:
            if isinstance(channel, bool) or not isinstance(channel, int):
                raise ValueError(f"{field} channels must be integers")
            if not 0 <= channel <= 255:
                raise ValueError(f"{field} channels must be between 0 and 255")
            channels.append(channel)
        return (channels[0], channels[1], channels[2])
    raise ValueError(f"{field} must be a hex colour or [r, g, b]")
