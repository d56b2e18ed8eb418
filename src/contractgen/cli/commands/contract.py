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
from dataclasses import dataclass, replace
from pathlib import Path

import typer

from ...config import load_app_config
from ...core.models import CompanyProfile
from ...render.contract import generate_contract
from ...render.document import contract_filename
from ...render.labels import LABELS, labels_for
from ..api import build_kv_table, configure_ui, console
from ..core.common import _ctx_value, _resolve_config_and_paper, _run_cli
from ..core.log import _warn
from ..io.inputs import load_company_profile, load_contract_input
from ..io.outputs import _resolve_output_path, _write_document

logger = logging.getLogger(__name__)

_CONTRACT_HELP = (
    "Generate a paginated sales contract PDF from a JSON order record.\n\n"
    'The input holds {"order": ..., "buyer": ..., "seller": ..., "company": ...}.\n'
    "Company details from --company override the [company] table of the config.\n\n"
    "Examples:\n"
    "  contractgen contract order.json\n"
    "  contractgen contract order.json -o out/contract.pdf --language it\n"
    "  contractgen --paper letter contract order.json --preview\n"
)


@dataclass(frozen=True)
class ContractResult:
    output_path: Path
    page_count: int
    order_number: str
    language: str


def register(app: typer.Typer) -> None:
    app.command(help=_CONTRACT_HELP)(contract)


def contract(
    ctx: typer.Context,
    input_path: str = typer.Argument(..., metavar="INPUT", help="Contract input JSON file."),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output PDF path or directory (default: <Prefix>_<order>_<date>.pdf).",
        rich_help_panel="Outputs",
    ),
    company: str | None = typer.Option(
        None,
        "--company",
        help="Company profile JSON (header and footer branding).",
        rich_help_panel="Inputs",
    ),
    language: str | None = typer.Option(
        None,
        "--language",
        "-l",
        help=f"Contract language ({'/'.join(sorted(LABELS))}).",
        rich_help_panel="Layout",
    ),
    preview: bool = typer.Option(
        False,
        "--preview",
        help="Render a preview contract (order number replaced, preview file name).",
        rich_help_panel="Layout",
    ),
    config: str | None = typer.Option(
        None,
        "--config",
        help="Use this TOML config file.",
        rich_help_panel="Config",
    ),
) -> None:
    quiet_value = bool(_ctx_value(ctx, "quiet"))
    debug_value = bool(_ctx_value(ctx, "debug"))
    config_value, paper_value = _resolve_config_and_paper(ctx, config, None)

    def _run() -> None:
        result = run_contract_command(
            input_path,
            output=output,
            company_path=company,
            language=language,
            preview=preview,
            config_path=config_value,
            paper_size=paper_value,
            quiet=quiet_value,
        )
        if not quiet_value:
            console.print(_summary_table(result))

    _run_cli(_run, debug=debug_value)


def run_contract_command(
    input_path: str,
    *,
    output: str | None = None,
    company_path: str | None = None,
    language: str | None = None,
    preview: bool = False,
    config_path: str | None = None,
    paper_size: str | None = None,
    quiet: bool = False,
) -> ContractResult:
    app_config = load_app_config(config_path, paper_size=paper_size)
    quiet = quiet or app_config.ui.quiet
    if app_config.ui.no_color:
        configure_ui(no_color=True)
    spec = app_config.spec
    if language:
        labels_for(language)
        spec = replace(spec, language=language.strip().lower())

    contract_input = load_contract_input(input_path)
    company_profile = _merge_company(
        app_config.company,
        contract_input.company,
        load_company_profile(company_path) if company_path else None,
    )
    if not company_profile.name:
        _warn("no company name configured; the header shows the generator name", quiet=quiet)

    document = generate_contract(
        contract_input.order,
        contract_input.buyer,
        contract_input.seller,
        company_profile,
        spec=spec,
        preview=preview,
    )
    default_name = contract_filename(contract_input.order, document.labels, preview=preview)
    path = _write_document(document, _resolve_output_path(output, default_name), quiet=quiet)
    logger.debug("contract written to %s", path)
    return ContractResult(
        output_path=path,
        page_count=document.page_count,
        order_number=contract_input.order.order_number,
        language=spec.language,
    )


def _merge_company(*profiles: CompanyProfile | None) -> CompanyProfile:
    merged = CompanyProfile()
    for profile in profiles:
        if profile is not None:
            merged = merged.merged_with(profile)
    return merged


def _summary_table(result: ContractResult):
    return build_kv_table(
        [
            ("Order", result.order_number),
            ("Language", result.language),
            ("Pages", str(result.page_count)),
            ("Output", str(result.output_path)),
        ],
        title="Contract",
    )
