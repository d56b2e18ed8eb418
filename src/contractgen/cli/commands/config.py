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

import os
import shlex
import subprocess
from pathlib import Path

import typer

from ...config import AppConfig, load_app_config, resolve_config_path
from ..api import build_kv_table, console
from ..core.common import _ctx_value, _resolve_config_and_paper, _run_cli
from ..core.log import _warn

_EDITOR_ENV_VARS = ("CONTRACTGEN_EDITOR", "VISUAL", "EDITOR")
_SYSTEM_OPENERS = frozenset({"default", "system"})

_CONFIG_HELP = (
    "Show, check or edit the active contract layout config.\n\n"
    "The editor comes from --editor, then $CONTRACTGEN_EDITOR, $VISUAL or $EDITOR; without one\n"
    "the file opens in the system default application. After a terminal editor exits the\n"
    "file is loaded again and any layout error is reported.\n\n"
    "Examples:\n"
    "  contractgen config --print-path\n"
    "  contractgen --paper letter config --check\n"
    "  contractgen config --config ./my_layout.toml --editor nano\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_CONFIG_HELP)(config)


def config(
    ctx: typer.Context,
    config: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Config file to use instead of the active preset.",
        rich_help_panel="Config",
    ),
    editor: str | None = typer.Option(
        None,
        "--editor",
        "-e",
        help="Editor command ('default' forces the system opener).",
        rich_help_panel="Behavior",
    ),
    print_path: bool = typer.Option(
        False,
        "--print-path",
        help="Print the resolved config path and exit.",
        rich_help_panel="Behavior",
    ),
    check: bool = typer.Option(
        False,
        "--check",
        help="Load the config, report the page layout it yields and exit.",
        rich_help_panel="Behavior",
    ),
) -> None:
    config_value, paper_value = _resolve_config_and_paper(ctx, config, None)
    quiet_value = bool(_ctx_value(ctx, "quiet"))
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        path = resolve_config_path(config_value, paper_size=paper_value)
        if print_path:
            console.print(str(path))
            return
        if check:
            console.print(_layout_table(load_app_config(path)))
            return
        _edit_config(path, editor=editor, quiet=quiet_value)

    _run_cli(_run, debug=debug_value)


def _layout_table(app_config: AppConfig):
    spec = app_config.spec
    geometry = spec.geometry()
    return build_kv_table(
        [
            ("Config", str(app_config.path)),
            ("Paper", f"{app_config.paper_size} ({geometry.page_w:g} x {geometry.page_h:g} mm)"),
            ("Language", spec.language),
            (
                "Content band",
                f"{geometry.content_start_y:.1f}-{geometry.content_end_y:.1f} mm "
                f"({geometry.available_height:.1f} mm high)",
            ),
            ("Content width", f"{geometry.content_width:.1f} mm"),
            ("Signature block", f"{spec.signature.block_height:.1f} mm"),
            ("Company", app_config.company.name or "-"),
        ],
        title="Layout",
    )


def _edit_config(path: Path, *, editor: str | None, quiet: bool) -> None:
    target = Path(os.path.expandvars(str(path))).expanduser()
    if not target.is_file():
        raise FileNotFoundError(f"config file not found: {target}")

    command = _editor_command(editor)
    if not quiet:
        suffix = f" with {command[0]}" if command else ""
        console.print(f"[dim]Opening {target}{suffix}...[/dim]")
    if command is None:
        typer.launch(str(target))
        return

    subprocess.run([*command, str(target)], check=False)
    try:
        load_app_config(target)
    except ValueError as exc:
        _warn(f"{target} no longer loads: {exc}", quiet=quiet)


def _editor_command(editor: str | None) -> list[str] | None:
    if editor is None:
        editor = next((os.environ[name] for name in _EDITOR_ENV_VARS if os.environ.get(name)), "")
    choice = editor.strip()
    if not choice or choice.lower() in _SYSTEM_OPENERS:
        return None
    return shlex.split(choice, posix=os.name != "nt")
