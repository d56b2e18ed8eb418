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

from .app import app as app, main as main
from .commands.contract import (
    ContractResult as ContractResult,
    run_contract_command as run_contract_command,
)
from .io.inputs import ContractInput as ContractInput, load_contract_input as load_contract_input

__all__ = [
    "ContractInput",
    "ContractResult",
    "app",
    "load_contract_input",
    "main",
    "run_contract_command",
]
