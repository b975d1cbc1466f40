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

from pathlib import Path

import typer
from rich.markup import escape

from ...catalogue.vim import default_catalogue
from ...config import load_app_config
from ...render.sheet import sheet_geometry
from ...symbology.scan import scan_sheet
from ..core.common import (
    _apply_ui_defaults,
    _ctx_value,
    _resolve_config_and_paper,
    _run_cli,
)
from ..ui import console, console_err

_VERIFY_HELP = (
    "Decode every cell of a rendered sheet and compare it with the catalogue.\n\n"
    "Use the same --config/--paper as for rendering so the grid lines up.\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_VERIFY_HELP)(verify)


def verify(
    ctx: typer.Context,
    image: Path = typer.Argument(..., help="Rendered sheet image."),
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))
    config_value, paper_value = _resolve_config_and_paper(ctx, None, None)

    def _run() -> int:
        config = load_app_config(config_value, paper_size=paper_value)
        quiet = _apply_ui_defaults(ctx, config.cli_defaults.ui)
        catalogue = default_catalogue()
        geometry = sheet_geometry(len(catalogue), config.sheet)
        decoded = scan_sheet(image, geometry)
        failures = 0
        for index, (entry, value) in enumerate(zip(catalogue, decoded)):
            if value == entry.code:
                continue
            failures += 1
            console_err.print(
                f"[red]Mismatch:[/red] cell {index} expected {escape(repr(entry.code))}, "
                f"decoded {escape(repr(value))}"
            )
        if failures:
            console_err.print(f"[red]Error:[/red] {failures} of {len(catalogue)} cells failed")
            return 1
        if not quiet:
            console.print(f"[success]All {len(catalogue)} cells decoded.[/success]")
        return 0

    _run_cli(_run, debug=debug_value)
