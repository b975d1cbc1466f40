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
from ...config import apply_title, load_app_config
from ...render.sheet import render_to_file
from ..core.common import (
    _apply_ui_defaults,
    _ctx_value,
    _resolve_config_and_paper,
    _run_cli,
)
from ..core.log import _warn
from ..ui import console

_RENDER_HELP = (
    "Render the built-in command catalogue as a barcode sheet.\n\n"
    "Examples:\n"
    "  scansheet render\n"
    "  scansheet --paper letter render -o vim-letter.png\n"
    "  scansheet render --no-title -o sheet.png\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_RENDER_HELP)(render)


def render(
    ctx: typer.Context,
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output image path (defaults to sheet.output from the config).",
        rich_help_panel="Outputs",
    ),
    title: str | None = typer.Option(
        None,
        "--title",
        help="Override the page title.",
        rich_help_panel="Layout",
    ),
    no_title: bool = typer.Option(
        False,
        "--no-title",
        help="Leave the top margin empty.",
        rich_help_panel="Layout",
    ),
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))
    config_value, paper_value = _resolve_config_and_paper(ctx, None, None)

    def _run() -> None:
        config = load_app_config(config_value, paper_size=paper_value)
        config = apply_title(config, title, no_title=no_title)
        quiet = _apply_ui_defaults(ctx, config.cli_defaults.ui)
        output_path = output or config.output_path
        result = render_to_file(default_catalogue(), config.sheet, output_path)
        for outcome in result.skipped:
            _warn(
                f"skipped {outcome.entry.code!r} ({outcome.stage}): {outcome.reason}",
                quiet=quiet,
            )
        if quiet:
            return
        geometry = result.geometry
        console.print(f"Saved: [path]{escape(str(output_path))}[/path]")
        console.print(
            f"[muted]{len(result.rendered)} rendered, {len(result.skipped)} skipped; "
            f"{geometry.columns}x{geometry.rows} grid on "
            f"{geometry.width_px}x{geometry.height_px}px[/muted]"
        )

    _run_cli(_run, debug=debug_value)
