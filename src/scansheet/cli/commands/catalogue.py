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

import typer

from ...catalogue.vim import default_catalogue
from ...config import load_cli_defaults
from ..core.common import _apply_ui_defaults, _ctx_value, _resolve_config_and_paper, _run_cli
from ..ui import build_catalogue_table, console


def register(app: typer.Typer) -> None:
    app.command(name="list", help="List the built-in command catalogue.")(list_catalogue)


def list_catalogue(ctx: typer.Context) -> None:
    config_value, paper_value = _resolve_config_and_paper(ctx, None, None)

    def _run() -> None:
        defaults = load_cli_defaults(config_value, paper_size=paper_value)
        _apply_ui_defaults(ctx, defaults.ui)
        console.print(build_catalogue_table(default_catalogue()))

    _run_cli(_run, debug=bool(_ctx_value(ctx, "debug")))
