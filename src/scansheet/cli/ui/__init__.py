#!/usr/bin/env python3
from __future__ import annotations

from rich import box
from rich.markup import escape
from rich.table import Table

from ...core.models import Catalogue
from .state import UIContext, get_context

DEFAULT_CONTEXT = get_context()
THEME = DEFAULT_CONTEXT.theme
console = DEFAULT_CONTEXT.console
console_err = DEFAULT_CONTEXT.console_err


def _resolve_context(context: UIContext | None) -> UIContext:
    return context or DEFAULT_CONTEXT


def configure_ui(*, no_color: bool, context: UIContext | None = None) -> None:
    context = _resolve_context(context)
    context.set_no_color(no_color)


def build_catalogue_table(catalogue: Catalogue) -> Table:
    table = Table(box=box.SIMPLE_HEAD, header_style="title")
    table.add_column("#", justify="right", style="muted")
    table.add_column("Code", style="code", no_wrap=True)
    table.add_column("Label")
    table.add_column("Description")
    for index, entry in enumerate(catalogue):
        table.add_row(
            str(index),
            escape(repr(entry.code)),
            escape(entry.label),
            escape(entry.description),
        )
    return table


__all__ = [
    "THEME",
    "UIContext",
    "build_catalogue_table",
    "configure_ui",
    "console",
    "console_err",
]
