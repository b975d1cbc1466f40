#!/usr/bin/env python3
from __future__ import annotations

import sys
from dataclasses import dataclass

from rich.console import Console
from rich.theme import Theme


def isatty(stream, fallback) -> bool:
    if stream is not None:
        try:
            return bool(stream.isatty())
        except (OSError, ValueError, AttributeError):
            return False
    return bool(getattr(fallback, "isatty", lambda: False)())


# Style names used in markup across the CLI ("[code]", "[path]", ...).
THEME = Theme(
    {
        "title": "bold cyan",
        "accent": "cyan",
        "code": "bold cyan",
        "path": "underline",
        "success": "green",
        "warning": "yellow",
        "error": "red",
        "muted": "dim",
    }
)


@dataclass
class UIContext:
    theme: Theme
    console: Console
    console_err: Console

    @property
    def no_color(self) -> bool:
        return self.console.no_color and self.console_err.no_color

    def set_no_color(self, value: bool) -> None:
        self.console.no_color = value
        self.console_err.no_color = value


def _build_console(*, stderr: bool, no_color: bool = False) -> Console:
    raw = sys.__stderr__ if stderr else sys.__stdout__
    fallback = sys.stderr if stderr else sys.stdout
    return Console(
        stderr=stderr,
        theme=THEME,
        force_terminal=isatty(raw, fallback),
        no_color=no_color,
        highlight=False,
    )


def create_default_context(*, no_color: bool = False) -> UIContext:
    return UIContext(
        theme=THEME,
        console=_build_console(stderr=False, no_color=no_color),
        console_err=_build_console(stderr=True, no_color=no_color),
    )


DEFAULT_CONTEXT = create_default_context()


def get_context() -> UIContext:
    return DEFAULT_CONTEXT
