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

import io
import sys
import unittest
from unittest import mock

from rich.console import Console

from scansheet.cli import ui as ui_module
from scansheet.cli.ui.state import THEME, UIContext, create_default_context, get_context, isatty
from tests.test_support import sample_catalogue


class TestIsatty(unittest.TestCase):
    def test_stream_isatty_passthrough(self) -> None:
        for expected in (True, False):
            with self.subTest(expected=expected):
                stream = mock.MagicMock()
                stream.isatty.return_value = expected
                self.assertEqual(isatty(stream, fallback=sys.stdout), expected)

    def test_stream_isatty_errors_return_false(self) -> None:
        for side_effect in (OSError("not available"), ValueError("closed")):
            with self.subTest(side_effect=type(side_effect).__name__):
                stream = mock.MagicMock()
                stream.isatty.side_effect = side_effect
                self.assertFalse(isatty(stream, fallback=sys.stdout))

    def test_none_stream_uses_fallback(self) -> None:
        fallback = mock.MagicMock()
        fallback.isatty.return_value = True
        self.assertTrue(isatty(None, fallback=fallback))
        self.assertFalse(isatty(None, fallback=object()))

    def test_stringio_is_not_tty(self) -> None:
        self.assertFalse(isatty(io.StringIO(), fallback=sys.stdout))


class TestContextState(unittest.TestCase):
    def test_create_default_context(self) -> None:
        context = create_default_context()
        self.assertEqual(context.theme, THEME)
        self.assertFalse(context.no_color)
        self.assertTrue(context.console_err.stderr)
        self.assertFalse(context.console.stderr)

    def test_get_context_returns_singleton_instance(self) -> None:
        self.assertIs(get_context(), get_context())


class TestConfigureUi(unittest.TestCase):
    def test_no_color_applies_to_both_consoles(self) -> None:
        context = UIContext(
            theme=THEME,
            console=Console(file=io.StringIO(), theme=THEME),
            console_err=Console(file=io.StringIO(), theme=THEME),
        )
        ui_module.configure_ui(no_color=True, context=context)
        self.assertTrue(context.console.no_color)
        self.assertTrue(context.console_err.no_color)
        self.assertTrue(context.no_color)

    def test_default_context_without_color(self) -> None:
        self.assertTrue(create_default_context(no_color=True).no_color)


class TestCatalogueTable(unittest.TestCase):
    def test_table_lists_every_entry(self) -> None:
        catalogue = sample_catalogue((":echo [x]", "[x]", "Markup-looking label"))
        table = ui_module.build_catalogue_table(catalogue)
        self.assertEqual(table.row_count, len(catalogue))

        buffer = io.StringIO()
        Console(file=buffer, theme=THEME, width=200, no_color=True).print(table)
        output = buffer.getvalue()
        self.assertIn("':set number'", output)
        self.assertIn("Substitute in whole file", output)
        self.assertIn("':echo [x]'", output)


class TestTheme(unittest.TestCase):
    def test_theme_has_required_styles(self) -> None:
        for name in ("title", "code", "path", "success", "warning", "error", "muted"):
            with self.subTest(style=name):
                self.assertIn(name, THEME.styles)


if __name__ == "__main__":
    unittest.main()
