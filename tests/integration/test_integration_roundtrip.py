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

import tempfile
import unittest
from pathlib import Path

from PIL import Image
from typer.testing import CliRunner

from scansheet.catalogue.vim import default_catalogue
from scansheet.cli import app
from scansheet.config import PAPER_CONFIGS, load_app_config
from scansheet.render.sheet import render_sheet, render_to_file
from scansheet.render.types import Rendered
from scansheet.symbology.scan import decode_cell, scan_sheet
from tests.test_support import HAS_ZXING, isolated_config_home


@unittest.skipUnless(HAS_ZXING, "zxingcpp not available")
class TestIntegrationRoundtrip(unittest.TestCase):
    def test_a4_sheet_decodes_every_cell(self) -> None:
        catalogue = default_catalogue()
        config = load_app_config(path=PAPER_CONFIGS["A4"]).sheet
        result = render_sheet(catalogue, config)

        self.assertEqual(result.image.size, (2481, 3507))
        self.assertEqual((result.geometry.columns, result.geometry.rows), (4, 27))
        self.assertEqual(len(result.rendered), len(catalogue))
        for outcome in result.outcomes:
            with self.subTest(code=outcome.entry.code):
                self.assertIsInstance(outcome, Rendered)
                self.assertEqual(decode_cell(result.image, outcome.bounds), outcome.entry.code)

    def test_letter_sheet_roundtrips_through_png(self) -> None:
        catalogue = default_catalogue()
        config = load_app_config(path=PAPER_CONFIGS["LETTER"]).sheet
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "letter.png"
            result = render_to_file(catalogue, config, path)
            with Image.open(path) as image:
                self.assertEqual(image.size, (2550, 3300))
            decoded = scan_sheet(path, result.geometry)
        self.assertEqual(decoded, catalogue.codes())

    def test_cli_render_then_verify(self) -> None:
        runner = CliRunner()
        with isolated_config_home(), tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "sheet.png"
            rendered = runner.invoke(app, ["--paper", "letter", "render", "-o", str(path)])
            self.assertEqual(rendered.exit_code, 0, rendered.output)
            verified = runner.invoke(app, ["--paper", "letter", "verify", str(path)])
            self.assertEqual(verified.exit_code, 0, verified.output)
            self.assertIn("All 106 cells decoded.", verified.output)

            mismatched = runner.invoke(app, ["--paper", "A4", "verify", str(path)])
        self.assertEqual(mismatched.exit_code, 2)
        self.assertIn("expected 2481x3507px", mismatched.output)


if __name__ == "__main__":
    unittest.main()
