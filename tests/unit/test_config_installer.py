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
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from scansheet.config import installer
from tests.test_support import isolated_config_home, temp_env


class TestConfigInstaller(unittest.TestCase):
    def test_user_config_dir_precedence(self) -> None:
        with mock.patch.dict(os.environ, {installer.XDG_CONFIG_ENV: "/tmp/xdg"}, clear=False):
            with mock.patch.object(installer.sys, "platform", "linux"):
                self.assertEqual(installer._user_config_dir(), Path("/tmp/xdg/scansheet"))

        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop(installer.XDG_CONFIG_ENV, None)
            with mock.patch.object(installer.sys, "platform", "darwin"):
                with mock.patch.object(installer.Path, "home", return_value=Path("/Users/example")):
                    self.assertEqual(
                        installer._user_config_dir(),
                        Path("/Users/example/.config/scansheet"),
                    )

        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop(installer.XDG_CONFIG_ENV, None)
            with mock.patch.object(installer.sys, "platform", "linux"):
                with mock.patch.object(
                    installer, "user_config_dir", return_value="/opt/config/scansheet"
                ):
                    self.assertEqual(installer._user_config_dir(), Path("/opt/config/scansheet"))

    def test_build_paths_lists_one_file_per_preset(self) -> None:
        with mock.patch.object(installer, "_user_config_dir", return_value=Path("/tmp/usercfg")):
            paths = installer._build_paths()
        self.assertEqual(paths.user_config_dir, Path("/tmp/usercfg"))
        self.assertEqual(
            paths.user_paper_configs,
            {"A4": Path("/tmp/usercfg/a4.toml"), "LETTER": Path("/tmp/usercfg/letter.toml")},
        )

    def test_packaged_presets_exist(self) -> None:
        for key, path in installer.PAPER_CONFIGS.items():
            with self.subTest(paper=key):
                self.assertTrue(path.is_file())
        self.assertEqual(installer.DEFAULT_CONFIG_PATH, installer.PAPER_CONFIGS["A4"])

    def test_init_user_config_copies_presets_once(self) -> None:
        with isolated_config_home() as home:
            self.assertTrue(installer.user_config_needs_init())
            config_dir = installer.init_user_config()
            self.assertEqual(config_dir, home / "scansheet")
            self.assertFalse(installer.user_config_needs_init())
            user_a4 = config_dir / "a4.toml"
            user_a4.write_text("# edited\n", encoding="utf-8")
            installer.init_user_config()
            self.assertEqual(user_a4.read_text(encoding="utf-8"), "# edited\n")

    def test_init_user_config_raises_when_dir_unwritable(self) -> None:
        with mock.patch.object(installer, "_ensure_user_config", return_value=False):
            with self.assertRaises(OSError):
                installer.init_user_config()

    def test_resolve_config_path_explicit_path_wins(self) -> None:
        with isolated_config_home():
            with temp_env({installer.PAPER_SIZE_ENV: "letter"}):
                resolved = installer.resolve_config_path("/some/where.toml", paper_size="A4")
        self.assertEqual(resolved, Path("/some/where.toml"))

    def test_resolve_config_path_prefers_user_presets(self) -> None:
        with isolated_config_home() as home:
            config_dir = home / "scansheet"
            self.assertEqual(installer.resolve_config_path(None), config_dir / "a4.toml")
            self.assertEqual(
                installer.resolve_config_path(None, paper_size=" letter "),
                config_dir / "letter.toml",
            )
            with temp_env({installer.PAPER_SIZE_ENV: "Letter"}):
                self.assertEqual(installer.resolve_config_path(None), config_dir / "letter.toml")

    def test_resolve_config_path_falls_back_to_packaged_preset(self) -> None:
        with isolated_config_home():
            with mock.patch.object(installer, "_ensure_user_config", return_value=False):
                self.assertEqual(installer.resolve_config_path(None), installer.DEFAULT_CONFIG_PATH)
                self.assertEqual(
                    installer.resolve_config_path(None, paper_size="LETTER"),
                    installer.PAPER_CONFIGS["LETTER"],
                )

    def test_resolve_config_path_unknown_paper(self) -> None:
        with isolated_config_home():
            with self.assertRaises(ValueError) as ctx:
                installer.resolve_config_path(None, paper_size="A3")
        self.assertIn("unknown paper size: A3", str(ctx.exception))

    def test_copy_if_missing_keeps_existing_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            source = Path(tmpdir) / "source.toml"
            dest = Path(tmpdir) / "nested" / "dest.toml"
            source.write_text("new", encoding="utf-8")
            installer._copy_if_missing(source, dest)
            self.assertEqual(dest.read_text(encoding="utf-8"), "new")
            source.write_text("newer", encoding="utf-8")
            installer._copy_if_missing(source, dest)
            self.assertEqual(dest.read_text(encoding="utf-8"), "new")


if __name__ == "__main__":
    unittest.main()
