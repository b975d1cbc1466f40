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

import unittest
from unittest import mock

from scansheet.cli import startup


class TestCliStartup(unittest.TestCase):
    def test_run_startup_flow_matrix(self) -> None:
        cases = (
            {
                "name": "init-config-exits",
                "init_config": True,
                "needs_init": False,
                "quiet": False,
                "expect_result": True,
                "expect_init_calls": 1,
                "expect_needs_calls": 0,
                "expect_print_calls": 1,
            },
            {
                "name": "missing-config-initialized",
                "init_config": False,
                "needs_init": True,
                "quiet": True,
                "expect_result": False,
                "expect_init_calls": 1,
                "expect_needs_calls": 1,
                "expect_print_calls": 0,
            },
            {
                "name": "config-already-present",
                "init_config": False,
                "needs_init": False,
                "quiet": True,
                "expect_result": False,
                "expect_init_calls": 0,
                "expect_needs_calls": 1,
                "expect_print_calls": 0,
            },
        )
        for case in cases:
            with self.subTest(case=case["name"]):
                with mock.patch.object(startup, "configure_ui") as configure_mock:
                    with mock.patch.object(
                        startup,
                        "init_user_config",
                        return_value="/tmp/cfg",
                    ) as init_mock:
                        with mock.patch.object(
                            startup,
                            "user_config_needs_init",
                            return_value=case["needs_init"],
                        ) as needs_mock:
                            with mock.patch.object(startup.console, "print") as print_mock:
                                result = startup.run_startup(
                                    quiet=bool(case["quiet"]),
                                    no_color=True,
                                    debug=False,
                                    init_config=bool(case["init_config"]),
                                )
                self.assertEqual(result, case["expect_result"])
                configure_mock.assert_called_once_with(no_color=True)
                self.assertEqual(init_mock.call_count, case["expect_init_calls"])
                self.assertEqual(needs_mock.call_count, case["expect_needs_calls"])
                self.assertEqual(print_mock.call_count, case["expect_print_calls"])

    def test_run_startup_debug_and_auto_init_prints_message(self) -> None:
        with mock.patch.object(startup, "configure_ui"):
            with mock.patch.object(startup, "install_rich_traceback") as traceback_mock:
                with mock.patch.object(startup, "user_config_needs_init", return_value=True):
                    with mock.patch.object(startup, "init_user_config", return_value="/tmp/cfg"):
                        with mock.patch.object(startup.console, "print") as print_mock:
                            result = startup.run_startup(
                                quiet=False,
                                no_color=False,
                                debug=True,
                                init_config=False,
                            )
        self.assertFalse(result)
        traceback_mock.assert_called_once_with(show_locals=True)
        self.assertEqual(print_mock.call_count, 1)
        self.assertIn("Initialized user config", str(print_mock.call_args[0][0]))


if __name__ == "__main__":
    unittest.main()
