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
from datetime import date
from pathlib import Path

from inception_report.config import (
    DEFAULT_CONFIG_PATH,
    init_user_config,
    load_app_config,
    resolve_config_path,
    user_config_needs_init,
    user_config_path,
)
from tests.test_support import temp_env


def _write(tmpdir: str, text: str) -> Path:
    path = Path(tmpdir) / "config.toml"
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadAppConfig(unittest.TestCase):
    def test_packaged_defaults(self) -> None:
        config = load_app_config(DEFAULT_CONFIG_PATH)
        self.assertEqual(config.paper_size, "A4")
        self.assertEqual(config.report.brand_name, "Lean Inception")
        self.assertIsNone(config.report.title)
        self.assertFalse(config.ui.quiet)

    def test_parses_all_sections(self) -> None:
        toml = """
[report]
brand_name = "Acme Inception"
title = "Payments Workshop"
date_format = "%Y-%m-%d"

[page]
size = "letter"

[ui]
quiet = "yes"
no_color = 1
"""
        with tempfile.TemporaryDirectory() as tmpdir:
            config = load_app_config(_write(tmpdir, toml))
        self.assertEqual(config.paper_size, "LETTER")
        self.assertEqual(config.report.brand_name, "Acme Inception")
        self.assertEqual(config.report.title, "Payments Workshop")
        self.assertTrue(config.ui.quiet)
        self.assertTrue(config.ui.no_color)

        options = config.report_options(report_date=date(2024, 5, 1))
        self.assertEqual(options.paper_size, "LETTER")
        self.assertEqual(options.header_date(), "2024-05-01")
        self.assertEqual(config.report_options(brand_name="Other", paper_size="a4").brand_name, "Other")
        self.assertEqual(config.report_options(paper_size="a4").paper_size, "A4")

    def test_invalid_values_raise(self) -> None:
        cases = {
            '[page]\nsize = "A5"\n': "page.size",
            '[report]\ndate_format = "plain"\n': "report.date_format",
            "[report]\nbrand_name = 3\n": "report.brand_name",
            '[ui]\nquiet = "maybe"\n': "ui.quiet",
        }
        for toml, field in cases.items():
            with self.subTest(field=field), tempfile.TemporaryDirectory() as tmpdir:
                with self.assertRaises(ValueError) as ctx:
                    load_app_config(_write(tmpdir, toml))
                self.assertIn(field, str(ctx.exception))


class TestConfigInstaller(unittest.TestCase):
    def test_falls_back_to_packaged_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir, temp_env({"XDG_CONFIG_HOME": tmpdir}):
            self.assertTrue(user_config_needs_init())
            self.assertEqual(resolve_config_path(), DEFAULT_CONFIG_PATH)

    def test_init_copies_defaults_and_is_then_preferred(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir, temp_env({"XDG_CONFIG_HOME": tmpdir}):
            path = init_user_config()
            self.assertEqual(path, Path(tmpdir) / "inception-report" / "config.toml")
            self.assertEqual(path, user_config_path())
            self.assertFalse(user_config_needs_init())
            self.assertEqual(resolve_config_path(), path)

            path.write_text('[page]\nsize = "LETTER"\n', encoding="utf-8")
            init_user_config()
            self.assertIn("LETTER", path.read_text(encoding="utf-8"))
            init_user_config(overwrite=True)
            self.assertEqual(path.read_bytes(), DEFAULT_CONFIG_PATH.read_bytes())

    def test_explicit_path_wins(self) -> None:
        self.assertEqual(resolve_config_path("custom.toml"), Path("custom.toml"))


if __name__ == "__main__":
    unittest.main()
