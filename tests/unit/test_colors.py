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

from inception_report.render.colors import NOTE_FILL, feature_color, hex_to_rgb, resolve_color


class TestResolveColor(unittest.TestCase):
    def test_palette_tokens_map_to_hex(self) -> None:
        self.assertEqual(resolve_color("bg-yellow-200", "#000000"), "#FEF08A")
        self.assertEqual(resolve_color(" bg-blue-100 ", "#000000"), "#DBEAFE")

    def test_opacity_suffix_uses_solid_colour(self) -> None:
        self.assertEqual(resolve_color("bg-pink-200/60", "#000000"), "#FBCFE8")
        self.assertEqual(resolve_color("bg-red-100/50", "#000000"), "#FEE2E2")

    def test_hex_passes_through(self) -> None:
        self.assertEqual(resolve_color("#abc", "#000000"), "#abc")
        self.assertEqual(resolve_color("#12AB9F", "#000000"), "#12AB9F")

    def test_unknown_or_missing_falls_back(self) -> None:
        for value in (None, "", "   ", "text-red-500", "#12345", 42):
            with self.subTest(value=value):
                self.assertEqual(resolve_color(value, NOTE_FILL), NOTE_FILL)


class TestHexToRgb(unittest.TestCase):
    def test_short_and_long_forms(self) -> None:
        self.assertEqual(hex_to_rgb("#abc"), (170, 187, 204))
        self.assertEqual(hex_to_rgb("#111827"), (17, 24, 39))


class TestFeatureColor(unittest.TestCase):
    def test_reads_first_colour_field_present(self) -> None:
        self.assertEqual(feature_color({"bgColor": "bg-green-100"}), "#DCFCE7")
        self.assertEqual(feature_color({"color": "", "card": {"color": "bg-blue-100"}}), "#DBEAFE")
        self.assertEqual(feature_color({"meta": {"color": "#FFFFFF"}}), "#FFFFFF")

    def test_defaults_when_absent(self) -> None:
        self.assertEqual(feature_color({}, "#F3F4F6"), "#F3F4F6")
        self.assertEqual(feature_color("not a mapping", "#F3F4F6"), "#F3F4F6")


if __name__ == "__main__":
    unittest.main()
