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

from PIL import Image

from inception_report.render.cards import (
    Confidence,
    decode_image,
    draw_image_fit,
    feature_name,
    feature_value,
    get_confidence,
    parse_confidence,
    review_card_height,
    tag_card_height,
)
from tests.test_support import make_context, png_data_uri


class TestParseConfidence(unittest.TestCase):
    def test_words_and_colours(self) -> None:
        cases = {
            "Alta": Confidence.HIGH,
            "high": Confidence.HIGH,
            "green": Confidence.HIGH,
            "média": Confidence.MEDIUM,
            "Yellow": Confidence.MEDIUM,
            "baixa": Confidence.LOW,
            "red": Confidence.LOW,
            "l": Confidence.LOW,
        }
        for raw, expected in cases.items():
            with self.subTest(raw=raw):
                self.assertIs(parse_confidence(raw), expected)

    def test_numbers_use_thresholds(self) -> None:
        self.assertIs(parse_confidence(3), Confidence.HIGH)
        self.assertIs(parse_confidence("2"), Confidence.MEDIUM)
        self.assertIs(parse_confidence(1.5), Confidence.LOW)
        self.assertIs(parse_confidence(0), Confidence.UNKNOWN)
        self.assertIs(parse_confidence(""), Confidence.UNKNOWN)

    def test_objects_are_unwrapped(self) -> None:
        self.assertIs(parse_confidence({"level": "low"}), Confidence.LOW)
        self.assertIs(parse_confidence({"value": 3}), Confidence.HIGH)
        self.assertIs(parse_confidence({}), Confidence.UNKNOWN)

    def test_unknown_values(self) -> None:
        self.assertIs(parse_confidence(None), Confidence.UNKNOWN)
        self.assertIs(parse_confidence("maybe"), Confidence.UNKNOWN)


class TestGetConfidence(unittest.TestCase):
    def test_first_known_field_wins(self) -> None:
        self.assertIs(get_confidence({"confidence": "", "confidenceLevel": "alta"}), Confidence.HIGH)
        self.assertIs(get_confidence({"review": {"confidence": "red"}}), Confidence.LOW)
        self.assertIs(get_confidence({"meta": {"confidence": 2}}), Confidence.MEDIUM)
        self.assertIs(get_confidence({}), Confidence.UNKNOWN)


class TestFeatureFields(unittest.TestCase):
    def test_defaults_and_heart_symbol(self) -> None:
        self.assertEqual(feature_name({}), "New Feature")
        self.assertEqual(feature_name({"name": "Pay &hearts;"}), "Pay <3")
        self.assertEqual(feature_value({"valuation": "$$ E <3"}), "$$ E <3")
        self.assertEqual(feature_value({}), "")


class TestCardHeights(unittest.TestCase):
    def test_short_tag_uses_minimum(self) -> None:
        ctx = make_context()
        self.assertEqual(tag_card_height(ctx.pdf, "MVP", 55), 36)

    def test_long_names_make_taller_cards(self) -> None:
        ctx = make_context()
        short = review_card_height(ctx.pdf, {"name": "Login"}, 55)
        long = review_card_height(ctx.pdf, {"name": "Pay invoices with saved cards and split bills " * 3}, 55)
        self.assertGreaterEqual(short, 36)
        self.assertGreater(long, short)


class TestImages(unittest.TestCase):
    def test_decode_data_uri(self) -> None:
        image = decode_image(png_data_uri((4, 2)))
        self.assertEqual(image.size, (4, 2))

    def test_embeds_valid_image(self) -> None:
        ctx = make_context()
        self.assertTrue(draw_image_fit(ctx, png_data_uri(), 20, 40, 24, 24))
        self.assertEqual(ctx.warnings, [])

    def test_bad_image_is_skipped_with_warning(self) -> None:
        ctx = make_context()
        self.assertFalse(draw_image_fit(ctx, "not-an-image!!", 20, 40, 24, 24))
        self.assertEqual(len(ctx.warnings), 1)
        self.assertFalse(draw_image_fit(ctx, None, 20, 40, 24, 24))
        self.assertEqual(len(ctx.warnings), 1)

    def test_image_over_pixel_limit_is_skipped_with_warning(self) -> None:
        ctx = make_context()
        with mock.patch.object(Image, "MAX_IMAGE_PIXELS", 2):
            self.assertFalse(draw_image_fit(ctx, png_data_uri((4, 2)), 20, 40, 24, 24))
        self.assertEqual(len(ctx.warnings), 1)
        self.assertIn("could not embed image", ctx.warnings[0])


if __name__ == "__main__":
    unittest.main()
