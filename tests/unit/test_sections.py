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

from inception_report.render.sections.mvp_canvas import canvas_height, render_mvp_canvas
from inception_report.render.sections.review import (
    plan_wave_rows,
    render_sequencer,
    wave_items,
    wave_tags,
    wave_title,
)
from inception_report.render.sections.scope import (
    COLUMN_GAP,
    ROW_GAP,
    quadrant_height,
    render_is_is_not,
    with_group_color,
)
from inception_report.render.sections.vision import render_product_vision, render_user_journeys
from inception_report.render.templates import RENDERERS, TemplateKind, render_section, resolve_kind
from tests.test_support import make_context, png_data_uri


class TestEmptyContent(unittest.TestCase):
    def test_every_template_draws_something_with_empty_content(self) -> None:
        for kind in TemplateKind:
            with self.subTest(kind=kind.value):
                ctx = make_context()
                start = ctx.y
                render_section(ctx, kind.value, {})
                self.assertGreater(ctx.y, start)
                self.assertEqual(ctx.page, 1)
                self.assertLess(ctx.y, ctx.geometry.bottom_bound)

    def test_every_kind_has_a_renderer(self) -> None:
        self.assertEqual(set(RENDERERS), set(TemplateKind))

    def test_non_mapping_content_is_treated_as_empty(self) -> None:
        ctx = make_context()
        render_section(ctx, "Glossary", ["not", "a", "mapping"])
        self.assertEqual(ctx.warnings, [])


class TestTemplateNames(unittest.TestCase):
    def test_aliases_resolve(self) -> None:
        self.assertIs(resolve_kind("Technical Review"), TemplateKind.TECHNICAL_REVIEW)
        self.assertIs(resolve_kind("Product Is/Is Not"), TemplateKind.IS_IS_NOT)
        self.assertIsNone(resolve_kind("Mystery Board"))

    def test_unknown_template_draws_notice_and_warns(self) -> None:
        ctx = make_context()
        start = ctx.y
        self.assertIsNone(render_section(ctx, "Mystery Board", {}))
        self.assertEqual(ctx.y, start + 8)
        self.assertEqual(len(ctx.warnings), 1)
        self.assertIn("Mystery Board", ctx.warnings[0])


class TestIsIsNot(unittest.TestCase):
    def test_does_row_starts_below_tallest_is_quadrant(self) -> None:
        ctx = make_context()
        group = {
            "is": ["Mobile first", "Self service", "Fast"],
            "isNot": ["A marketplace"],
            "does": ["Split bills"],
            "doesNot": [{"text": "Handle refunds", "color": "bg-red-100"}],
        }
        render_is_is_not(ctx, {"groups": [group]})

        is_row, does_row = ctx.spans_of("is-row")
        column_width = (ctx.width - COLUMN_GAP) / 2
        top = max(
            quadrant_height(ctx.pdf, with_group_color(group["is"], "bg-yellow-200"), column_width),
            quadrant_height(ctx.pdf, with_group_color(group["isNot"], "bg-yellow-200"), column_width),
        )
        self.assertEqual(is_row.start_page, does_row.start_page)
        self.assertAlmostEqual(does_row.start_y, is_row.start_y + top + ROW_GAP)

    def test_group_colour_fills_uncoloured_items(self) -> None:
        items = with_group_color(["a", {"text": "b", "color": "#FFFFFF"}], "bg-blue-100")
        self.assertEqual(items, [{"text": "a", "color": "bg-blue-100"}, {"text": "b", "color": "#FFFFFF"}])


class TestSequencer(unittest.TestCase):
    def test_tags_come_first_and_drop_empty_labels(self) -> None:
        wave = {"postIts": ["MVP", {"label": ""}, {"label": "Increment 1", "color": "#2563EB"}], "features": [{}]}
        self.assertEqual([tag.label for tag in wave_tags(wave)], ["MVP", "Increment 1"])
        self.assertEqual([item.kind for item in wave_items(wave)], ["tag", "tag", "feature"])

    def test_wave_title(self) -> None:
        self.assertEqual(wave_title(1, {"name": "Launch"}), "WAVE 1 - Launch")
        self.assertEqual(wave_title(2, {}), "WAVE 2")

    def test_tag_only_wave_is_measured_with_tag_heights(self) -> None:
        ctx = make_context()
        wave = {"name": "Launch", "postIts": ["MVP", "A", "B", "C", "D"]}
        rows = plan_wave_rows(ctx.pdf, wave_items(wave), ctx.width)
        self.assertEqual([len(row.items) for row in rows], [3, 2])

        with mock.patch("inception_report.render.sections.review.review_card_height") as review_height:
            render_sequencer(ctx, {"waves": [wave]})
        review_height.assert_not_called()
        self.assertEqual(len(ctx.spans_of("wave")), 1)

    def test_empty_wave_gets_placeholder(self) -> None:
        ctx = make_context()
        render_sequencer(ctx, {"waves": [{"name": "Later"}]})
        (span,) = ctx.spans_of("wave")
        self.assertEqual(span.label, "WAVE 1 - Later")
        self.assertGreater(span.end_y, span.start_y)


class TestMvpCanvas(unittest.TestCase):
    def test_canvas_stays_on_one_page(self) -> None:
        ctx = make_context()
        ctx.y = 200
        canvas = {"canvasData": {"features": ["Checkout", "Saved cards"], "personas": ["Ana"]}}
        render_mvp_canvas(ctx, {"mvpCanvases": [canvas, canvas]})
        spans = ctx.spans_of("mvp-canvas")
        self.assertEqual([span.label for span in spans], ["MVP CANVAS #1", "MVP CANVAS #2"])
        for span in spans:
            self.assertEqual(span.start_page, span.end_page)
        self.assertEqual(spans[0].start_page, 2)

    def test_canvas_taller_than_a_page_warns(self) -> None:
        ctx = make_context()
        canvas = {"canvasData": {"features": [f"Feature {idx}" for idx in range(80)]}}
        self.assertGreater(canvas_height(ctx.pdf, canvas, ctx.width), ctx.geometry.bottom_bound)
        render_mvp_canvas(ctx, {"mvpCanvases": [canvas]})
        self.assertEqual(len(ctx.warnings), 1)


class TestRowFills(unittest.TestCase):
    def _table_rows(self, renderer, content) -> list:
        ctx = make_context()
        with mock.patch("inception_report.render.sections.vision.key_value_table") as table:
            renderer(ctx, content)
        return [call.args[1] for call in table.call_args_list]

    def test_vision_row_override_then_record_colour_then_default(self) -> None:
        visions = [
            {"for": "Shoppers", "forColor": "bg-blue-100", "color": "bg-green-100"},
            {"colors": {"for": "bg-pink-200"}, "color": "#ABCDEF"},
            {"color": "bg-green-100", "theColor": "bg-unknown-900"},
            {},
        ]
        tables = self._table_rows(render_product_vision, {"visions": visions})
        self.assertEqual(len(tables), 4)

        fills = [{label: fill for label, _, fill in rows} for rows in tables]
        self.assertEqual(fills[0]["For:"], "#DBEAFE")
        self.assertEqual(fills[0]["Whose:"], "#DCFCE7")
        self.assertEqual(fills[1]["For:"], "#FBCFE8")
        self.assertEqual(fills[1]["Our product:"], "#ABCDEF")
        self.assertEqual(fills[2]["The:"], "#DCFCE7")
        self.assertEqual(set(fills[3].values()), {"#FEF08A"})
        self.assertEqual(tables[0][0][1], "Shoppers")

    def test_journey_row_override_then_record_colour_then_default(self) -> None:
        journeys = [
            {
                "persona": "Ana",
                "personaColor": "bg-pink-200",
                "steps": ["Opens app", {"text": "Pays", "color": "bg-blue-100"}],
                "goalColor": "not-a-colour",
                "color": "bg-green-100",
            },
            {"steps": [{}]},
        ]
        first, second = self._table_rows(render_user_journeys, {"journeys": journeys})

        self.assertEqual(
            first,
            [
                ("Personas:", "Ana", "#FBCFE8"),
                ("Step 1:", "Opens app", "#DCFCE7"),
                ("Step 2:", "Pays", "#DBEAFE"),
                ("Goal:", "-", "#DCFCE7"),
            ],
        )
        self.assertEqual(
            second,
            [
                ("Personas:", "-", "#FEF9C3"),
                ("Step 1:", "-", "#FEF9C3"),
                ("Goal:", "-", "#FEF9C3"),
            ],
        )


class TestPersonas(unittest.TestCase):
    def test_cards_render_with_photo(self) -> None:
        ctx = make_context()
        personas = [
            {"name": "Ana", "profile": "Designer", "behavior": "Pays online", "needs": "Speed", "photo": png_data_uri()},
            {"name": "Bruno", "photo": "broken!!"},
            {"name": "Carla"},
        ]
        start = ctx.y
        render_section(ctx, "Personas", {"personas": personas})
        self.assertTrue(ctx.page > 1 or ctx.y > start)
        self.assertEqual(len(ctx.warnings), 1)


class TestOversizedCanvasAtPageTop(unittest.TestCase):
    def test_no_blank_page_before_canvas_taller_than_a_page(self) -> None:
        ctx = make_context()
        ctx.y = ctx.geometry.content_top_mm
        canvas = {"canvasData": {"features": [f"Feature {idx}" for idx in range(80)]}}
        with mock.patch("inception_report.render.sections.mvp_canvas.paragraph"), mock.patch(
            "inception_report.render.sections.mvp_canvas.centered_callout"
        ), mock.patch("inception_report.render.sections.mvp_canvas.render_steps"):
            render_mvp_canvas(ctx, {"mvpCanvases": [canvas]})
        (span,) = ctx.spans_of("mvp-canvas")
        self.assertEqual(span.start_page, 1)


if __name__ == "__main__":
    unittest.main()
