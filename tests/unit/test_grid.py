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

from inception_report.render.grid import (
    EMPTY_GRID_HEIGHT,
    GridOptions,
    draw_grid,
    measure_grid,
    note_text,
    plan_rows,
)
from inception_report.render.primitives import check_page_break, numbered
from tests.test_support import make_context


def _fixed(height: float):
    def measure(pdf, item, width):
        return height

    return measure


def _noop(ctx, item, x, y, w, h) -> None:
    return None


class TestPlanRows(unittest.TestCase):
    def test_rows_hold_at_most_the_column_count(self) -> None:
        ctx = make_context()
        rows = plan_rows(ctx.pdf, list(range(7)), ctx.width, GridOptions(columns=3), _fixed(12))
        self.assertEqual([len(row.items) for row in rows], [3, 3, 1])

    def test_row_height_is_tallest_item_with_floor(self) -> None:
        ctx = make_context()
        heights = {0: 10.0, 1: 44.0, 2: 5.0}
        rows = plan_rows(
            ctx.pdf,
            [0, 1, 2],
            ctx.width,
            GridOptions(columns=3, min_row_height=30),
            lambda pdf, item, width: heights[item],
        )
        self.assertEqual(rows[0].height, 44.0)
        rows = plan_rows(ctx.pdf, [2], ctx.width, GridOptions(columns=3, min_row_height=30), _fixed(5))
        self.assertEqual(rows[0].height, 30.0)


class TestMeasureGrid(unittest.TestCase):
    def test_empty_grid_reserves_fixed_height(self) -> None:
        ctx = make_context()
        self.assertEqual(measure_grid(ctx.pdf, [], ctx.width, GridOptions()), EMPTY_GRID_HEIGHT)

    def test_sum_of_rows_and_gaps(self) -> None:
        ctx = make_context()
        options = GridOptions(columns=2, gap=5, min_row_height=0)
        total = measure_grid(ctx.pdf, list(range(3)), ctx.width, options, _fixed(20))
        self.assertEqual(total, 2 * (20 + 5))


class TestDrawGrid(unittest.TestCase):
    def test_advances_past_rows_and_trailing_gap(self) -> None:
        ctx = make_context()
        start = ctx.y
        draw_grid(ctx, list(range(4)), _noop, GridOptions(columns=2, gap=5, min_row_height=0), _fixed(20))
        self.assertEqual(ctx.y, start + 2 * (20 + 5) + 5)

    def test_row_that_does_not_fit_moves_to_next_page(self) -> None:
        ctx = make_context()
        ctx.y = ctx.geometry.bottom_bound - 10
        draw_grid(ctx, ["a", "b"], _noop, GridOptions(columns=1, gap=5, min_row_height=0), _fixed(20))
        self.assertEqual(ctx.page, 2)

    def test_note_text_reads_common_fields(self) -> None:
        self.assertEqual(note_text("plain"), "plain")
        self.assertEqual(note_text({"text": "a"}), "a")
        self.assertEqual(note_text({"name": "Ana"}), "Ana")
        self.assertEqual(note_text({"term": "MVP"}), "MVP")


class TestPrimitives(unittest.TestCase):
    def test_check_page_break_opens_page_and_resets_cursor(self) -> None:
        ctx = make_context()
        ctx.y = ctx.geometry.bottom_bound - 5
        self.assertTrue(check_page_break(ctx, 10))
        self.assertEqual(ctx.page, 2)
        self.assertEqual(ctx.y, ctx.geometry.content_top_mm)
        self.assertFalse(check_page_break(ctx, 10))

    def test_numbered_only_with_several_records(self) -> None:
        self.assertEqual(numbered("MVP CANVAS", 1, 1), "MVP CANVAS")
        self.assertEqual(numbered("MVP CANVAS", 2, 3), "MVP CANVAS #2")


if __name__ == "__main__":
    unittest.main()
