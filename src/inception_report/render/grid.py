#!/usr/bin/env python3
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

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from fpdf import FPDF

from .context import LayoutContext
from .primitives import check_page_break
from .style import DEFINITION, NOTE, apply_style
from .text import wrap_text
from .utils import as_mapping, first_present, text_value

EMPTY_GRID_HEIGHT = 10.0
NOTE_INSET = 4.0
NOTE_LINE_HEIGHT = 4.5
DEFINITION_LINE_HEIGHT = 4.0

ItemMeasure = Callable[[FPDF, Any, float], float]
ItemRenderer = Callable[[LayoutContext, Any, float, float, float, float], None]


@dataclass(frozen=True)
class GridOptions:
    """Column count, gap between cells and rows, and the row height floor.

    The gap is also the padding left under the grid when it advances the cursor.
    """

    columns: int = 3
    gap: float = 5.0
    min_row_height: float = 30.0


@dataclass(frozen=True)
class GridRow:
    items: tuple[Any, ...]
    height: float


def note_text(item: object) -> str:
    if isinstance(item, str):
        return item
    data = as_mapping(item)
    return text_value(first_present(data.get("text"), data.get("name"), data.get("term")))


def note_height(pdf: FPDF, item: object, cell_width: float) -> float:
    """Height a note needs: wrapped text plus an optional definition."""
    inner = cell_width - 2 * NOTE_INSET
    apply_style(pdf, NOTE)
    height = len(wrap_text(pdf, note_text(item), inner)) * NOTE_LINE_HEIGHT + 10
    definition = text_value(as_mapping(item).get("definition"))
    if definition:
        apply_style(pdf, DEFINITION)
        height += len(wrap_text(pdf, definition, inner)) * DEFINITION_LINE_HEIGHT
    return height


def cell_width(width: float, options: GridOptions) -> float:
    return (width - (options.columns - 1) * options.gap) / options.columns


def plan_rows(
    pdf: FPDF,
    items: Sequence[Any],
    width: float,
    options: GridOptions,
    measure: ItemMeasure = note_height,
) -> list[GridRow]:
    """Split items into rows of ``options.columns`` and size every row.

    Measuring and drawing both go through here so their row partitions match.
    """
    columns = max(1, options.columns)
    cell = cell_width(width, options)
    rows: list[GridRow] = []
    for start in range(0, len(items), columns):
        chunk = tuple(items[start : start + columns])
        height = max(max(options.min_row_height, measure(pdf, item, cell)) for item in chunk)
        rows.append(GridRow(items=chunk, height=height))
    return rows


def measure_grid(
    pdf: FPDF,
    items: Sequence[Any],
    width: float,
    options: GridOptions,
    measure: ItemMeasure = note_height,
) -> float:
    rows = plan_rows(pdf, items, width, options, measure)
    if not rows:
        return EMPTY_GRID_HEIGHT
    return sum(row.height + options.gap for row in rows)


def render_grid_at(
    ctx: LayoutContext,
    x: float,
    y: float,
    width: float,
    items: Sequence[Any],
    renderer: ItemRenderer,
    options: GridOptions,
    measure: ItemMeasure = note_height,
) -> None:
    """Draw the grid with its top-left corner at (x, y); never breaks pages."""
    cell = cell_width(width, options)
    row_y = y
    for row in plan_rows(ctx.pdf, items, width, options, measure):
        _draw_row(ctx, row, x, row_y, cell, options, renderer)
        row_y += row.height + options.gap


def draw_grid(
    ctx: LayoutContext,
    items: Sequence[Any],
    renderer: ItemRenderer,
    options: GridOptions | None = None,
    measure: ItemMeasure = note_height,
) -> None:
    """Draw the grid at the cursor across the content width and advance past it.

    Each row is checked against the page bottom before it is drawn, so a long
    grid continues on the next page between rows.
    """
    options = options or GridOptions()
    rows = plan_rows(ctx.pdf, items, ctx.width, options, measure)
    if not rows:
        ctx.y += EMPTY_GRID_HEIGHT + options.gap
        return
    cell = cell_width(ctx.width, options)
    for row in rows:
        check_page_break(ctx, row.height + options.gap)
        _draw_row(ctx, row, ctx.left, ctx.y, cell, options, renderer)
        ctx.y += row.height + options.gap
    ctx.y += options.gap


def _draw_row(
    ctx: LayoutContext,
    row: GridRow,
    x: float,
    y: float,
    cell: float,
    options: GridOptions,
    renderer: ItemRenderer,
) -> None:
    for idx, item in enumerate(row.items):
        renderer(ctx, item, x + idx * (cell + options.gap), y, cell, row.height)
