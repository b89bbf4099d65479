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

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from fpdf import FPDF

from ..colors import PRIMARY_BAR, resolve_color
from ..context import LayoutContext
from ..primitives import (
    banner_total_height,
    centered_callout,
    check_page_break,
    numbered,
    paragraph,
    placeholder,
    render_steps,
    section_banner,
)
from ..style import LABEL, NOTE, apply_style, box, set_draw
from ..text import draw_lines, middle_baseline, pdf_safe, wrap_text
from ..utils import as_list, as_mapping, first_present, mapping_items, text_value

INTRO = (
    "The MVP Canvas is a visual chart that helps the team to align and define the MVP, the simplest "
    "version of the product that can be made available to the business (minimum product) and that "
    "can be effectively used and validated by the end user (viable product)."
)
CALLOUT = (
    "The team has already discussed what makes up the MVP and has already talked about what is "
    "expected of it, the time has come to summarize everything."
)
STEPS = (
    "1) Divide the team into two groups and ask each group to complete the MVP canvas in their "
    "respective template.",
    "2) Ask each group to present their Canvas MVP.",
    "3) Ask the team to consolidate the seven blocks of the MVP canvas, using and changing the "
    "previous notes as needed.",
)

GRID_UNITS = 7
GAP = 5.0
MIN_BLOCK_HEIGHT = 26.0
ITEM_LINE_HEIGHT = 4.2
ITEM_SPACING = 2.0
ITEMS_TOP = 12.0
BLOCK_INSET = 5.0
BOTTOM_SPACING = 8.0
DEFAULT_BLOCK_COLOR = "#FEF9C3"


@dataclass(frozen=True)
class CanvasBlock:
    key: str
    title: str
    span: int
    color: str


TOP_ROW = (
    CanvasBlock("personas", "Segmented Personas", 2, "bg-blue-100"),
    CanvasBlock("proposal", "MVP Proposal", 3, "bg-yellow-100"),
    CanvasBlock("result", "Expected Result", 2, "bg-pink-200"),
)
MIDDLE_ROW = (CanvasBlock("features", "Features", 7, "bg-yellow-100"),)
BOTTOM_ROW = (
    CanvasBlock("journeys", "Journeys", 2, "bg-purple-200"),
    CanvasBlock("costSchedule", "Cost & Schedule", 3, "bg-orange-200"),
    CanvasBlock("metricsValidate", "Metrics to Validate", 2, "bg-green-200"),
)
ROWS = (TOP_ROW, MIDDLE_ROW, BOTTOM_ROW)


def unit_width(content_width: float) -> float:
    return (content_width - (GRID_UNITS - 1) * GAP) / GRID_UNITS


def block_width(block: CanvasBlock, unit: float) -> float:
    return unit * block.span + GAP * (block.span - 1)


def block_color(canvas: Mapping[str, Any], block: CanvasBlock) -> str:
    """Block fill: canvas data override, canvas colour map, canvas colour, block default."""
    data = as_mapping(canvas.get("canvasData"))
    fallback = resolve_color(block.color, DEFAULT_BLOCK_COLOR)
    override = first_present(
        data.get(f"{block.key}Color"),
        as_mapping(canvas.get("colors")).get(block.key),
        canvas.get("color"),
    )
    return resolve_color(override, fallback)


def _item_lines(pdf: FPDF, item: object, width: float) -> list[str]:
    text = item if isinstance(item, str) else first_present(as_mapping(item).get("text"))
    return wrap_text(pdf, f"- {text_value(text) or '-'}", width - 2 * BLOCK_INSET)


def block_height(pdf: FPDF, items: object, width: float) -> float:
    apply_style(pdf, NOTE)
    used = sum(len(_item_lines(pdf, item, width)) * ITEM_LINE_HEIGHT + ITEM_SPACING for item in as_list(items))
    return max(MIN_BLOCK_HEIGHT, ITEMS_TOP + 4 + used + 8)


def row_heights(pdf: FPDF, canvas: Mapping[str, Any], content_width: float) -> list[float]:
    data = as_mapping(canvas.get("canvasData"))
    unit = unit_width(content_width)
    return [
        max(block_height(pdf, data.get(block.key), block_width(block, unit)) for block in row) for row in ROWS
    ]


def canvas_height(pdf: FPDF, canvas: Mapping[str, Any], content_width: float) -> float:
    """Banner, the three block rows with their gaps, and the trailing space."""
    top, middle, bottom = row_heights(pdf, canvas, content_width)
    return banner_total_height() + top + GAP + middle + GAP + bottom + BOTTOM_SPACING


def render_mvp_canvas(ctx: LayoutContext, content: Any) -> None:
    paragraph(ctx, INTRO, advance=15)
    centered_callout(ctx, CALLOUT, ctx.width - 30)
    render_steps(ctx, STEPS)

    canvases = mapping_items(as_mapping(content).get("mvpCanvases"))
    if not canvases:
        placeholder(ctx, "No MVP Canvas added.")
        return

    page_capacity = ctx.geometry.bottom_bound - ctx.geometry.content_top_mm
    for index, canvas in enumerate(canvases, start=1):
        title = numbered("MVP CANVAS", index, len(canvases))
        total = canvas_height(ctx.pdf, canvas, ctx.width)
        if total > page_capacity:
            ctx.warn(f"{title} is taller than a page and runs past the bottom margin")
        # an oversized canvas already at the top of a page stays there
        if ctx.y > ctx.geometry.content_top_mm:
            check_page_break(ctx, total)
        with ctx.track("mvp-canvas", title):
            section_banner(ctx, title)
            _draw_canvas(ctx, canvas)


def _draw_canvas(ctx: LayoutContext, canvas: Mapping[str, Any]) -> None:
    data = as_mapping(canvas.get("canvasData"))
    unit = unit_width(ctx.width)
    heights = row_heights(ctx.pdf, canvas, ctx.width)
    for row_index, (row, height) in enumerate(zip(ROWS, heights)):
        x = ctx.left
        for block in row:
            width = block_width(block, unit)
            _draw_block(ctx, x, ctx.y, width, height, block, data.get(block.key), block_color(canvas, block))
            x += width + GAP
        ctx.y += height + (GAP if row_index < len(ROWS) - 1 else BOTTOM_SPACING)


def _draw_block(
    ctx: LayoutContext,
    x: float,
    y: float,
    w: float,
    h: float,
    block: CanvasBlock,
    items: object,
    color: str,
) -> None:
    pdf = ctx.pdf
    set_draw(pdf, PRIMARY_BAR, 0.5)
    box(pdf, x, y, w, h, fill=color, border=PRIMARY_BAR, radius=2)
    apply_style(pdf, LABEL)
    title = pdf_safe(block.title.upper())
    pdf.text(x + w / 2 - pdf.get_string_width(title) / 2, middle_baseline(pdf, y + 7), title)
    apply_style(pdf, NOTE)
    cursor = y + ITEMS_TOP
    for item in as_list(items):
        lines = _item_lines(pdf, item, w)
        draw_lines(pdf, lines, x + BLOCK_INSET, cursor, ITEM_LINE_HEIGHT)
        cursor += len(lines) * ITEM_LINE_HEIGHT + ITEM_SPACING
