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

from collections.abc import Sequence
from typing import Any

from fpdf import FPDF

from ..cards import render_simple_note
from ..context import LayoutContext
from ..grid import GridOptions, measure_grid, render_grid_at
from ..primitives import (
    centered_callout,
    check_page_break,
    numbered,
    paragraph,
    placeholder,
    render_steps,
    section_banner,
)
from ..style import QUADRANT_TITLE, apply_style
from ..text import pdf_safe
from ..utils import as_list, as_mapping, first_present, mapping_items

INTRO = (
    "It is often easier to describe what something is not or does not do. This activity seeks "
    "classifications about the product following the four guidelines, specifically asking each "
    "positive and negative aspect about the product being or doing something."
)
CALLOUT = "Deciding what NOT to do is AS IMPORTANT as deciding what to do."
STEPS = (
    "1) Divide the team into two groups and request that each group fill only the blanks selected "
    "in its respective template.",
    "2) Ask a person to read a note. Talk about it. Group similar ones into a 'cluster'.",
    "3) Go back to step 2, then ask the same for another person in the next group, until all notes are finished.",
)

BANNER_LABEL = "The Product IS - IS NOT - DOES - DOES NOT"
DEFAULT_GROUP_COLOR = "bg-yellow-200"
COLUMN_GAP = 6.0
ROW_GAP = 6.0
TITLE_HEIGHT = 7.0
QUADRANT_GRID = GridOptions(columns=1, gap=5, min_row_height=22)


def with_group_color(items: object, color: object) -> list[dict[str, Any]]:
    """Copy quadrant items, giving uncoloured ones the group colour."""
    colored = []
    for item in as_list(items):
        data = {"text": item} if isinstance(item, str) else dict(as_mapping(item))
        data["color"] = first_present(data.get("color")) or color
        colored.append(data)
    return colored


def quadrant_height(pdf: FPDF, items: Sequence[Any], width: float) -> float:
    return TITLE_HEIGHT + measure_grid(pdf, items, width, QUADRANT_GRID)


def render_is_is_not(ctx: LayoutContext, content: Any) -> None:
    paragraph(ctx, INTRO, advance=15)
    centered_callout(ctx, CALLOUT)
    render_steps(ctx, STEPS)

    groups = mapping_items(as_mapping(content).get("groups"))
    if not groups:
        placeholder(ctx, "No groups added.")
        return

    column_width = (ctx.width - COLUMN_GAP) / 2
    for index, group in enumerate(groups, start=1):
        section_banner(ctx, numbered(BANNER_LABEL, index, len(groups)))
        color = first_present(group.get("color")) or DEFAULT_GROUP_COLOR
        quadrants = {
            key: with_group_color(group.get(key), color) for key in ("is", "isNot", "does", "doesNot")
        }
        top = max(
            quadrant_height(ctx.pdf, quadrants["is"], column_width),
            quadrant_height(ctx.pdf, quadrants["isNot"], column_width),
        )
        bottom = max(
            quadrant_height(ctx.pdf, quadrants["does"], column_width),
            quadrant_height(ctx.pdf, quadrants["doesNot"], column_width),
        )
        check_page_break(ctx, top + bottom + 10)
        with ctx.track("is-row", f"{index}:is"):
            _quadrant_row(ctx, column_width, top, ("IS", quadrants["is"]), ("IS NOT", quadrants["isNot"]))
        with ctx.track("is-row", f"{index}:does"):
            _quadrant_row(
                ctx, column_width, bottom, ("DOES", quadrants["does"]), ("DOES NOT", quadrants["doesNot"])
            )


def _quadrant_row(
    ctx: LayoutContext,
    column_width: float,
    height: float,
    *quadrants: tuple[str, list[dict[str, Any]]],
) -> None:
    row_y = ctx.y
    for column, (title, items) in enumerate(quadrants):
        x = ctx.left + column * (column_width + COLUMN_GAP)
        apply_style(ctx.pdf, QUADRANT_TITLE)
        label = pdf_safe(title)
        ctx.pdf.text(x + column_width / 2 - ctx.pdf.get_string_width(label) / 2, row_y + 4, label)
        render_grid_at(ctx, x, row_y + TITLE_HEIGHT, column_width, items, render_simple_note, QUADRANT_GRID)
    ctx.y = row_y + height + ROW_GAP
