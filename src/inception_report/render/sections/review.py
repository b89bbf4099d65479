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

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from fpdf import FPDF

from ..cards import render_review_card, render_tag_card, review_card_height, tag_card_height
from ..context import LayoutContext
from ..grid import GridOptions, GridRow, cell_width, plan_rows
from ..primitives import (
    banner_total_height,
    centered_callout,
    check_page_break,
    paragraph,
    placeholder,
    render_steps,
    section_banner,
)
from ..utils import as_list, as_mapping, first_present, mapping_items, text_value

REVIEW_INTRO = (
    "This review aims to discuss how the team feels about technical, business and UX understanding "
    "for each feature. From this activity, new clarifications will happen and the disagreements and "
    "doubts will become more apparent."
)
REVIEW_CALLOUT = (
    "The colors and markings will assist the team in subsequent activities to prioritize, estimate and plan."
)
REVIEW_STEPS = (
    "1) Ask a person to choose and drag a feature, going through the graph and table.",
    "2) Define the color according to the confidence level and make markings (on a scale of 1 to 3) "
    "of business value, effort and UX value . $, E and <3.",
    "3) Confirm that everyone agrees; choose the next person and return to step 1.",
)

SEQUENCER_INTRO = (
    "The Feature Sequencer assists in organizing and viewing the features and the incremental "
    "validation of the product."
)
SEQUENCER_CALLOUT = "Define the MVP and its subsequent increments."
SEQUENCER_STEPS = (
    "1) Ask people to decide the first feature.",
    "2) Bring more cards to the sequencer. Respect the rules.",
    "3) Identify the MVP and the increments of the product.",
)

REVIEW_GRID = GridOptions(columns=3, gap=6, min_row_height=0)
WAVE_GRID = GridOptions(columns=3, gap=6, min_row_height=0)
WAVE_ROW_SPACING = 4.0


@dataclass(frozen=True)
class WaveTag:
    label: str
    color: str | None = None


@dataclass(frozen=True)
class WaveItem:
    """One cell of a wave: a tag pill or a feature card."""

    kind: str
    data: Any


def wave_tags(wave: object) -> list[WaveTag]:
    tags = []
    for raw in as_list(as_mapping(wave).get("postIts")):
        if isinstance(raw, Mapping):
            label = text_value(raw.get("label")).strip()
            color = first_present(raw.get("color"))
        else:
            label = text_value(raw).strip()
            color = None
        if label:
            tags.append(WaveTag(label=label, color=text_value(color) if color is not None else None))
    return tags


def wave_items(wave: object) -> list[WaveItem]:
    """Tags first, then features, as they sit on the sequencer board."""
    features = as_list(as_mapping(wave).get("features"))
    return [WaveItem("tag", tag) for tag in wave_tags(wave)] + [WaveItem("feature", f) for f in features]


def wave_item_height(pdf: FPDF, item: WaveItem, width: float) -> float:
    if item.kind == "tag":
        return tag_card_height(pdf, item.data.label, width)
    return review_card_height(pdf, item.data, width)


def plan_wave_rows(pdf: FPDF, items: Sequence[WaveItem], width: float) -> list[GridRow]:
    return plan_rows(pdf, items, width, WAVE_GRID, wave_item_height)


def wave_title(index: int, wave: object) -> str:
    name = text_value(as_mapping(wave).get("name")).strip()
    return f"WAVE {index} - {name}" if name else f"WAVE {index}"


def render_review_section(ctx: LayoutContext, content: Any) -> None:
    paragraph(ctx, REVIEW_INTRO, advance=15)
    centered_callout(ctx, REVIEW_CALLOUT, ctx.width - 30)
    render_steps(ctx, REVIEW_STEPS)

    data = as_mapping(content)
    features = as_list(data.get("features")) or as_list(data.get("reviews"))
    if not features:
        placeholder(ctx, "No features added.")
        return

    cell = cell_width(ctx.width, REVIEW_GRID)
    for row in plan_rows(ctx.pdf, features, ctx.width, REVIEW_GRID, review_card_height):
        check_page_break(ctx, row.height + REVIEW_GRID.gap)
        for column, feature in enumerate(row.items):
            render_review_card(ctx, feature, ctx.left + column * (cell + REVIEW_GRID.gap), ctx.y, cell, row.height)
        ctx.y += row.height + REVIEW_GRID.gap


def render_sequencer(ctx: LayoutContext, content: Any) -> None:
    paragraph(ctx, SEQUENCER_INTRO, advance=15)
    centered_callout(ctx, SEQUENCER_CALLOUT, ctx.width - 30)
    render_steps(ctx, SEQUENCER_STEPS)

    waves = mapping_items(as_mapping(content).get("waves"))
    if not waves:
        placeholder(ctx, "No waves added.")
        return

    cell = cell_width(ctx.width, WAVE_GRID)
    for index, wave in enumerate(waves, start=1):
        title = wave_title(index, wave)
        rows = plan_wave_rows(ctx.pdf, wave_items(wave), ctx.width)
        with ctx.track("wave", title):
            if not rows:
                section_banner(ctx, title)
                placeholder(ctx, "No features in this wave.", advance=10)
                continue
            # keep the banner on the same page as the first row
            check_page_break(ctx, banner_total_height() + rows[0].height + WAVE_ROW_SPACING)
            section_banner(ctx, title)
            for row in rows:
                check_page_break(ctx, row.height + WAVE_ROW_SPACING)
                for column, item in enumerate(row.items):
                    x = ctx.left + column * (cell + WAVE_GRID.gap)
                    if item.kind == "tag":
                        render_tag_card(ctx, item.data.label, x, ctx.y, cell, row.height, item.data.color)
                    else:
                        render_review_card(ctx, item.data, x, ctx.y, cell, row.height)
                ctx.y += row.height + WAVE_ROW_SPACING
            ctx.y += WAVE_ROW_SPACING
