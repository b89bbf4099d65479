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
from typing import Any

from fpdf import FPDF

from ..cards import draw_image_fit
from ..colors import BORDER, CARD_FILL, PHOTO_FILL
from ..context import LayoutContext
from ..primitives import centered_callout, check_page_break, paragraph, placeholder, render_steps
from ..style import LABEL, PERSONA_NAME, PERSONA_TEXT, apply_style, box
from ..text import draw_lines, pdf_safe, wrap_text
from ..utils import as_mapping, first_present, mapping_items, text_value

INTRO = (
    "To effectively identify the features of a product, it is important to keep users and their "
    "goals in mind. A persona creates a realistic representation of users, helping the team to "
    "describe features from the point of view of those who will interact with the final product."
)
CALLOUT = (
    "A persona represents a user of the product, describing not only his/her role, but also "
    "characteristics and needs."
)
STEPS = (
    "1) Divide the team into three groups and ask each to describe ONE persona.",
    "2) Each group presents its persona to the entire team.",
    "3) Optionally, make more rounds to describe other personas. After each round, group them by similarity.",
)

COLUMNS = 2
GAP = 6.0
MIN_CARD_HEIGHT = 60.0
PHOTO_SIZE = 24.0
INSET = 6.0
SECTION_LINE_HEIGHT = 4.2
SECTIONS = (("Profile", "profile"), ("Behavior", "behavior"), ("Needs", "needs"))


def _section_lines(pdf: FPDF, persona: Mapping[str, Any], key: str, card_width: float) -> list[str]:
    apply_style(pdf, PERSONA_TEXT)
    return wrap_text(pdf, text_value(persona.get(key)), card_width - 2 * INSET)


def persona_card_height(pdf: FPDF, persona: Mapping[str, Any], card_width: float) -> float:
    """Name line, photo and the three wrapped sections, floored at the card minimum."""
    sections = sum(
        len(_section_lines(pdf, persona, key, card_width)) * SECTION_LINE_HEIGHT + 8 for _, key in SECTIONS
    )
    return max(MIN_CARD_HEIGHT, 6 + sections + PHOTO_SIZE + 4 + 18)


def render_personas(ctx: LayoutContext, content: Any) -> None:
    paragraph(ctx, INTRO, advance=15)
    centered_callout(ctx, CALLOUT, ctx.width - 40)
    render_steps(ctx, STEPS)

    personas = mapping_items(as_mapping(content).get("personas"))
    if not personas:
        placeholder(ctx, "No personas added.")
        return

    card_width = (ctx.width - (COLUMNS - 1) * GAP) / COLUMNS
    for start in range(0, len(personas), COLUMNS):
        row = personas[start : start + COLUMNS]
        height = max(persona_card_height(ctx.pdf, persona, card_width) for persona in row)
        check_page_break(ctx, height + GAP)
        for column, persona in enumerate(row):
            _draw_card(ctx, persona, ctx.left + column * (card_width + GAP), ctx.y, card_width, height)
        ctx.y += height + GAP


def _draw_card(ctx: LayoutContext, persona: Mapping[str, Any], x: float, y: float, w: float, h: float) -> None:
    pdf = ctx.pdf
    pdf.set_line_width(0.2)
    box(pdf, x, y, w, h, fill=CARD_FILL, border=BORDER, radius=3)
    photo_x = x + INSET
    photo_y = y + INSET
    box(pdf, photo_x, photo_y, PHOTO_SIZE, PHOTO_SIZE, fill=PHOTO_FILL)
    draw_image_fit(ctx, persona.get("photo"), photo_x, photo_y, PHOTO_SIZE, PHOTO_SIZE)

    apply_style(pdf, PERSONA_NAME)
    name = pdf_safe(first_present(persona.get("name")) or "Persona")
    pdf.text(photo_x + PHOTO_SIZE + 4, y + 12, name)

    cursor = photo_y + PHOTO_SIZE + INSET
    for label, key in SECTIONS:
        apply_style(pdf, LABEL)
        pdf.text(x + INSET, cursor, label)
        cursor += 4.5
        lines = _section_lines(pdf, persona, key, w)
        draw_lines(pdf, lines, x + INSET, cursor, SECTION_LINE_HEIGHT)
        cursor += len(lines) * SECTION_LINE_HEIGHT + 6
