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

from dataclasses import dataclass

from fpdf import FPDF

from .colors import NOTE_TEXT, PRIMARY_TEXT, SECONDARY, SECTION_TITLE_TEXT, hex_to_rgb

FONT = "Helvetica"


@dataclass(frozen=True)
class TextStyle:
    size: float
    emphasis: str = ""
    color: str = NOTE_TEXT


BODY = TextStyle(10)
STEP = TextStyle(9)
NOTE = TextStyle(9)
CALLOUT = TextStyle(11, "B")
PLACEHOLDER = TextStyle(9, "I", SECONDARY)
NOTICE = TextStyle(10, "I", SECONDARY)
PAGE_TITLE = TextStyle(16, "B", PRIMARY_TEXT)
BANNER = TextStyle(10, "B", SECTION_TITLE_TEXT)
RUNNING_HEAD = TextStyle(9, "", SECONDARY)
TERM = TextStyle(10, "B")
DEFINITION = TextStyle(9, "", SECONDARY)
LABEL = TextStyle(9, "B")
QUADRANT_TITLE = TextStyle(11, "B")
PERSONA_NAME = TextStyle(11, "B")
PERSONA_TEXT = TextStyle(9, "", SECONDARY)
CARD_TITLE = TextStyle(11)
CARD_VALUE = TextStyle(10)
CARD_BADGE = TextStyle(9, "B", SECONDARY)
TAG_LABEL = TextStyle(12, "B", SECTION_TITLE_TEXT)
COVER_TITLE = TextStyle(30, "B", PRIMARY_TEXT)
COVER_SUBTITLE = TextStyle(15, "", SECONDARY)
COVER_LABEL = TextStyle(10, "B")
COVER_VALUE = TextStyle(10, "", SECONDARY)


def apply_style(pdf: FPDF, style: TextStyle) -> None:
    pdf.set_font(FONT, style=style.emphasis, size=style.size)
    pdf.set_text_color(*hex_to_rgb(style.color))


def set_fill(pdf: FPDF, color: str) -> None:
    pdf.set_fill_color(*hex_to_rgb(color))


def set_draw(pdf: FPDF, color: str, width: float | None = None) -> None:
    pdf.set_draw_color(*hex_to_rgb(color))
    if width is not None:
        pdf.set_line_width(width)


def box(
    pdf: FPDF,
    x: float,
    y: float,
    w: float,
    h: float,
    *,
    fill: str | None = None,
    border: str | None = None,
    radius: float = 0.0,
) -> None:
    """Draw a filled and/or stroked rectangle, rounded when ``radius`` > 0."""
    if fill is None and border is None:
        return
    if fill is not None:
        set_fill(pdf, fill)
    if border is not None:
        set_draw(pdf, border)
    mode = ("F" if fill is not None else "") + ("D" if border is not None else "")
    if radius > 0:
        pdf.rect(x, y, w, h, style=mode, round_corners=True, corner_radius=radius)
    else:
        pdf.rect(x, y, w, h, style=mode)
