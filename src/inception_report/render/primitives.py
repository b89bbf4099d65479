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

from .colors import BORDER, PRIMARY_BAR
from .context import LayoutContext
from .style import (
    BANNER,
    BODY,
    CALLOUT,
    FONT,
    PAGE_TITLE,
    PLACEHOLDER,
    RUNNING_HEAD,
    STEP,
    apply_style,
    box,
    set_draw,
)
from .text import draw_lines, middle_baseline, pdf_safe, wrap_text

BANNER_HEIGHT = 7.5
BANNER_SPACING = 8.0
BANNER_BREAK_HEIGHT = 13.0
TITLE_BREAK_HEIGHT = 14.0
TITLE_ADVANCE = 10.0
CALLOUT_MIN_WIDTH = 80.0
CALLOUT_LINE_HEIGHT = 5.0
STEP_LINE_HEIGHT = 5.0
PARAGRAPH_LINE_HEIGHT = 4.6
PLACEHOLDER_ADVANCE = 8.0


def check_page_break(ctx: LayoutContext, needed: float) -> bool:
    """Start a new page when ``needed`` mm do not fit above the bottom bound."""
    if ctx.y + needed > ctx.geometry.bottom_bound:
        new_page(ctx)
        return True
    return False


def new_page(ctx: LayoutContext) -> None:
    ctx.pdf.add_page()
    draw_header(ctx)


def select_page(ctx: LayoutContext, page: int) -> None:
    """Point the surface at an existing page."""
    ctx.pdf.page = page
    # fpdf2 skips set_font when the state is unchanged; force a Tf on this page.
    ctx.pdf.set_font(FONT, size=1)


def draw_header(ctx: LayoutContext) -> None:
    geometry = ctx.geometry
    pdf = ctx.pdf
    apply_style(pdf, RUNNING_HEAD)
    pdf.text(geometry.margin_mm, geometry.header_baseline_mm, pdf_safe(ctx.workshop_name or "Workshop Report"))
    date_text = pdf_safe(ctx.header_date)
    right = geometry.width_mm - geometry.margin_mm
    if date_text:
        pdf.text(right - pdf.get_string_width(date_text), geometry.header_baseline_mm, date_text)
    set_draw(pdf, BORDER, 0.2)
    pdf.line(geometry.margin_mm, geometry.header_rule_mm, right, geometry.header_rule_mm)
    ctx.y = geometry.content_top_mm


def draw_footer(ctx: LayoutContext) -> None:
    """Stamp brand and ``Page i / N`` on every page; run once, after all content."""
    geometry = ctx.geometry
    pdf = ctx.pdf
    total = pdf.pages_count
    baseline = geometry.height_mm - geometry.footer_offset_mm
    right = geometry.width_mm - geometry.margin_mm
    brand = pdf_safe(ctx.options.brand_name)
    for page in range(1, total + 1):
        select_page(ctx, page)
        apply_style(pdf, RUNNING_HEAD)
        if brand:
            pdf.text(geometry.margin_mm, baseline, brand)
        label = f"Page {page} / {total}"
        pdf.text(right - pdf.get_string_width(label), baseline, label)


def section_title(ctx: LayoutContext, text: str) -> None:
    check_page_break(ctx, TITLE_BREAK_HEIGHT)
    apply_style(ctx.pdf, PAGE_TITLE)
    ctx.pdf.text(ctx.left, ctx.y, pdf_safe(text))
    ctx.y += TITLE_ADVANCE


def section_banner(ctx: LayoutContext, label: str) -> None:
    check_page_break(ctx, BANNER_BREAK_HEIGHT)
    pdf = ctx.pdf
    box(pdf, ctx.left, ctx.y, ctx.width, BANNER_HEIGHT, fill=PRIMARY_BAR)
    apply_style(pdf, BANNER)
    text = pdf_safe(label.strip().upper())
    baseline = middle_baseline(pdf, ctx.y + BANNER_HEIGHT / 2)
    pdf.text(ctx.geometry.center_x - pdf.get_string_width(text) / 2, baseline, text)
    ctx.y += BANNER_HEIGHT + BANNER_SPACING


def banner_total_height() -> float:
    return BANNER_HEIGHT + BANNER_SPACING


def paragraph(ctx: LayoutContext, text: str, *, advance: float) -> None:
    """Body copy across the content width; the cursor moves at least ``advance``."""
    pdf = ctx.pdf
    apply_style(pdf, BODY)
    lines = wrap_text(pdf, text, ctx.width)
    draw_lines(pdf, lines, ctx.left, ctx.y, PARAGRAPH_LINE_HEIGHT)
    ctx.y += max(advance, len(lines) * PARAGRAPH_LINE_HEIGHT + 3)


def centered_callout(ctx: LayoutContext, text: str, max_width: float | None = None) -> None:
    width = ctx.width if max_width is None else max_width
    width = max(CALLOUT_MIN_WIDTH, min(width, ctx.width))
    pdf = ctx.pdf
    apply_style(pdf, CALLOUT)
    lines = wrap_text(pdf, text, width)
    draw_lines(pdf, lines, ctx.geometry.center_x, ctx.y, CALLOUT_LINE_HEIGHT, align="C")
    ctx.y += len(lines) * CALLOUT_LINE_HEIGHT + 4


def render_steps(ctx: LayoutContext, steps: Sequence[str]) -> None:
    pdf = ctx.pdf
    apply_style(pdf, STEP)
    for step in steps:
        lines = wrap_text(pdf, step, ctx.width)
        draw_lines(pdf, lines, ctx.left, ctx.y, STEP_LINE_HEIGHT)
        ctx.y += len(lines) * STEP_LINE_HEIGHT
    ctx.y += 6


def placeholder(ctx: LayoutContext, text: str, *, advance: float = PLACEHOLDER_ADVANCE) -> None:
    """Italic "no data" line."""
    check_page_break(ctx, advance)
    apply_style(ctx.pdf, PLACEHOLDER)
    ctx.pdf.text(ctx.left, ctx.y, pdf_safe(text))
    ctx.y += advance


def numbered(label: str, index: int, total: int) -> str:
    """``LABEL #n`` when there is more than one record, else just ``LABEL``."""
    return f"{label} #{index}" if total > 1 else label
