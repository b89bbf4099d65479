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
from dataclasses import dataclass

from .colors import BORDER, NOTE_TEXT, TABLE_HEAD_FILL, hex_to_rgb
from .context import LayoutContext
from .primitives import check_page_break
from .style import FONT, box, set_draw
from .text import draw_lines, font_line_height, wrap_text

DEFAULT_CELL_PADDING = 1.8


@dataclass(frozen=True)
class TableCell:
    text: str = ""
    fill: str | None = None
    bold: bool = False
    align: str = "L"
    padding: float | None = None


@dataclass(frozen=True)
class TableStyle:
    font_size: float = 9.0
    padding: float = DEFAULT_CELL_PADDING
    grid: bool = False
    border: str = BORDER
    text_color: str = NOTE_TEXT
    head_fill: str = TABLE_HEAD_FILL


PLAIN = TableStyle()
GRID = TableStyle(grid=True)


def column_widths(total: float, widths: Sequence[float | None]) -> list[float]:
    """Resolve ``None`` widths by sharing what the fixed columns leave."""
    fixed = sum(w for w in widths if w is not None)
    flexible = [w for w in widths if w is None]
    share = (total - fixed) / len(flexible) if flexible else 0.0
    return [share if w is None else w for w in widths]


def _cell_lines(ctx: LayoutContext, cell: TableCell, width: float, style: TableStyle) -> list[str]:
    padding = style.padding if cell.padding is None else cell.padding
    ctx.pdf.set_font(FONT, style="B" if cell.bold else "", size=style.font_size)
    return wrap_text(ctx.pdf, cell.text, width - 2 * padding)


def row_height(ctx: LayoutContext, cells: Sequence[TableCell], widths: Sequence[float], style: TableStyle) -> float:
    line_height = font_line_height(style.font_size)
    height = 0.0
    for cell, width in zip(cells, widths):
        padding = style.padding if cell.padding is None else cell.padding
        lines = _cell_lines(ctx, cell, width, style)
        height = max(height, len(lines) * line_height + 2 * padding)
    return height


def _draw_row(
    ctx: LayoutContext,
    cells: Sequence[TableCell],
    widths: Sequence[float],
    height: float,
    style: TableStyle,
) -> None:
    pdf = ctx.pdf
    line_height = font_line_height(style.font_size)
    x = ctx.left
    for cell, width in zip(cells, widths):
        padding = style.padding if cell.padding is None else cell.padding
        box(pdf, x, ctx.y, width, height, fill=cell.fill)
        if style.grid:
            set_draw(pdf, style.border, 0.1)
            pdf.rect(x, ctx.y, width, height, style="D")
        lines = _cell_lines(ctx, cell, width, style)
        pdf.set_text_color(*hex_to_rgb(style.text_color))
        baseline = ctx.y + padding + line_height * 0.78
        if cell.align == "C":
            anchor = x + width / 2
        elif cell.align == "R":
            anchor = x + width - padding
        else:
            anchor = x + padding
        draw_lines(pdf, lines, anchor, baseline, line_height, align=cell.align)
        x += width


def draw_table(
    ctx: LayoutContext,
    widths: Sequence[float | None],
    rows: Sequence[Sequence[TableCell]],
    *,
    head: Sequence[TableCell] | None = None,
    style: TableStyle = PLAIN,
) -> None:
    """Draw a table at the cursor; rows never split and the head repeats after a break.

    The cursor ends on the bottom edge of the last row.
    """
    resolved = column_widths(ctx.width, widths)
    head_cells = None
    head_height = 0.0
    if head is not None:
        head_cells = [
            TableCell(cell.text, fill=cell.fill or style.head_fill, bold=True, align=cell.align, padding=cell.padding)
            for cell in head
        ]
        head_height = row_height(ctx, head_cells, resolved, style)
        first = row_height(ctx, rows[0], resolved, style) if rows else 0.0
        check_page_break(ctx, head_height + first)
        _draw_row(ctx, head_cells, resolved, head_height, style)
        ctx.y += head_height
    for cells in rows:
        height = row_height(ctx, cells, resolved, style)
        if check_page_break(ctx, height) and head_cells is not None:
            _draw_row(ctx, head_cells, resolved, head_height, style)
            ctx.y += head_height
        _draw_row(ctx, cells, resolved, height, style)
        ctx.y += height


def key_value_table(
    ctx: LayoutContext,
    rows: Sequence[tuple[str, str, str]],
    *,
    label_width: float = 40.0,
    label_padding: float | None = None,
    value_padding: float | None = None,
) -> None:
    """Two-column label/value table; each value cell carries its own fill."""
    body = [
        [
            TableCell(label, bold=True, padding=label_padding),
            TableCell(value, fill=fill, padding=value_padding),
        ]
        for label, value, fill in rows
    ]
    draw_table(ctx, [label_width, None], body, style=PLAIN)
