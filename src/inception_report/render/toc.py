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

from dataclasses import dataclass, field
from enum import Enum

from .context import LayoutContext
from .primitives import draw_header, new_page, section_title, select_page
from .tables import TableCell, TableStyle, column_widths, draw_table, row_height

SUMMARY_TITLE = "Summary"
TOC_STYLE = TableStyle(font_size=10, grid=True)
TOC_WIDTHS = (20.0, None, 20.0)


class TocPhase(str, Enum):
    PENDING = "pending"
    RESERVED = "reserved"
    FILLED = "filled"


@dataclass(frozen=True)
class TocEntry:
    step: int
    name: str
    page: int


@dataclass
class TocCoordinator:
    """Reserve a page for the summary, collect section pages, then fill it in.

    The three phases run once each and in order; anything else is a
    programming error and raises ``RuntimeError``.
    """

    phase: TocPhase = TocPhase.PENDING
    reserved_page: int | None = None
    entries: list[TocEntry] = field(default_factory=list)

    def reserve(self, ctx: LayoutContext) -> int:
        if self.phase is not TocPhase.PENDING:
            raise RuntimeError("table of contents page already reserved")
        ctx.pdf.add_page()
        self.reserved_page = ctx.page
        self.phase = TocPhase.RESERVED
        return self.reserved_page

    def record(self, step: int, name: str, page: int) -> TocEntry:
        if self.phase is not TocPhase.RESERVED:
            raise RuntimeError("table of contents entries must be recorded between reserve and backfill")
        entry = TocEntry(step=step, name=name, page=page)
        self.entries.append(entry)
        return entry

    def start_section(self, ctx: LayoutContext, step: int, name: str) -> TocEntry:
        """Open a fresh page for a template and record where it starts."""
        new_page(ctx)
        return self.record(step, name, ctx.page)

    def backfill(self, ctx: LayoutContext) -> None:
        if self.phase is not TocPhase.RESERVED or self.reserved_page is None:
            raise RuntimeError("table of contents must be reserved before it is filled")
        last_page = ctx.pdf.pages_count
        select_page(ctx, self.reserved_page)
        draw_header(ctx)
        section_title(ctx, SUMMARY_TITLE)
        rows = self._rows_that_fit(ctx)
        if len(rows) < len(self.entries):
            ctx.warn(f"table of contents lists {len(rows)} of {len(self.entries)} templates")
        head = [TableCell("Step", align="C"), TableCell("Template", align="C"), TableCell("Page", align="C")]
        draw_table(ctx, TOC_WIDTHS, rows, head=head, style=TOC_STYLE)
        ctx.y += 10
        select_page(ctx, last_page)
        self.phase = TocPhase.FILLED

    def _rows_that_fit(self, ctx: LayoutContext) -> list[list[TableCell]]:
        # The summary owns a single page; rows past its bottom are dropped.
        widths = column_widths(ctx.width, TOC_WIDTHS)
        head = [TableCell("Step", bold=True), TableCell("Template", bold=True), TableCell("Page", bold=True)]
        room = ctx.geometry.bottom_bound - ctx.y - row_height(ctx, head, widths, TOC_STYLE)
        rows: list[list[TableCell]] = []
        for entry in self.entries:
            cells = [
                TableCell(str(entry.step), align="C"),
                TableCell(entry.name),
                TableCell(str(entry.page), align="C"),
            ]
            height = row_height(ctx, cells, widths, TOC_STYLE)
            if height > room:
                break
            room -= height
            rows.append(cells)
        return rows
