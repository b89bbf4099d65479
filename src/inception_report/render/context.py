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

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from fpdf import FPDF

from ..core.models import ReportOptions


@dataclass(frozen=True)
class PageGeometry:
    width_mm: float = 210.0
    height_mm: float = 297.0
    margin_mm: float = 15.0
    header_baseline_mm: float = 14.0
    header_rule_mm: float = 17.0
    content_top_mm: float = 28.0
    bottom_reserve_mm: float = 22.0
    footer_offset_mm: float = 9.0

    @property
    def content_width(self) -> float:
        return self.width_mm - 2 * self.margin_mm

    @property
    def bottom_bound(self) -> float:
        return self.height_mm - self.bottom_reserve_mm

    @property
    def center_x(self) -> float:
        return self.width_mm / 2


PAPER_GEOMETRY = {
    "A4": PageGeometry(),
    "LETTER": PageGeometry(width_mm=215.9, height_mm=279.4),
}


def page_geometry(paper_size: str) -> PageGeometry:
    key = paper_size.strip().upper()
    if key not in PAPER_GEOMETRY:
        raise ValueError("paper size must be A4 or LETTER")
    return PAPER_GEOMETRY[key]


@dataclass(frozen=True)
class BlockSpan:
    """Where a named block landed: pages and cursor positions at start and end."""

    kind: str
    label: str
    start_page: int
    end_page: int
    start_y: float
    end_y: float


@dataclass
class LayoutContext:
    pdf: FPDF
    options: ReportOptions
    workshop_name: str
    geometry: PageGeometry = field(default_factory=PageGeometry)
    y: float = 0.0
    header_date: str = ""
    spans: list[BlockSpan] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def page(self) -> int:
        return int(self.pdf.page)

    @property
    def left(self) -> float:
        return self.geometry.margin_mm

    @property
    def width(self) -> float:
        return self.geometry.content_width

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    @contextmanager
    def track(self, kind: str, label: str = "") -> Iterator[None]:
        start_page = self.page
        start_y = self.y
        yield
        self.spans.append(
            BlockSpan(
                kind=kind,
                label=label,
                start_page=start_page,
                end_page=self.page,
                start_y=start_y,
                end_y=self.y,
            )
        )

    def spans_of(self, kind: str) -> list[BlockSpan]:
        return [span for span in self.spans if span.kind == kind]


def new_surface(geometry: PageGeometry) -> FPDF:
    pdf = FPDF(unit="mm", format=(geometry.width_mm, geometry.height_mm))
    pdf.set_auto_page_break(False)
    pdf.set_margins(geometry.margin_mm, geometry.margin_mm, geometry.margin_mm)
    return pdf
