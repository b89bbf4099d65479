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
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from fpdf import FPDF

from ..core.models import Report, ReportOptions
from .context import BlockSpan, LayoutContext, new_surface, page_geometry
from .cover import draw_cover
from .primitives import draw_footer, new_page, section_title
from .templates import normalize_name, render_section
from .toc import TocCoordinator, TocEntry

CREATOR = "inception-report"


@dataclass
class ReportDocument:
    """A finished report: the drawn surface plus what the layout decided."""

    pdf: FPDF
    toc_entries: tuple[TocEntry, ...]
    spans: tuple[BlockSpan, ...]
    warnings: tuple[str, ...]
    _data: bytes | None = field(default=None, init=False, repr=False)

    @property
    def page_count(self) -> int:
        return int(self.pdf.pages_count)

    def spans_of(self, kind: str) -> list[BlockSpan]:
        return [span for span in self.spans if span.kind == kind]

    def output(self) -> bytes:
        if self._data is None:
            self._data = bytes(self.pdf.output())
        return self._data

    def save(self, path: str | Path) -> Path:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(self.output())
        return target


def generate_report(
    report: Report | Mapping[str, Any],
    options: ReportOptions | None = None,
) -> ReportDocument:
    """Lay out the whole report: cover, summary, one section per template, footers.

    Templates run in step order. The summary page is reserved right after the
    cover and filled in once every section page exists.
    """
    if not isinstance(report, Report):
        report = Report.from_dict(report)
    options = options or ReportOptions()
    geometry = page_geometry(options.paper_size)
    pdf = new_surface(geometry)
    pdf.set_title(report.title)
    pdf.set_author(options.brand_name)
    pdf.set_creator(CREATOR)

    ctx = LayoutContext(
        pdf=pdf,
        options=options,
        workshop_name=report.title or report.workshop_name,
        geometry=geometry,
        header_date=options.header_date(),
    )
    new_page(ctx)
    draw_cover(ctx, report)

    toc = TocCoordinator()
    toc.reserve(ctx)
    for entry in report.sorted_templates():
        name = normalize_name(entry.name)
        toc.start_section(ctx, entry.step_number, name)
        with ctx.track("section", name):
            section_title(ctx, name)
            render_section(ctx, entry.name, entry.content)
    toc.backfill(ctx)
    draw_footer(ctx)

    return ReportDocument(
        pdf=pdf,
        toc_entries=tuple(toc.entries),
        spans=tuple(ctx.spans),
        warnings=tuple(ctx.warnings),
    )
