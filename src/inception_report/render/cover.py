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

from ..core.models import Report, ReportMetadata
from .context import LayoutContext
from .style import COVER_LABEL, COVER_SUBTITLE, COVER_TITLE, COVER_VALUE, apply_style
from .text import draw_lines, pdf_safe, wrap_text

TITLE_Y = 95.0
SUBTITLE_Y = 115.0
METADATA_Y = 150.0
METADATA_LINE_HEIGHT = 6.0
LABEL_GAP = 4.0
TITLE_LINE_HEIGHT = 12.0
MISSING = "-"


def participant_lines(participants: Sequence[str] | str | None, per_line: int = 2) -> list[str]:
    """Participants joined two per line; a string is split on commas."""
    if isinstance(participants, str):
        names = [name.strip() for name in participants.split(",") if name.strip()]
    else:
        names = [name for name in (participants or ()) if name]
    if not names:
        return [MISSING]
    return [", ".join(names[idx : idx + per_line]) for idx in range(0, len(names), per_line)]


def metadata_rows(metadata: ReportMetadata) -> list[tuple[str, list[str]]]:
    return [
        ("Status: ", [metadata.status or MISSING]),
        ("Steps: ", [metadata.steps_summary or MISSING]),
        ("Generated at: ", [metadata.generated_at or MISSING]),
        ("Participants: ", participant_lines(metadata.participants)),
    ]


def draw_cover(ctx: LayoutContext, report: Report) -> None:
    pdf = ctx.pdf
    center = ctx.geometry.center_x
    apply_style(pdf, COVER_TITLE)
    draw_lines(pdf, wrap_text(pdf, report.title, ctx.width), center, TITLE_Y, TITLE_LINE_HEIGHT, align="C")
    apply_style(pdf, COVER_SUBTITLE)
    subtitle = pdf_safe(report.workshop_name)
    pdf.text(center - pdf.get_string_width(subtitle) / 2, SUBTITLE_Y, subtitle)
    draw_metadata(ctx, report.metadata, METADATA_Y)


def draw_metadata(ctx: LayoutContext, metadata: ReportMetadata, start_y: float) -> float:
    """Centre each label with its first value; extra values are centred alone.

    Returns the y below the last line.
    """
    pdf = ctx.pdf
    center = ctx.geometry.center_x
    y = start_y
    for label, values in metadata_rows(metadata):
        apply_style(pdf, COVER_LABEL)
        label_width = pdf.get_string_width(label)
        first = pdf_safe(values[0])
        apply_style(pdf, COVER_VALUE)
        value_width = pdf.get_string_width(first)
        x = center - (label_width + LABEL_GAP + value_width) / 2
        apply_style(pdf, COVER_LABEL)
        pdf.text(x, y, label)
        apply_style(pdf, COVER_VALUE)
        pdf.text(x + label_width + LABEL_GAP, y, first)
        for extra in values[1:]:
            y += METADATA_LINE_HEIGHT
            line = pdf_safe(extra)
            pdf.text(center - pdf.get_string_width(line) / 2, y, line)
        y += METADATA_LINE_HEIGHT
    return y
