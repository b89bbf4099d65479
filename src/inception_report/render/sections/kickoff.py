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

from typing import Any

from ..cards import render_simple_note
from ..colors import TABLE_HEAD_FILL
from ..context import LayoutContext
from ..grid import GridOptions, draw_grid
from ..primitives import centered_callout, paragraph, placeholder, render_steps, section_banner
from ..tables import GRID, TableCell, draw_table
from ..utils import as_list, as_mapping

KICKOFF_INTRO = (
    "The Lean Inception starts with a kick-off, followed by a sequence of intense activities, "
    "and ends with a workshop showcase. The team directly involved with the initiative must "
    "participate in all activities; the other interested parties must participate in the "
    "kick-off and the showcase, where expectations and results are presented."
)
KICKOFF_MOTTO = "Think big, start small, learn fast!"
KICKOFF_STEPS = (
    "1) Ask the main sponsor to open the Lean Inception with a speech about the initiative.",
    "2) Make a brief presentation about the Lean Inception agenda and the concept of MVP.",
    "3) Ask everyone to write their names, using the color that identifies the level of participation.",
)

PARTICIPANT_GRID = GridOptions(columns=3)

AGENDA_DAYS = (
    ("MONDAY", ("KICKOFF", "PRODUCT VISION"), ("IS - IS NOT - DOES - DOES NOT DO", "PRODUCT GOAL")),
    ("TUESDAY", ("PERSONAS",), ("USER JOURNEYS",)),
    ("WEDNESDAY", ("FEATURE BRAINSTORMING",), ("TECH, BUSINESS AND UX REVIEW",)),
    ("THURSDAY", ("SEQUENCER",), ("MVP CANVAS",)),
    ("FRIDAY", ("SHOWCASE",), ("SHOWCASE",)),
)
AGENDA_SLOT_FILL = "#FACC15"
AGENDA_LUNCH_FILL = "#EAB308"


def render_kickoff(ctx: LayoutContext, content: Any) -> None:
    data = as_mapping(content)
    paragraph(ctx, KICKOFF_INTRO, advance=18)
    centered_callout(ctx, KICKOFF_MOTTO)
    render_steps(ctx, KICKOFF_STEPS)

    for label, key in (
        ("FULL WORKSHOP PARTICIPANTS", "fullWorkshopParticipants"),
        ("PARTIAL WORKSHOP PARTICIPANTS", "partialWorkshopParticipants"),
    ):
        section_banner(ctx, label)
        participants = as_list(data.get(key))
        if participants:
            draw_grid(ctx, participants, render_simple_note, PARTICIPANT_GRID)
        else:
            placeholder(ctx, "No participants added.")


def render_agenda(ctx: LayoutContext, content: Any) -> None:
    """Fixed five-day schedule; the template carries no data of its own."""
    head = [TableCell("")] + [TableCell(day, fill=TABLE_HEAD_FILL, align="C") for day, _, _ in AGENDA_DAYS]
    slot = {"fill": AGENDA_SLOT_FILL, "bold": True, "align": "C"}
    rows = [
        [TableCell("MORNING", **slot)] + [TableCell("\n".join(morning)) for _, morning, _ in AGENDA_DAYS],
        [TableCell("LUNCH", fill=AGENDA_LUNCH_FILL, bold=True, align="C")]
        + [TableCell("", fill=AGENDA_LUNCH_FILL, bold=True, align="C") for _ in AGENDA_DAYS],
        [TableCell("AFTERNOON", **slot)] + [TableCell("\n".join(afternoon)) for _, _, afternoon in AGENDA_DAYS],
    ]
    draw_table(ctx, [None] * (len(AGENDA_DAYS) + 1), rows, head=head, style=GRID)
    ctx.y += 10
