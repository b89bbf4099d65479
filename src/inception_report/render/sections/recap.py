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
from ..context import LayoutContext
from ..grid import GridOptions, draw_grid
from ..primitives import paragraph, placeholder
from ..utils import as_list, as_mapping

INTRO = "This is a summary of your workshop. You can review the content of each step below."
NOTES_GRID = GridOptions(columns=3)


def render_workshop_report(ctx: LayoutContext, content: Any) -> None:
    paragraph(ctx, INTRO, advance=12)
    notes = as_list(as_mapping(content).get("notes"))
    if not notes:
        placeholder(ctx, "No notes added.")
        return
    draw_grid(ctx, notes, render_simple_note, NOTES_GRID)
