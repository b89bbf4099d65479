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

from ..cards import glossary_term_height, render_glossary_term, render_simple_note
from ..context import LayoutContext
from ..grid import GridOptions, draw_grid
from ..primitives import centered_callout, paragraph, placeholder, render_steps
from ..utils import as_list, as_mapping

PARKING_LOT_INTRO = (
    "The Parking Lot helps to momentarily park conversations, ideas or questions that are raised "
    "during a conversation but are not useful for discussion at that specific time. It is an "
    "essential tool for the facilitator at any time during the workshop, as it is a polite way of "
    'saying: "yes, I heard you, but this conversation is for later".'
)

GLOSSARY_INTRO = (
    "Take advantage of the Lean Inception to validate, adjust and give visibility to the vocabulary "
    "of the domain. It is very important that everyone involved - business, technology and user "
    "representatives - communicate and register the generated artifacts with a common language. "
    "Make sure to check the understanding of each word in the domain, and place it in the Glossary, "
    "visible to everyone."
)

GOALS_INTRO = (
    "Each participant must share what they understand as a business goal, and the various points "
    "of view must be discussed to reach a consensus on what is really important. This activity "
    "helps in raising and clarifying the main objectives."
)
GOALS_CALLOUT = "If you have to summarize the product in three business goals, what would they be?"
GOALS_STEPS = (
    "1) Divide the team into three groups and request that each group fill only the blanks "
    "selected in its respective template.",
    "2) Ask participants to share what they have written, grouping them by similarity in the 'clusters'.",
    "3) Define a title for each of the 'clusters'.",
)

BRAINSTORMING_INTRO = (
    "A feature represents a user's action or interaction with the product, for example: printing "
    "invoices, consulting detailed statements and inviting Facebook friends. The description of a "
    "feature must be as simple as possible, aiming to meet a business goal, a persona need, and / or "
    "contemplating a step in the journey."
)
BRAINSTORMING_CALLOUT = (
    "The user is trying to do something, so the product must have a feature for that. What is this feature?"
)
BRAINSTORMING_STEPS = (
    "1) Ask someone to read, slowly, the step-by-step of a user's journey.",
    "2) While reading, other people share feature ideas.",
    "3) When a feature is identified, describe it and place it on the board. Repeat the previous "
    "steps for all journeys.",
)

PARKING_LOT_GRID = GridOptions(columns=4)
GLOSSARY_GRID = GridOptions(columns=2, min_row_height=40)
GOALS_GRID = GridOptions(columns=3)
BRAINSTORMING_GRID = GridOptions(columns=4, min_row_height=24)


def render_parking_lot(ctx: LayoutContext, content: Any) -> None:
    paragraph(ctx, PARKING_LOT_INTRO, advance=18)
    spots = as_list(as_mapping(content).get("spots"))
    if not spots:
        placeholder(ctx, "No items parked.")
        return
    draw_grid(ctx, spots, render_simple_note, PARKING_LOT_GRID)


def render_glossary(ctx: LayoutContext, content: Any) -> None:
    paragraph(ctx, GLOSSARY_INTRO, advance=18)
    terms = as_list(as_mapping(content).get("terms"))
    if not terms:
        placeholder(ctx, "No terms added.")
        return
    draw_grid(ctx, terms, render_glossary_term, GLOSSARY_GRID, measure=glossary_term_height)


def render_product_goals(ctx: LayoutContext, content: Any) -> None:
    paragraph(ctx, GOALS_INTRO, advance=15)
    centered_callout(ctx, GOALS_CALLOUT)
    render_steps(ctx, GOALS_STEPS)
    goals = as_list(as_mapping(content).get("goals"))
    if not goals:
        placeholder(ctx, "No goals added.")
        return
    draw_grid(ctx, goals, render_simple_note, GOALS_GRID)


def render_feature_brainstorming(ctx: LayoutContext, content: Any) -> None:
    paragraph(ctx, BRAINSTORMING_INTRO, advance=15)
    centered_callout(ctx, BRAINSTORMING_CALLOUT, ctx.width - 30)
    render_steps(ctx, BRAINSTORMING_STEPS)
    features = as_list(as_mapping(content).get("features"))
    if not features:
        placeholder(ctx, "No features added.")
        return
    draw_grid(ctx, features, render_simple_note, BRAINSTORMING_GRID)
