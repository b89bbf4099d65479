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

from ..colors import NOTE_FILL, resolve_color
from ..context import LayoutContext
from ..primitives import centered_callout, numbered, paragraph, placeholder, render_steps, section_banner
from ..tables import key_value_table
from ..utils import as_list, as_mapping, first_present, mapping_items, text_value

VISION_INTRO = (
    "Somewhere between the idea and the launch of the MVP, the product vision helps you to walk the "
    "initial path. It defines the essence of your business value and should reflect a clear and "
    "compelling message to your customers. This activity will help you to define the product vision "
    "in a collaborative way."
)
VISION_CALLOUT = (
    'With a clear view of the product, you can determine how the initial "pieces" of the business '
    "will come together."
)
VISION_STEPS = (
    "1) Divide the team into three groups and request that each group fill only the blanks selected "
    "in its respective template.",
    "2) Ask each group to read their respective incomplete sentence and copy their post-its to the "
    "single template.",
    "3) Ask the team to consolidate a homogeneous sentence, copying or rewriting the previous notes, as needed.",
)
VISION_FIELDS = (
    ("For:", "for"),
    ("Whose:", "whose"),
    ("The:", "the"),
    ("Is a:", "isA"),
    ("That:", "that"),
    ("Different from:", "differentFrom"),
    ("Our product:", "ourProduct"),
)

JOURNEYS_INTRO = (
    "The journey describes a user's journey through a sequence of steps to reach a goal. Some of "
    "these steps represent different points of contact with the product, characterizing the interaction."
)
JOURNEY_FILL = resolve_color("bg-yellow-100", "#FEF9C3")


def render_product_vision(ctx: LayoutContext, content: Any) -> None:
    paragraph(ctx, VISION_INTRO, advance=15)
    centered_callout(ctx, VISION_CALLOUT, ctx.width - 40)
    render_steps(ctx, VISION_STEPS)

    visions = mapping_items(as_mapping(content).get("visions"))
    if not visions:
        placeholder(ctx, "No visions added to this section.")
        return
    for index, vision in enumerate(visions, start=1):
        section_banner(ctx, numbered("THE PRODUCT VISION", index, len(visions)))
        base = resolve_color(vision.get("color"), NOTE_FILL)
        overrides = as_mapping(vision.get("colors"))
        rows = []
        for label, field in VISION_FIELDS:
            fill = resolve_color(first_present(vision.get(f"{field}Color"), overrides.get(field)), base)
            rows.append((label, text_value(vision.get(field)), fill))
        key_value_table(ctx, rows)
        ctx.y += 10


def render_user_journeys(ctx: LayoutContext, content: Any) -> None:
    paragraph(ctx, JOURNEYS_INTRO, advance=12)
    journeys = mapping_items(as_mapping(content).get("journeys"))
    if not journeys:
        placeholder(ctx, "No journeys added.")
        return
    for index, journey in enumerate(journeys, start=1):
        section_banner(ctx, numbered("USER JOURNEY", index, len(journeys)))
        base = resolve_color(journey.get("color"), JOURNEY_FILL)
        rows = [
            (
                "Personas:",
                text_value(first_present(journey.get("persona")) or "-"),
                resolve_color(journey.get("personaColor"), base),
            )
        ]
        for step_index, step in enumerate(as_list(journey.get("steps")), start=1):
            step_data = as_mapping(step)
            text = step if isinstance(step, str) else first_present(step_data.get("text"))
            rows.append(
                (
                    f"Step {step_index}:",
                    text_value(text or "-"),
                    resolve_color(step_data.get("color"), base),
                )
            )
        rows.append(
            (
                "Goal:",
                text_value(first_present(journey.get("goal")) or "-"),
                resolve_color(journey.get("goalColor"), base),
            )
        )
        key_value_table(ctx, rows, label_padding=3, value_padding=6)
        ctx.y += 10
