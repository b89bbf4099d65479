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

from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from .context import LayoutContext
from .sections.boards import (
    render_feature_brainstorming,
    render_glossary,
    render_parking_lot,
    render_product_goals,
)
from .sections.kickoff import render_agenda, render_kickoff
from .sections.mvp_canvas import render_mvp_canvas
from .sections.personas import render_personas
from .sections.recap import render_workshop_report
from .sections.review import render_review_section, render_sequencer
from .sections.scope import render_is_is_not
from .sections.vision import render_product_vision, render_user_journeys
from .style import NOTICE, apply_style
from .text import pdf_safe


class TemplateKind(str, Enum):
    KICKOFF = "Kickoff"
    AGENDA = "Agenda"
    PARKING_LOT = "Parking Lot"
    GLOSSARY = "Glossary"
    PRODUCT_VISION = "Product Vision"
    IS_IS_NOT = "The Product IS - IS NOT - DOES - DOES NOT"
    PRODUCT_GOALS = "Product Goals"
    PERSONAS = "Personas"
    USER_JOURNEYS = "User Journeys"
    FEATURE_BRAINSTORMING = "Feature Brainstorming"
    TECHNICAL_REVIEW = "Technical, Business and UX Review"
    SEQUENCER = "Sequencer"
    MVP_CANVAS = "MVP Canvas"
    WORKSHOP_REPORT = "Workshop Report"


ALIASES: Mapping[str, str] = {
    "Technical Review": TemplateKind.TECHNICAL_REVIEW.value,
    "Product Is/Is Not": TemplateKind.IS_IS_NOT.value,
    "Feature Sequencer": TemplateKind.SEQUENCER.value,
}

SectionRenderer = Callable[[LayoutContext, Any], None]

RENDERERS: Mapping[TemplateKind, SectionRenderer] = {
    TemplateKind.KICKOFF: render_kickoff,
    TemplateKind.AGENDA: render_agenda,
    TemplateKind.PARKING_LOT: render_parking_lot,
    TemplateKind.GLOSSARY: render_glossary,
    TemplateKind.PRODUCT_VISION: render_product_vision,
    TemplateKind.IS_IS_NOT: render_is_is_not,
    TemplateKind.PRODUCT_GOALS: render_product_goals,
    TemplateKind.PERSONAS: render_personas,
    TemplateKind.USER_JOURNEYS: render_user_journeys,
    TemplateKind.FEATURE_BRAINSTORMING: render_feature_brainstorming,
    TemplateKind.TECHNICAL_REVIEW: render_review_section,
    TemplateKind.SEQUENCER: render_sequencer,
    TemplateKind.MVP_CANVAS: render_mvp_canvas,
    TemplateKind.WORKSHOP_REPORT: render_workshop_report,
}


def normalize_name(name: str) -> str:
    """Map a legacy template name to its display name."""
    return ALIASES.get(name, name)


def resolve_kind(name: str) -> TemplateKind | None:
    try:
        return TemplateKind(normalize_name(name))
    except ValueError:
        return None


def render_section(ctx: LayoutContext, name: str, content: Any) -> TemplateKind | None:
    """Draw one template's body at the cursor.

    Unknown names get a visible notice in the document and a warning.
    """
    kind = resolve_kind(name)
    if kind is None:
        display = normalize_name(name)
        apply_style(ctx.pdf, NOTICE)
        ctx.pdf.text(ctx.left, ctx.y, pdf_safe(f'Renderer for "{display}" not implemented.'))
        ctx.y += 8
        ctx.warn(f'no renderer for template "{display}"')
        return None
    RENDERERS[kind](ctx, content)
    return kind
