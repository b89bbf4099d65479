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

import base64
import binascii
import io
import math
import re
from collections.abc import Mapping
from enum import Enum

from fpdf import FPDF
from PIL import Image

from .colors import (
    BORDER,
    FEATURE_FILL,
    GLOSSARY_FILL,
    NOTE_FILL,
    PRIMARY_BAR,
    WHITE,
    feature_color,
    resolve_color,
)
from .context import LayoutContext
from .grid import DEFINITION_LINE_HEIGHT, NOTE_INSET, NOTE_LINE_HEIGHT, note_text
from .style import (
    CARD_BADGE,
    CARD_TITLE,
    CARD_VALUE,
    DEFINITION,
    NOTE,
    TAG_LABEL,
    TERM,
    apply_style,
    box,
)
from .text import draw_lines, middle_baseline, normalize_symbols, pdf_safe, wrap_text
from .utils import as_mapping, first_present, text_value

NOTE_RADIUS = 3.0
CARD_INSET = 7.0
CARD_LINE_HEIGHT = 5.0
REVIEW_MIN_HEIGHT = 36.0
VALUE_BOX_HEIGHT = 10.0
BADGE_HEIGHT = 8.0
TAG_MIN_HEIGHT = 36.0
TAG_BORDER = "#0B1220"

_DATA_URI_RE = re.compile(r"^data:[^,]*?;base64,", re.IGNORECASE)


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    UNKNOWN = ""


_HIGH_WORDS = {"alt", "alta", "alto", "high", "h", "green"}
_MEDIUM_WORDS = {"media", "média", "medium", "m", "yellow"}
_LOW_WORDS = {"baix", "baixa", "low", "l", "red"}

REVIEW_BACKGROUND = {
    Confidence.HIGH: "#DCFCE7",
    Confidence.MEDIUM: "#FEF9C3",
    Confidence.LOW: "#FEE2E2",
}
REVIEW_BORDER = {
    Confidence.HIGH: "#A7F3D0",
    Confidence.MEDIUM: "#FDE68A",
    Confidence.LOW: "#FCA5A5",
}
REVIEW_LABEL = {
    Confidence.HIGH: "High Confidence",
    Confidence.MEDIUM: "Medium Confidence",
    Confidence.LOW: "Low Confidence",
}
NEUTRAL_BORDER = "#CBD5E1"


def parse_confidence(raw: object) -> Confidence:
    """Read a confidence level from a number, a word or a traffic-light colour.

    Objects are unwrapped through ``value``, ``level``, ``name`` or
    ``confidence``. Numbers map 3+/2+/1+ to high/medium/low.
    """
    value = raw
    if isinstance(raw, Mapping):
        value = _first_not_none(raw.get("value"), raw.get("level"), raw.get("name"), raw.get("confidence"))
        if value is None:
            value = ""
    if value is None:
        return Confidence.UNKNOWN
    number = _as_number(value)
    if number is not None:
        if number >= 3:
            return Confidence.HIGH
        if number >= 2:
            return Confidence.MEDIUM
        if number >= 1:
            return Confidence.LOW
    word = str(value).strip().lower()
    if word in _HIGH_WORDS:
        return Confidence.HIGH
    if word in _MEDIUM_WORDS:
        return Confidence.MEDIUM
    if word in _LOW_WORDS:
        return Confidence.LOW
    return Confidence.UNKNOWN


def get_confidence(feature: object) -> Confidence:
    data = as_mapping(feature)
    candidates = (
        data.get("confidence"),
        data.get("confidenceLevel"),
        as_mapping(data.get("review")).get("confidence"),
        as_mapping(data.get("meta")).get("confidence"),
    )
    for candidate in candidates:
        level = parse_confidence(candidate)
        if level is not Confidence.UNKNOWN:
            return level
    return Confidence.UNKNOWN


def _first_not_none(*values: object) -> object:
    for value in values:
        if value is not None:
            return value
    return None


def _as_number(value: object) -> float | None:
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip() or "0")
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number):
        return None
    return number


def render_simple_note(ctx: LayoutContext, item: object, x: float, y: float, w: float, h: float) -> None:
    pdf = ctx.pdf
    box(pdf, x, y, w, h, fill=resolve_color(as_mapping(item).get("color"), NOTE_FILL), radius=NOTE_RADIUS)
    apply_style(pdf, NOTE)
    lines = wrap_text(pdf, note_text(item), w - 2 * NOTE_INSET)
    draw_lines(pdf, lines, x + NOTE_INSET, y + NOTE_INSET + 2, NOTE_LINE_HEIGHT)


def glossary_term(item: object) -> str:
    data = as_mapping(item)
    return text_value(first_present(data.get("term"), data.get("text"), data.get("name")))


def glossary_term_height(pdf: FPDF, item: object, cell_width: float) -> float:
    data = as_mapping(item)
    inner = cell_width - 2 * NOTE_INSET
    apply_style(pdf, TERM)
    height = len(wrap_text(pdf, glossary_term(item), inner)) * NOTE_LINE_HEIGHT + 10
    definition = text_value(data.get("definition"))
    if definition:
        apply_style(pdf, DEFINITION)
        height += len(wrap_text(pdf, definition, inner)) * DEFINITION_LINE_HEIGHT
    return height


def render_glossary_term(ctx: LayoutContext, item: object, x: float, y: float, w: float, h: float) -> None:
    pdf = ctx.pdf
    data = as_mapping(item)
    box(pdf, x, y, w, h, fill=resolve_color(data.get("color"), GLOSSARY_FILL), radius=NOTE_RADIUS)
    apply_style(pdf, TERM)
    term_lines = wrap_text(pdf, glossary_term(item), w - 2 * NOTE_INSET)
    top = y + NOTE_INSET + 2
    draw_lines(pdf, term_lines, x + NOTE_INSET, top, NOTE_LINE_HEIGHT)
    apply_style(pdf, DEFINITION)
    definition_lines = wrap_text(pdf, data.get("definition"), w - 2 * NOTE_INSET)
    draw_lines(
        pdf,
        definition_lines,
        x + NOTE_INSET,
        top + len(term_lines) * NOTE_LINE_HEIGHT + 2,
        DEFINITION_LINE_HEIGHT,
    )


def tag_label_lines(pdf: FPDF, label: str, width: float) -> list[str]:
    apply_style(pdf, TAG_LABEL)
    return wrap_text(pdf, label.upper(), width - 2 * CARD_INSET)


def tag_card_height(pdf: FPDF, label: str, width: float) -> float:
    lines = tag_label_lines(pdf, label, width)
    return max(TAG_MIN_HEIGHT, 10 + len(lines) * CARD_LINE_HEIGHT + 12)


def render_tag_card(
    ctx: LayoutContext,
    label: str,
    x: float,
    y: float,
    w: float,
    h: float,
    color: str | None = None,
) -> None:
    """Solid pill with a white uppercase label, used for MVP and increment markers."""
    pdf = ctx.pdf
    pdf.set_line_width(0.2)
    box(pdf, x, y, w, h, fill=resolve_color(color, PRIMARY_BAR), border=TAG_BORDER, radius=6)
    lines = tag_label_lines(pdf, label, w)
    first = middle_baseline(pdf, y + h / 2) - (len(lines) - 1) * CARD_LINE_HEIGHT / 2
    draw_lines(pdf, lines, x + w / 2, first, CARD_LINE_HEIGHT, align="C")


def feature_name(feature: object) -> str:
    data = as_mapping(feature)
    return normalize_symbols(first_present(data.get("name")) or "New Feature")


def feature_value(feature: object) -> str:
    data = as_mapping(feature)
    return normalize_symbols(first_present(data.get("value"), data.get("valuation")) or "")


def _name_lines(pdf: FPDF, feature: object, width: float) -> list[str]:
    apply_style(pdf, CARD_TITLE)
    return wrap_text(pdf, feature_name(feature), width - 2 * CARD_INSET)


def review_card_height(pdf: FPDF, feature: object, width: float) -> float:
    lines = _name_lines(pdf, feature, width)
    return max(REVIEW_MIN_HEIGHT, 10 + len(lines) * CARD_LINE_HEIGHT + 10 + 6 + BADGE_HEIGHT + 10)


def render_review_card(ctx: LayoutContext, feature: object, x: float, y: float, w: float, h: float) -> None:
    """Feature card coloured by confidence, with a value box and a confidence badge."""
    pdf = ctx.pdf
    level = get_confidence(feature)
    base = feature_color(feature, FEATURE_FILL)
    pdf.set_line_width(0.2)
    box(
        pdf,
        x,
        y,
        w,
        h,
        fill=REVIEW_BACKGROUND.get(level, base),
        border=REVIEW_BORDER.get(level, NEUTRAL_BORDER),
        radius=4,
    )

    lines = _name_lines(pdf, feature, w)
    draw_lines(pdf, lines, x + CARD_INSET, y + 12, CARD_LINE_HEIGHT)

    inner = w - 2 * CARD_INSET
    value_y = y + 16 + len(lines) * CARD_LINE_HEIGHT
    box(pdf, x + CARD_INSET, value_y, inner, VALUE_BOX_HEIGHT, fill=WHITE, border=BORDER, radius=2)
    apply_style(pdf, CARD_VALUE)
    value = pdf_safe(feature_value(feature))
    if value:
        pdf.text(
            x + w / 2 - pdf.get_string_width(value) / 2,
            middle_baseline(pdf, value_y + VALUE_BOX_HEIGHT / 2),
            value,
        )

    badge_y = value_y + VALUE_BOX_HEIGHT + 6
    box(pdf, x + CARD_INSET, badge_y, inner, BADGE_HEIGHT, fill=WHITE, border=BORDER, radius=2)
    apply_style(pdf, CARD_BADGE)
    label = REVIEW_LABEL.get(level, "-")
    pdf.text(
        x + w / 2 - pdf.get_string_width(label) / 2,
        middle_baseline(pdf, badge_y + BADGE_HEIGHT / 2),
        label,
    )


def decode_image(source: str) -> Image.Image:
    """Decode a base64 string or data URI into a loaded Pillow image."""
    cleaned = _DATA_URI_RE.sub("", source.strip())
    cleaned = "".join(cleaned.split())
    payload = base64.b64decode(cleaned + "=" * ((-len(cleaned)) % 4), validate=True)
    image = Image.open(io.BytesIO(payload))
    image.load()
    return image


def draw_image_fit(ctx: LayoutContext, source: object, x: float, y: float, box_w: float, box_h: float) -> bool:
    """Embed an image centred in the box, keeping its aspect ratio.

    A photo that cannot be decoded is skipped with a warning.
    """
    if not isinstance(source, str) or not source.strip():
        return False
    try:
        image = decode_image(source)
        width, height = image.size
        if not width or not height:
            raise ValueError("empty image")
        ratio = min(box_w / width, box_h / height)
        fitted_w = width * ratio
        fitted_h = height * ratio
        if image.mode not in ("RGB", "RGBA", "L"):
            image = image.convert("RGBA")
        ctx.pdf.image(image, x=x + (box_w - fitted_w) / 2, y=y + (box_h - fitted_h) / 2, w=fitted_w, h=fitted_h)
    except (binascii.Error, ValueError, OSError, Image.DecompressionBombError) as exc:
        ctx.warn(f"could not embed image: {exc}")
        return False
    return True
