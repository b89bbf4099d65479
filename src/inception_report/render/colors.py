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

import re
from collections.abc import Mapping

from .utils import as_mapping, first_present

HEX_COLOR_RE = re.compile(r"^#([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")
_WHITESPACE_RE = re.compile(r"\s+")
_OPACITY_SUFFIX_RE = re.compile(r"/\d{1,3}$")

RGB = tuple[int, int, int]

PRIMARY_TEXT = "#1E3A8A"
PRIMARY_BAR = "#111827"
SECONDARY = "#4B5563"
BORDER = "#D1D5DB"
NOTE_TEXT = "#1F2937"
SECTION_TITLE_TEXT = "#FFFFFF"
CARD_FILL = "#F9FAFB"
PHOTO_FILL = "#E5E7EB"
TABLE_HEAD_FILL = "#E5E7EB"
WHITE = "#FFFFFF"

NOTE_FILL = "#FEF08A"
GLOSSARY_FILL = "#BFDBFE"
FEATURE_FILL = "#F3F4F6"

# Tailwind background classes used by the workshop board, opacity variants
# mapped to their solid equivalent.
PALETTE: Mapping[str, str] = {
    "bg-yellow-50": "#FEFCE8",
    "bg-yellow-100": "#FEF9C3",
    "bg-yellow-200": "#FEF08A",
    "bg-yellow-300": "#FDE047",
    "bg-yellow-400": "#FACC15",
    "bg-yellow-500": "#EAB308",
    "bg-rose-200": "#FECDD3",
    "bg-pink-200": "#FBCFE8",
    "bg-green-100": "#DCFCE7",
    "bg-green-200": "#BBF7D0",
    "bg-blue-100": "#DBEAFE",
    "bg-blue-200": "#BFDBFE",
    "bg-indigo-200": "#C7D2FE",
    "bg-purple-200": "#E9D5FF",
    "bg-red-100": "#FEE2E2",
    "bg-gray-100": "#F3F4F6",
    "bg-gray-200": "#E5E7EB",
    "bg-orange-200": "#FED7AA",
    "bg-yellow-200/60": "#FEF08A",
    "bg-pink-200/60": "#FBCFE8",
    "bg-blue-200/60": "#BFDBFE",
    "bg-green-200/60": "#BBF7D0",
    "bg-purple-200/60": "#E9D5FF",
    "bg-orange-200/60": "#FED7AA",
}


def resolve_color(value: object, fallback: str) -> str:
    """Map a hex string or palette token to a hex colour, else ``fallback``."""
    if value is None:
        return fallback
    text = str(value).strip()
    if not text:
        return fallback
    if HEX_COLOR_RE.match(text):
        return text
    token = _OPACITY_SUFFIX_RE.sub("", _WHITESPACE_RE.sub("", text))
    return PALETTE.get(token, fallback)


def hex_to_rgb(value: str) -> RGB:
    digits = value.lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def feature_color(feature: object, fallback: str = FEATURE_FILL) -> str:
    """Card colour of a feature, looked up on the fields the boards use."""
    data = as_mapping(feature)
    raw = first_present(
        data.get("color"),
        data.get("bg"),
        data.get("bgColor"),
        data.get("postitColor"),
        as_mapping(data.get("card")).get("color"),
        as_mapping(data.get("meta")).get("color"),
    )
    return resolve_color(raw, fallback)
