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
from typing import Sequence

from fpdf import FPDF

from .utils import text_value

_HEART_RE = re.compile(r"(&e|&hearts;|♥)", re.IGNORECASE)
_TYPOGRAPHIC = str.maketrans(
    {
        "—": "-",
        "–": "-",
        "‒": "-",
        "−": "-",
        "•": "-",
        "‘": "'",
        "’": "'",
        "‚": "'",
        "“": '"',
        "”": '"',
        "„": '"',
        "…": "...",
        " ": " ",
        "\t": " ",
        "\r": "",
    }
)


def pdf_safe(value: object) -> str:
    """Make text drawable with the core PDF fonts (latin-1)."""
    text = text_value(value).translate(_TYPOGRAPHIC)
    return text.encode("latin-1", "replace").decode("latin-1")


def normalize_symbols(value: object) -> str:
    return _HEART_RE.sub("<3", text_value(value))


def font_line_height(size_pt: float, multiplier: float = 1.15) -> float:
    pt_to_mm = 0.3527777778
    return float(size_pt) * pt_to_mm * multiplier


def wrap_lines_to_width(pdf: FPDF, lines: Sequence[str], max_width: float) -> list[str]:
    wrapped: list[str] = []
    for line in lines:
        if not line:
            wrapped.append("")
            continue
        words = line.split(" ")
        current = ""
        for word in words:
            candidate = word if not current else f"{current} {word}"
            if pdf.get_string_width(candidate) <= max_width:
                current = candidate
                continue
            if current:
                wrapped.append(current)
                current = ""
            if pdf.get_string_width(word) <= max_width:
                current = word
                continue
            parts: list[str] = []
            chunk = ""
            for ch in word:
                next_chunk = f"{chunk}{ch}"
                if chunk and pdf.get_string_width(next_chunk) > max_width:
                    parts.append(chunk)
                    chunk = ch
                else:
                    chunk = next_chunk
            if chunk:
                parts.append(chunk)
            wrapped.extend(parts[:-1])
            current = parts[-1] if parts else ""
        if current:
            wrapped.append(current)
    return wrapped


def wrap_text(pdf: FPDF, text: object, max_width: float) -> list[str]:
    """Wrap text with the current font; an empty text still occupies one line."""
    safe = pdf_safe(text)
    wrapped = wrap_lines_to_width(pdf, safe.split("\n"), max(1.0, max_width))
    return wrapped or [""]


def draw_lines(
    pdf: FPDF,
    lines: Sequence[str],
    x: float,
    y: float,
    line_height: float,
    *,
    align: str = "L",
) -> None:
    """Draw lines with the first baseline at ``y``; ``x`` is the anchor for ``align``."""
    for idx, line in enumerate(lines):
        if not line:
            continue
        baseline = y + idx * line_height
        if align == "C":
            pdf.text(x - pdf.get_string_width(line) / 2, baseline, line)
        elif align == "R":
            pdf.text(x - pdf.get_string_width(line), baseline, line)
        else:
            pdf.text(x, baseline, line)


def middle_baseline(pdf: FPDF, center_y: float) -> float:
    """Baseline that vertically centres a single line of the current font on ``center_y``."""
    return center_y + pdf.font_size * 0.35
