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

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any

from ..render.utils import as_list, as_mapping, first_present, int_value, text_value

DEFAULT_BRAND_NAME = "Lean Inception"
DEFAULT_DATE_FORMAT = "%d/%m/%Y"
DEFAULT_PAPER_SIZE = "A4"


@dataclass(frozen=True)
class TemplateEntry:
    name: str
    step_number: int
    content: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TemplateEntry":
        step = first_present(data.get("stepNumber"), data.get("step_number"), data.get("step"))
        return cls(
            name=text_value(first_present(data.get("name"), data.get("template_name"))).strip(),
            step_number=int_value(step, default=0),
            content=data.get("content"),
        )


@dataclass(frozen=True)
class ReportMetadata:
    status: str | None = None
    steps_summary: str | None = None
    generated_at: str | None = None
    participants: Sequence[str] | str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ReportMetadata":
        participants = data.get("participants")
        if participants is not None and not isinstance(participants, str):
            participants = tuple(text_value(item) for item in as_list(participants))
        return cls(
            status=_optional_text(data.get("status")),
            steps_summary=_optional_text(
                first_present(data.get("stepsSummary"), data.get("steps_summary"), data.get("steps"))
            ),
            generated_at=_optional_text(
                first_present(data.get("generatedAt"), data.get("generated_at"))
            ),
            participants=participants,
        )


@dataclass(frozen=True)
class Report:
    title: str
    workshop_name: str
    templates: tuple[TemplateEntry, ...] = ()
    metadata: ReportMetadata = field(default_factory=ReportMetadata)

    @classmethod
    def from_dict(cls, data: object) -> "Report":
        if not isinstance(data, Mapping):
            raise ValueError("report must be a JSON object")
        templates = tuple(
            TemplateEntry.from_dict(item)
            for item in as_list(data.get("templates"))
            if isinstance(item, Mapping)
        )
        metadata_source = data.get("metadata")
        if not isinstance(metadata_source, Mapping):
            metadata_source = data
        return cls(
            title=text_value(data.get("title")),
            workshop_name=text_value(
                first_present(data.get("workshopName"), data.get("workshop_name"), data.get("workshop"))
            ),
            templates=templates,
            metadata=ReportMetadata.from_dict(as_mapping(metadata_source)),
        )

    def sorted_templates(self) -> list[TemplateEntry]:
        """Templates in step order; ``sorted`` is stable so ties keep input order."""
        return sorted(self.templates, key=lambda entry: entry.step_number)


@dataclass(frozen=True)
class ReportOptions:
    brand_name: str = DEFAULT_BRAND_NAME
    report_date: date | None = None
    date_format: str = DEFAULT_DATE_FORMAT
    paper_size: str = DEFAULT_PAPER_SIZE

    def header_date(self) -> str:
        return (self.report_date or date.today()).strftime(self.date_format)


def load_report(path: str | Path) -> Report:
    source = Path(path)
    with source.open("r", encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{source}: invalid JSON ({exc.msg} at line {exc.lineno})") from exc
    return Report.from_dict(data)


def _optional_text(value: object) -> str | None:
    if value is None:
        return None
    text = text_value(value).strip()
    return text or None
