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

import tomllib
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from ..core.models import DEFAULT_BRAND_NAME, DEFAULT_DATE_FORMAT, DEFAULT_PAPER_SIZE, ReportOptions
from .installer import resolve_config_path

PAPER_SIZES = ("A4", "LETTER")


@dataclass(frozen=True)
class ReportDefaults:
    brand_name: str = DEFAULT_BRAND_NAME
    title: str | None = None
    date_format: str = DEFAULT_DATE_FORMAT


@dataclass(frozen=True)
class UiDefaults:
    quiet: bool = False
    no_color: bool = False


@dataclass(frozen=True)
class AppConfig:
    path: Path
    paper_size: str = DEFAULT_PAPER_SIZE
    report: ReportDefaults = field(default_factory=ReportDefaults)
    ui: UiDefaults = field(default_factory=UiDefaults)

    def report_options(
        self,
        *,
        brand_name: str | None = None,
        paper_size: str | None = None,
        report_date: date | None = None,
    ) -> ReportOptions:
        """Build render options, letting explicit values override the file."""
        return ReportOptions(
            brand_name=brand_name or self.report.brand_name,
            report_date=report_date,
            date_format=self.report.date_format,
            paper_size=_parse_paper_size(paper_size, field="paper") if paper_size else self.paper_size,
        )


def load_app_config(path: str | Path | None = None) -> AppConfig:
    config_path = resolve_config_path(path)
    data = _load_toml(config_path)
    report_cfg = _get_dict(data, "report")
    page_cfg = _get_dict(data, "page")
    return AppConfig(
        path=config_path,
        paper_size=_parse_paper_size(page_cfg.get("size"), field="page.size"),
        report=_parse_report_defaults(report_cfg),
        ui=_parse_ui_defaults(_get_dict(data, "ui")),
    )


def _parse_report_defaults(cfg: dict[str, object]) -> ReportDefaults:
    brand_name = _parse_optional_str(cfg.get("brand_name"), field="report.brand_name")
    date_format = _parse_optional_str(cfg.get("date_format"), field="report.date_format")
    if date_format is not None and "%" not in date_format:
        raise ValueError("report.date_format must contain at least one % directive")
    return ReportDefaults(
        brand_name=DEFAULT_BRAND_NAME if brand_name is None else brand_name,
        title=_parse_optional_str(cfg.get("title"), field="report.title"),
        date_format=DEFAULT_DATE_FORMAT if date_format is None else date_format,
    )


def _parse_ui_defaults(cfg: dict[str, object]) -> UiDefaults:
    return UiDefaults(
        quiet=_parse_bool(cfg.get("quiet"), field="ui.quiet", default=False),
        no_color=_parse_bool(cfg.get("no_color"), field="ui.no_color", default=False),
    )


def _parse_paper_size(value: object, *, field: str) -> str:
    if value is None:
        return DEFAULT_PAPER_SIZE
    if not isinstance(value, str):
        raise ValueError(f"{field} must be one of: {', '.join(PAPER_SIZES)}")
    normalized = value.strip().upper()
    if not normalized:
        return DEFAULT_PAPER_SIZE
    if normalized not in PAPER_SIZES:
        raise ValueError(f"{field} must be one of: {', '.join(PAPER_SIZES)}")
    return normalized


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_optional_str(value: object, *, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    normalized = value.strip()
    return normalized or None


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{field} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"{field} must be a boolean")
    raise ValueError(f"{field} must be a boolean")
