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

import dataclasses
from datetime import date
from pathlib import Path

import typer

from ...config import AppConfig, load_app_config
from ...core.models import Report, load_report
from ...render.report import ReportDocument, generate_report
from ..core.common import _ctx_value, _date_callback, _paper_callback, _run_cli
from ..core.log import _warn
from ..ui import build_toc_table, console, print_completion_panel

_RENDER_HELP = (
    "Render a workshop report JSON file to PDF.\n\n"
    "Examples:\n"
    "  inception-report render workshop.json\n"
    "  inception-report render workshop.json -o out/report.pdf --paper letter\n"
    '  inception-report render workshop.json --brand "Acme Inception" --date 2024-05-01\n'
)


def register(app: typer.Typer) -> None:
    app.command(help=_RENDER_HELP)(render)


def render(
    ctx: typer.Context,
    report_json: Path = typer.Argument(..., help="Workshop report JSON file."),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output PDF path (defaults to workshop-report-<workshop>.pdf).",
        rich_help_panel="Outputs",
    ),
    brand: str | None = typer.Option(
        None,
        "--brand",
        help="Brand name shown in page headers and footers.",
        rich_help_panel="Layout",
    ),
    paper: str | None = typer.Option(
        None,
        "--paper",
        help="Paper size override (A4/Letter).",
        callback=_paper_callback,
        rich_help_panel="Layout",
    ),
    report_date: str | None = typer.Option(
        None,
        "--date",
        help="Header date as YYYY-MM-DD (defaults to today).",
        callback=_date_callback,
        rich_help_panel="Layout",
    ),
) -> None:
    config_value = _ctx_value(ctx, "config")
    quiet_value = bool(_ctx_value(ctx, "quiet"))
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        app_config = load_app_config(config_value)
        report = _with_config_title(load_report(report_json), app_config)
        options = app_config.report_options(
            brand_name=brand,
            paper_size=paper,
            report_date=date.fromisoformat(report_date) if report_date else None,
        )
        document = generate_report(report, options)
        output_path = document.save(output or default_output_path(report))
        for warning in document.warnings:
            _warn(warning, quiet=quiet_value)
        _print_summary(document, output_path, quiet=quiet_value)

    _run_cli(_run, debug=debug_value)


def default_output_path(report: Report) -> Path:
    slug = (report.workshop_name or report.title or "workshop").strip().lower().replace(" ", "_")
    return Path.cwd() / f"workshop-report-{slug}.pdf"


def _with_config_title(report: Report, app_config: AppConfig) -> Report:
    if report.title or not app_config.report.title:
        return report
    return dataclasses.replace(report, title=app_config.report.title)


def _print_summary(document: ReportDocument, output_path: Path, *, quiet: bool) -> None:
    if quiet:
        return
    entries = [(entry.step, entry.name, entry.page) for entry in document.toc_entries]
    if entries:
        console.print(build_toc_table(entries, title="Summary"))
    print_completion_panel(
        "Report ready",
        [str(output_path), f"{document.page_count} pages"],
        quiet=quiet,
    )
