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

import typer

from ...render.templates import ALIASES, TemplateKind
from ..core.common import _ctx_value, _run_cli
from ..ui import build_kv_table, console

_TEMPLATES_HELP = (
    "List the template names the renderer understands.\n\n"
    "Legacy names are accepted too and shown with the name they map to.\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_TEMPLATES_HELP)(templates)


def templates(
    ctx: typer.Context,
    aliases: bool = typer.Option(
        True,
        "--aliases/--no-aliases",
        help="Also list legacy template names.",
        rich_help_panel="Behavior",
    ),
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        for kind in TemplateKind:
            console.print(kind.value)
        if aliases and ALIASES:
            console.print(build_kv_table(sorted(ALIASES.items()), title="Aliases"))

    _run_cli(_run, debug=debug_value)
