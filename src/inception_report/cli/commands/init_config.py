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

from ...config import init_user_config, user_config_needs_init
from ..core.common import _ctx_value, _run_cli
from ..ui import console

_INIT_CONFIG_HELP = (
    "Copy the default TOML config to the user config directory.\n\n"
    "An existing file is left alone unless --force is given.\n"
)


def register(app: typer.Typer) -> None:
    app.command(name="init-config", help=_INIT_CONFIG_HELP)(init_config)


def init_config(
    ctx: typer.Context,
    force: bool = typer.Option(
        False,
        "--force",
        help="Overwrite an existing user config.",
        rich_help_panel="Behavior",
    ),
) -> None:
    quiet_value = bool(_ctx_value(ctx, "quiet"))
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        existed = not user_config_needs_init()
        path = init_user_config(overwrite=force)
        if quiet_value:
            return
        if existed and not force:
            console.print(f"User config already present at {path}")
        else:
            console.print(f"User config ready at {path}")

    _run_cli(_run, debug=debug_value)
