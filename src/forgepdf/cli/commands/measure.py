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

from ...config import load_config
from ...render.document import ForgeDocument
from ..core.common import _ctx_value, _run_cli
from ..ui import build_kv_table, console

_MEASURE_HELP = (
    "Print how many lines TEXT wraps into inside a cell.\n\n"
    "Examples:\n"
    "  forgepdf measure 'Some longer cell text' --width 40\n"
    "  forgepdf measure 'Total' --width 20 --font Courier --size 12\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_MEASURE_HELP)(measure)


def measure(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Cell text; use \\n for explicit line breaks."),
    width: float = typer.Option(..., "--width", "-w", min=0, help="Cell width (0 = to margin)."),
    font: str | None = typer.Option(None, "--font", help="Font family (defaults to config)."),
    size: float | None = typer.Option(None, "--size", min=0.1, help="Font size in points."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show the cell height too."),
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))
    config_value = _ctx_value(ctx, "config")

    def _run() -> None:
        config = load_config(config_value)
        document = ForgeDocument(config)
        document.add_page()
        document.set_font(font, size=size)
        renderer = document.table
        lines = renderer.line_count(width, text.replace("\\n", "\n"))
        if verbose:
            console.print(
                build_kv_table(
                    [
                        ("Lines", str(lines)),
                        ("Height", f"{lines * renderer.line_height:g} {config.page.unit}"),
                    ]
                )
            )
        else:
            console.print(str(lines))

    _run_cli(_run, debug=debug_value)
