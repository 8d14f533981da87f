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

import csv
from pathlib import Path

import typer

from ...config import load_config
from ...render.document import ForgeDocument
from ..core.common import _ctx_value, _parse_aligns, _parse_widths, _run_cli
from ..core.log import _warn
from ..ui import console

_TABLE_HELP = (
    "Render a CSV file as a PDF table.\n\n"
    "Examples:\n"
    "  forgepdf table items.csv -o items.pdf\n"
    "  forgepdf table items.csv --widths 40,60,40 --aligns L,C,R\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_TABLE_HELP)(table)


def table(
    ctx: typer.Context,
    input_path: Path = typer.Argument(..., help="CSV file, one table row per line."),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output PDF path (defaults to output.path from the config).",
        rich_help_panel="Outputs",
    ),
    widths: str | None = typer.Option(
        None,
        "--widths",
        help="Comma-separated column widths; 0 fills to the right margin.",
        rich_help_panel="Layout",
    ),
    aligns: str | None = typer.Option(
        None,
        "--aligns",
        help="Comma-separated column alignments (L/C/R or left/center/right).",
        rich_help_panel="Layout",
    ),
    line_height: float | None = typer.Option(
        None,
        "--line-height",
        min=0.1,
        help="Height of one text line (defaults to table.line_height).",
        rich_help_panel="Layout",
    ),
    delimiter: str = typer.Option(
        ",",
        "--delimiter",
        help="CSV field delimiter.",
        rich_help_panel="Inputs",
    ),
) -> None:
    quiet_value = bool(_ctx_value(ctx, "quiet"))
    debug_value = bool(_ctx_value(ctx, "debug"))
    config_value = _ctx_value(ctx, "config")
    width_values = _parse_widths(widths)
    align_values = _parse_aligns(aligns)

    def _run() -> None:
        config = load_config(config_value)
        rows = _read_rows(input_path, delimiter=delimiter)
        if not rows:
            _warn(f"{input_path} has no rows; writing an empty page", quiet=quiet_value)

        output_path = output or Path(config.output.path)
        with ForgeDocument(config) as document:
            if line_height is not None:
                document.table.line_height = float(line_height)
            document.open(output_path)
            document.add_page()
            document.set_font()
            columns = max((len(row) for row in rows), default=0)
            document.set_widths(width_values or _even_widths(document, columns))
            document.set_aligns(align_values or [config.table.align] * columns)
            for row in rows:
                cells = [document.convert_text(cell, errors="replace") or "" for cell in row]
                document.row(cells)
        if not quiet_value:
            console.print(str(output_path))

    _run_cli(_run, debug=debug_value)


def _read_rows(path: Path, *, delimiter: str) -> list[list[str]]:
    with path.open(newline="", encoding="utf-8") as handle:
        return [row for row in csv.reader(handle, delimiter=delimiter) if row]


def _even_widths(document: ForgeDocument, columns: int) -> list[float]:
    if columns <= 0:
        return []
    usable = document.surface.remaining_width()
    return [usable / columns] * columns
