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

import importlib.metadata
from collections.abc import Callable
from typing import Any

import typer
from rich.traceback import install as install_rich_traceback

from ...render.table import Alignment
from ..ui import console_err


def _run_cli(func: Callable[[], Any], *, debug: bool) -> None:
    if debug:
        install_rich_traceback(show_locals=True)
    try:
        result = func()
    except (OSError, RuntimeError, ValueError, TypeError, LookupError) as exc:
        if debug:
            raise
        console_err.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=2)
    if isinstance(result, int) and result != 0:
        raise typer.Exit(code=result)


def _ctx_value(ctx: typer.Context, key: str) -> Any:
    if ctx.obj is None:
        return None
    return ctx.obj.get(key)


def _parse_widths(value: str | None) -> list[float] | None:
    if value is None:
        return None
    widths: list[float] = []
    for part in value.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            width = float(part)
        except ValueError:
            raise typer.BadParameter(f"invalid column width: {part!r}") from None
        if width < 0:
            raise typer.BadParameter("column widths cannot be negative")
        widths.append(width)
    if not widths:
        raise typer.BadParameter("at least one column width is required")
    return widths


def _parse_aligns(value: str | None) -> list[Alignment] | None:
    if value is None:
        return None
    try:
        return [Alignment.parse(part) for part in value.split(",") if part.strip()]
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from None


def _get_version() -> str:
    try:
        return importlib.metadata.version("forgepdf")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0"
