#!/usr/bin/env python3
from __future__ import annotations

import typer

from .commands import (
    measure as measure_command,
    table as table_command,
)


def register(app: typer.Typer) -> None:
    table_command.register(app)
    measure_command.register(app)
