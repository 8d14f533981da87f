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

from enum import Enum
from typing import Sequence

from .surface import DrawingSurface
from .wrap import estimate_line_count

DEFAULT_LINE_HEIGHT = 5.0


class Alignment(str, Enum):
    LEFT = "L"
    CENTER = "C"
    RIGHT = "R"

    @classmethod
    def parse(cls, value: str | Alignment) -> Alignment:
        if isinstance(value, Alignment):
            return value
        normalized = str(value).strip().upper()
        for member in cls:
            if normalized in (member.value, member.name):
                return member
        raise ValueError(f"alignment must be one of L, C, R (got {value!r})")


def check_page_break(surface: DrawingSurface, height: float) -> bool:
    """Start a new page when a block of ``height`` would cross the trigger."""
    if surface.get_y() + height > surface.page_break_trigger:
        surface.add_page()
        return True
    return False


class RowRenderer:
    """Draws table rows whose cells share the height of the tallest cell."""

    def __init__(self, surface: DrawingSurface, *, line_height: float = DEFAULT_LINE_HEIGHT) -> None:
        if line_height <= 0:
            raise ValueError("line_height must be positive")
        self.surface = surface
        self.line_height = float(line_height)
        self.widths: tuple[float, ...] = ()
        self.aligns: tuple[Alignment, ...] = ()

    def set_widths(self, widths: Sequence[float]) -> None:
        values = tuple(float(width) for width in widths)
        if any(width < 0 for width in values):
            raise ValueError("column widths cannot be negative")
        self.widths = values

    def set_aligns(self, aligns: Sequence[str | Alignment]) -> None:
        self.aligns = tuple(Alignment.parse(align) for align in aligns)

    def align_for(self, index: int) -> Alignment:
        if index < len(self.aligns):
            return self.aligns[index]
        return Alignment.LEFT

    def line_count(self, width: float, text: str, *, x: float | None = None) -> int:
        surface = self.surface
        metrics = surface.font_metrics()
        return estimate_line_count(
            width,
            text,
            metrics,
            surface.font_size,
            surface.cell_margin,
            surface.remaining_width(x),
        )

    def render_row(self, cells: Sequence[str]) -> float:
        if len(cells) > len(self.widths):
            raise ValueError(
                f"row has {len(cells)} cells but only {len(self.widths)} column widths are set"
            )
        surface = self.surface
        widths = self._resolve_widths(len(cells))

        max_lines = 1
        for width, text in zip(widths, cells):
            max_lines = max(max_lines, self.line_count(width, text))
        height = self.line_height * max_lines

        check_page_break(surface, height)
        for index, text in enumerate(cells):
            width = widths[index]
            x = surface.get_x()
            y = surface.get_y()
            surface.rect(x, y, width, height)
            surface.multi_cell(width, self.line_height, text, align=self.align_for(index).value)
            surface.set_xy(x + width, y)
        surface.ln(height)
        return height

    def _resolve_widths(self, count: int) -> list[float]:
        # Zero-width columns run to the right margin from where they start.
        resolved: list[float] = []
        x = self.surface.get_x()
        for width in self.widths[:count]:
            if width == 0:
                width = self.surface.remaining_width(x)
            resolved.append(width)
            x += width
        return resolved


__all__ = [
    "Alignment",
    "DEFAULT_LINE_HEIGHT",
    "RowRenderer",
    "check_page_break",
]
