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

from typing import Mapping

from ..errors import UndefinedCharacterWidthError

# Glyph widths are expressed per 1000 units of em.
FONT_UNITS_PER_EM = 1000


def wrap_budget(
    width: float,
    *,
    font_size: float,
    cell_margin: float,
    page_width_fallback: float,
) -> float:
    """Return the usable line width of a cell in font units.

    A width of 0 means the cell extends to the right margin, so
    ``page_width_fallback`` is used instead.
    """
    if font_size <= 0:
        raise ValueError("font_size must be positive")
    effective = page_width_fallback if width == 0 else width
    return (float(effective) - 2 * float(cell_margin)) * FONT_UNITS_PER_EM / float(font_size)


def estimate_line_count(
    width: float,
    text: str,
    metrics: Mapping[str, float],
    font_size: float,
    cell_margin: float,
    page_width_fallback: float,
) -> int:
    """Count the lines ``text`` wraps into inside a cell of ``width``.

    Greedy single pass: explicit newlines always break, otherwise a line
    breaks after its last space once it overflows, or mid-word when the line
    has no space. A single character wider than the cell still takes one
    line of its own. One trailing newline does not add a blank line.
    """
    wmax = wrap_budget(
        width,
        font_size=font_size,
        cell_margin=cell_margin,
        page_width_fallback=page_width_fallback,
    )
    s = str(text).replace("\r", "")
    nb = len(s)
    if nb > 0 and s[nb - 1] == "\n":
        nb -= 1

    sep = -1
    i = 0
    j = 0
    line_width = 0.0
    nl = 1
    while i < nb:
        c = s[i]
        if c == "\n":
            i += 1
            sep = -1
            j = i
            line_width = 0.0
            nl += 1
            continue
        if c == " ":
            sep = i
        try:
            line_width += metrics[c]
        except KeyError:
            raise UndefinedCharacterWidthError(c) from None
        if line_width > wmax:
            if sep == -1:
                if i == j:
                    i += 1
            else:
                i = sep + 1
            sep = -1
            j = i
            line_width = 0.0
            if i < nb:
                nl += 1
        else:
            i += 1
    return nl


__all__ = [
    "FONT_UNITS_PER_EM",
    "estimate_line_count",
    "wrap_budget",
]
