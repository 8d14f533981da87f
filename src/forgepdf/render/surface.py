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

from collections.abc import Iterator, Mapping
from typing import Protocol

from fpdf import FPDF
from fpdf.errors import FPDFUnicodeEncodingException

from ..errors import NoFontSelectedError
from .wrap import FONT_UNITS_PER_EM


class DrawingSurface(Protocol):
    """What the row renderer needs from a PDF document."""

    @property
    def page_break_trigger(self) -> float: ...

    @property
    def cell_margin(self) -> float: ...

    @property
    def font_size(self) -> float: ...

    def get_x(self) -> float: ...

    def get_y(self) -> float: ...

    def remaining_width(self, x: float | None = None) -> float: ...

    def font_metrics(self) -> Mapping[str, float]: ...

    def rect(self, x: float, y: float, w: float, h: float) -> None: ...

    def multi_cell(self, w: float, h: float, text: str, *, align: str) -> None: ...

    def set_xy(self, x: float, y: float) -> None: ...

    def ln(self, h: float) -> None: ...

    def add_page(self) -> None: ...


class FpdfFontMetrics(Mapping[str, float]):
    """Glyph widths of the active fpdf2 font, measured on demand.

    Characters the font cannot encode behave like missing keys. Iteration
    and ``len()`` only cover glyphs measured so far, but the mapping is
    always truthy.
    """

    def __init__(self, pdf: FPDF) -> None:
        self._pdf = pdf
        self._font_size = float(pdf.font_size)
        self._widths: dict[str, float] = {}

    def __getitem__(self, char: str) -> float:
        cached = self._widths.get(char)
        if cached is not None:
            return cached
        if len(char) != 1:
            raise KeyError(char)
        try:
            width = self._pdf.get_string_width(char)
        except FPDFUnicodeEncodingException:
            raise KeyError(char) from None
        units = width * FONT_UNITS_PER_EM / self._font_size if self._font_size else 0.0
        self._widths[char] = units
        return units

    def __iter__(self) -> Iterator[str]:
        return iter(self._widths)

    def __len__(self) -> int:
        return len(self._widths)

    def __bool__(self) -> bool:
        return True


class FpdfSurface:
    def __init__(self, pdf: FPDF) -> None:
        self.pdf = pdf

    @property
    def page_break_trigger(self) -> float:
        return float(self.pdf.page_break_trigger)

    @property
    def cell_margin(self) -> float:
        return float(self.pdf.c_margin)

    @property
    def font_size(self) -> float:
        return float(self.pdf.font_size)

    def get_x(self) -> float:
        return float(self.pdf.get_x())

    def get_y(self) -> float:
        return float(self.pdf.get_y())

    def remaining_width(self, x: float | None = None) -> float:
        start = self.get_x() if x is None else float(x)
        return float(self.pdf.w) - float(self.pdf.r_margin) - start

    def font_metrics(self) -> Mapping[str, float]:
        if getattr(self.pdf, "current_font", None) is None or not self.pdf.font_family:
            raise NoFontSelectedError()
        return FpdfFontMetrics(self.pdf)

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        self.pdf.rect(x, y, w, h)

    def multi_cell(self, w: float, h: float, text: str, *, align: str) -> None:
        self.pdf.multi_cell(w, h, text, border=0, align=align)

    def set_xy(self, x: float, y: float) -> None:
        self.pdf.set_xy(x, y)

    def ln(self, h: float) -> None:
        self.pdf.ln(h)

    def add_page(self) -> None:
        orientation = getattr(self.pdf, "cur_orientation", "") or ""
        self.pdf.add_page(orientation=orientation)


__all__ = [
    "DrawingSurface",
    "FpdfFontMetrics",
    "FpdfSurface",
]
