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

from typing import Literal

from ..config.loader import PageDefaults
from ..errors import TextEncodingError

# Core PDF fonts are encoded in windows-1252.
CORE_FONT_ENCODING = "cp1252"

_ORIENTATIONS = {
    "P": "P",
    "PORTRAIT": "P",
    "L": "L",
    "LANDSCAPE": "L",
}


def page_format(page_cfg: PageDefaults) -> str | tuple[float, float]:
    if page_cfg.width and page_cfg.height:
        return (float(page_cfg.width), float(page_cfg.height))
    return page_cfg.size


def normalize_orientation(value: str) -> Literal["P", "L"]:
    normalized = _ORIENTATIONS.get(str(value).strip().upper())
    if normalized is None:
        raise ValueError(f"orientation must be P or L (got {value!r})")
    return "P" if normalized == "P" else "L"


def convert_text(text: str | None, *, errors: str = "strict") -> str | None:
    """Return ``text`` restricted to what the core fonts can show.

    Empty input gives ``None``. With ``errors="replace"`` characters outside
    windows-1252 become ``?``.
    """
    if not text:
        return None
    try:
        return text.encode(CORE_FONT_ENCODING, errors=errors).decode(CORE_FONT_ENCODING)
    except UnicodeEncodeError as exc:
        bad = text[exc.start : exc.end]
        raise TextEncodingError(f"text cannot be encoded as windows-1252: {bad!r}") from exc


__all__ = [
    "CORE_FONT_ENCODING",
    "convert_text",
    "normalize_orientation",
    "page_format",
]
