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

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Literal

from .installer import resolve_config_path

DEFAULT_PAGE_SIZE = "A4"
DEFAULT_FONT_FAMILY = "Helvetica"
DEFAULT_FONT_SIZE = 10.0
DEFAULT_TABLE_LINE_HEIGHT = 5.0
DEFAULT_OUTPUT_PATH = "doc.pdf"

_UNITS = ("pt", "mm", "cm", "in")
_FONT_STYLES = frozenset("BIU")
_ALIGNS = {"L": "L", "LEFT": "L", "C": "C", "CENTER": "C", "R": "R", "RIGHT": "R"}
_ORIENTATIONS = {"P": "P", "PORTRAIT": "P", "L": "L", "LANDSCAPE": "L"}


@dataclass(frozen=True)
class PageDefaults:
    size: str = DEFAULT_PAGE_SIZE
    orientation: Literal["P", "L"] = "P"
    unit: str = "mm"
    width: float | None = None
    height: float | None = None


@dataclass(frozen=True)
class FontDefaults:
    family: str = DEFAULT_FONT_FAMILY
    style: str = ""
    size: float = DEFAULT_FONT_SIZE


@dataclass(frozen=True)
class TableDefaults:
    line_height: float = DEFAULT_TABLE_LINE_HEIGHT
    align: Literal["L", "C", "R"] = "L"


@dataclass(frozen=True)
class OutputDefaults:
    path: str = DEFAULT_OUTPUT_PATH


@dataclass(frozen=True)
class DocumentConfig:
    page: PageDefaults = field(default_factory=PageDefaults)
    font: FontDefaults = field(default_factory=FontDefaults)
    table: TableDefaults = field(default_factory=TableDefaults)
    output: OutputDefaults = field(default_factory=OutputDefaults)
    source: Path | None = None


def load_config(path: str | Path | None = None) -> DocumentConfig:
    config_path = resolve_config_path(path)
    data = _load_toml(config_path)
    return replace(parse_config(data), source=config_path)


def parse_config(data: dict[str, object]) -> DocumentConfig:
    return DocumentConfig(
        page=_parse_page(_get_dict(data, "page")),
        font=_parse_font(_get_dict(data, "font")),
        table=_parse_table(_get_dict(data, "table")),
        output=_parse_output(_get_dict(data, "output")),
    )


def _parse_page(cfg: dict[str, object]) -> PageDefaults:
    size = _parse_optional_str(cfg.get("size"), field="page.size") or DEFAULT_PAGE_SIZE
    orientation = _parse_choice(
        cfg.get("orientation"), choices=_ORIENTATIONS, field="page.orientation", default="P"
    )
    unit = (_parse_optional_str(cfg.get("unit"), field="page.unit") or "mm").strip().lower()
    if unit not in _UNITS:
        raise ValueError(f"page.unit must be one of {', '.join(_UNITS)}")
    width = _parse_optional_positive_float(cfg.get("width"), field="page.width")
    height = _parse_optional_positive_float(cfg.get("height"), field="page.height")
    if (width is None) != (height is None):
        raise ValueError("page.width and page.height must be set together")
    return PageDefaults(
        size=size.strip(),
        orientation="P" if orientation == "P" else "L",
        unit=unit,
        width=width,
        height=height,
    )


def _parse_font(cfg: dict[str, object]) -> FontDefaults:
    family = _parse_optional_str(cfg.get("family"), field="font.family") or DEFAULT_FONT_FAMILY
    style = (_parse_optional_str(cfg.get("style"), field="font.style") or "").strip().upper()
    if not set(style) <= _FONT_STYLES:
        raise ValueError("font.style may only contain B, I and U")
    size = _parse_optional_positive_float(cfg.get("size"), field="font.size")
    return FontDefaults(
        family=family.strip(),
        style=style,
        size=DEFAULT_FONT_SIZE if size is None else size,
    )


def _parse_table(cfg: dict[str, object]) -> TableDefaults:
    line_height = _parse_optional_positive_float(cfg.get("line_height"), field="table.line_height")
    align = _parse_choice(cfg.get("align"), choices=_ALIGNS, field="table.align", default="L")
    return TableDefaults(
        line_height=DEFAULT_TABLE_LINE_HEIGHT if line_height is None else line_height,
        align="C" if align == "C" else "R" if align == "R" else "L",
    )


def _parse_output(cfg: dict[str, object]) -> OutputDefaults:
    path = _parse_optional_str(cfg.get("path"), field="output.path")
    return OutputDefaults(path=path or DEFAULT_OUTPUT_PATH)


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_optional_str(value: object, *, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    return value


def _parse_choice(
    value: object,
    *,
    choices: dict[str, str],
    field: str,
    default: str,
) -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    normalized = choices.get(value.strip().upper())
    if normalized is None:
        allowed = ", ".join(sorted(set(choices.values())))
        raise ValueError(f"{field} must be one of {allowed}")
    return normalized


def _parse_optional_positive_float(value: object, *, field: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"{field} must be a positive number")
    if isinstance(value, (int, float)):
        parsed = float(value)
    elif isinstance(value, str):
        try:
            parsed = float(value)
        except ValueError as exc:
            raise ValueError(f"{field} must be a positive number") from exc
    else:
        raise ValueError(f"{field} must be a positive number")
    if parsed <= 0:
        raise ValueError(f"{field} must be a positive number")
    return parsed
