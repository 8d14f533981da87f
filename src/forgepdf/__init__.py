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

"""Table rows, cached images and file output on top of fpdf2."""

from .errors import (
    ForgePdfError,
    ImageFileError,
    NoFontSelectedError,
    OutputFileError,
    TextEncodingError,
    UndefinedCharacterWidthError,
    UnsupportedImageTypeError,
)
from .render import (
    DEFAULT_LINE_HEIGHT,
    Alignment,
    ForgeDocument,
    RowRenderer,
    estimate_line_count,
)

__all__ = [
    "Alignment",
    "DEFAULT_LINE_HEIGHT",
    "ForgeDocument",
    "ForgePdfError",
    "ImageFileError",
    "NoFontSelectedError",
    "OutputFileError",
    "RowRenderer",
    "TextEncodingError",
    "UndefinedCharacterWidthError",
    "UnsupportedImageTypeError",
    "estimate_line_count",
]
