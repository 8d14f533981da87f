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

from .document import ForgeDocument
from .images import ImageInfo, ImageRegistry, ImageType
from .surface import DrawingSurface, FpdfFontMetrics, FpdfSurface
from .table import DEFAULT_LINE_HEIGHT, Alignment, RowRenderer, check_page_break
from .text import convert_text
from .wrap import estimate_line_count

__all__ = [
    "Alignment",
    "DEFAULT_LINE_HEIGHT",
    "DrawingSurface",
    "FpdfFontMetrics",
    "FpdfSurface",
    "ForgeDocument",
    "ImageInfo",
    "ImageRegistry",
    "ImageType",
    "RowRenderer",
    "check_page_break",
    "convert_text",
    "estimate_line_count",
]
