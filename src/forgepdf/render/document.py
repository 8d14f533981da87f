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

from pathlib import Path
from typing import IO, Any, Sequence, cast

from fpdf import FPDF

from ..config.loader import DocumentConfig
from ..errors import OutputFileError
from .images import ImageInfo, ImageRegistry, ImageType, require_supported
from .surface import FpdfSurface
from .table import Alignment, RowRenderer
from .text import CORE_FONT_ENCODING, convert_text, normalize_orientation, page_format


class ForgeDocument:
    """A PDF document with table rows, cached images and file output.

    Drawing, fonts and serialization are handled by the wrapped ``FPDF``
    instance, available as ``pdf``.
    """

    def __init__(self, config: DocumentConfig | None = None, *, pdf: FPDF | None = None) -> None:
        self.config = config or DocumentConfig()
        if pdf is None:
            page = self.config.page
            pdf = FPDF(
                orientation=page.orientation,
                unit=page.unit,
                format=cast(Any, page_format(page)),
            )
            pdf.core_fonts_encoding = CORE_FONT_ENCODING
        self.pdf = pdf
        self.surface = FpdfSurface(pdf)
        self.table = RowRenderer(self.surface, line_height=self.config.table.line_height)
        self.images = ImageRegistry()
        self._stream: IO[bytes] | None = None
        self._stream_path: Path | None = None
        self._created = False
        self._content: bytes | None = None

    def __enter__(self) -> ForgeDocument:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()
            return
        # A failed build leaves an existing file as it was and removes a new one.
        stream = self._stream
        self._stream = None
        if stream is not None:
            stream.close()
            if self._created and self._stream_path is not None:
                self._stream_path.unlink(missing_ok=True)

    @property
    def closed(self) -> bool:
        return self._content is not None

    def open(self, path: str | Path | None = None) -> None:
        target = Path(path or self.config.output.path)
        created = not target.exists()
        try:
            # Appending checks the path is writable without truncating it yet.
            self._stream = target.open("ab")
        except OSError as exc:
            raise OutputFileError(f"unable to create output file: {target}") from exc
        self._stream_path = target
        self._created = created

    def add_page(self, orientation: str = "") -> None:
        if orientation:
            self.pdf.add_page(orientation=normalize_orientation(orientation))
        else:
            self.pdf.add_page()

    def set_font(
        self,
        family: str | None = None,
        style: str | None = None,
        size: float | None = None,
    ) -> None:
        defaults = self.config.font
        self.pdf.set_font(
            family or defaults.family,
            style=defaults.style if style is None else style,
            size=defaults.size if size is None else size,
        )

    def set_widths(self, widths: Sequence[float]) -> None:
        self.table.set_widths(widths)

    def set_aligns(self, aligns: Sequence[str | Alignment]) -> None:
        self.table.set_aligns(aligns)

    def row(self, cells: Sequence[str]) -> float:
        return self.table.render_row(cells)

    def image(
        self,
        path: str | Path,
        x: float | None = None,
        y: float | None = None,
        w: float = 0,
        h: float = 0,
        type: str = "",
        link: str = "",
    ) -> ImageInfo:
        info = self.images.register(path)
        if type:
            # An explicit type overrides what the header said.
            require_supported(
                ImageInfo(info.width, info.height, ImageType.from_format(type), info.index),
                path=path,
            )
        else:
            require_supported(info, path=path)
        self.pdf.image(str(path), x=x, y=y, w=w, h=h, link=link)
        return info

    def convert_text(self, text: str | None, *, errors: str = "strict") -> str | None:
        return convert_text(text, errors=errors)

    def close(self) -> bytes:
        if self._content is not None:
            return self._content
        if self.pdf.page == 0:
            self.pdf.add_page()
        content = bytes(self.pdf.output())
        self._content = content
        stream = self._stream
        if stream is not None:
            self._stream = None
            try:
                stream.seek(0)
                stream.truncate()
                stream.write(content)
            except OSError as exc:
                raise OutputFileError(f"unable to write output file: {self._stream_path}") from exc
            finally:
                stream.close()
        return content

    def output(self, path: str | Path | None = None) -> bytes:
        content = self.close()
        if path is not None:
            target = Path(path)
            try:
                target.write_bytes(content)
            except OSError as exc:
                raise OutputFileError(f"unable to create output file: {target}") from exc
        return content


__all__ = ["ForgeDocument"]
