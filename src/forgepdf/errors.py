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


class ForgePdfError(RuntimeError):
    pass


class NoFontSelectedError(ForgePdfError):
    def __init__(self) -> None:
        super().__init__("no font has been set")


class UndefinedCharacterWidthError(ForgePdfError):
    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__(f"no width defined for character {character!r} in the current font")


class ImageFileError(ForgePdfError):
    def __init__(self, message: str, *, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(message)


class UnsupportedImageTypeError(ImageFileError):
    pass


class OutputFileError(ForgePdfError):
    pass


class TextEncodingError(ForgePdfError):
    pass


__all__ = [
    "ForgePdfError",
    "ImageFileError",
    "NoFontSelectedError",
    "OutputFileError",
    "TextEncodingError",
    "UndefinedCharacterWidthError",
    "UnsupportedImageTypeError",
]
