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

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

import PIL.Image as pil_image

from ..errors import ImageFileError, UnsupportedImageTypeError


class ImageType(IntEnum):
    OTHER = 0
    GIF = 1
    JPEG = 2
    PNG = 3

    @classmethod
    def from_format(cls, name: str | None) -> ImageType:
        normalized = (name or "").strip().upper()
        if normalized in {"JPG", "JPEG"}:
            return cls.JPEG
        if normalized == "PNG":
            return cls.PNG
        if normalized == "GIF":
            return cls.GIF
        return cls.OTHER


SUPPORTED_IMAGE_TYPES = frozenset({ImageType.GIF, ImageType.JPEG, ImageType.PNG})


@dataclass(frozen=True)
class ImageInfo:
    width: int
    height: int
    type: ImageType
    index: int


def probe_image(path: str | Path) -> tuple[int, int, ImageType]:
    """Read pixel dimensions and type from the image header."""
    try:
        with pil_image.open(path) as image:
            width, height = image.size
            kind = ImageType.from_format(image.format)
    except OSError as exc:
        raise ImageFileError(f"missing or incorrect image file: {path}", path=path) from exc
    return int(width), int(height), kind


def require_supported(info: ImageInfo, *, path: str | Path) -> None:
    if info.type not in SUPPORTED_IMAGE_TYPES:
        raise UnsupportedImageTypeError(f"unsupported image type: {path}", path=path)


class ImageRegistry:
    """Caches image metadata per path; each file is probed once."""

    def __init__(self) -> None:
        self._images: dict[str, ImageInfo] = {}

    def __contains__(self, path: object) -> bool:
        return str(path) in self._images

    def __len__(self) -> int:
        return len(self._images)

    def get(self, path: str | Path) -> ImageInfo | None:
        return self._images.get(str(path))

    def register(self, path: str | Path) -> ImageInfo:
        key = str(path)
        info = self._images.get(key)
        if info is not None:
            return info
        width, height, kind = probe_image(path)
        info = ImageInfo(width=width, height=height, type=kind, index=len(self._images) + 1)
        self._images[key] = info
        return info


__all__ = [
    "ImageInfo",
    "ImageRegistry",
    "ImageType",
    "SUPPORTED_IMAGE_TYPES",
    "probe_image",
    "require_supported",
]
