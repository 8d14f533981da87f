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

import tempfile
import unittest
from pathlib import Path
from unittest import mock

import PIL.Image as pil_image

from forgepdf.errors import ImageFileError, UnsupportedImageTypeError
from forgepdf.render import images as images_module
from forgepdf.render.images import (
    ImageInfo,
    ImageRegistry,
    ImageType,
    probe_image,
    require_supported,
)


def _write_image(path: Path, size=(4, 3)) -> Path:
    pil_image.new("RGB", size, "white").save(path)
    return path


class TestImageType(unittest.TestCase):
    def test_from_format(self) -> None:
        self.assertIs(ImageType.from_format("JPEG"), ImageType.JPEG)
        self.assertIs(ImageType.from_format("jpg"), ImageType.JPEG)
        self.assertIs(ImageType.from_format("png"), ImageType.PNG)
        self.assertIs(ImageType.from_format("GIF"), ImageType.GIF)
        self.assertIs(ImageType.from_format("BMP"), ImageType.OTHER)
        self.assertIs(ImageType.from_format(None), ImageType.OTHER)

    def test_codes(self) -> None:
        self.assertEqual((ImageType.GIF, ImageType.JPEG, ImageType.PNG), (1, 2, 3))


class TestProbeImage(unittest.TestCase):
    def test_reads_dimensions_and_type(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            cases = (("a.png", ImageType.PNG), ("b.jpg", ImageType.JPEG), ("c.gif", ImageType.GIF))
            for name, expected in cases:
                with self.subTest(name=name):
                    path = _write_image(Path(tmp) / name, size=(7, 5))
                    self.assertEqual(probe_image(path), (7, 5, expected))

    def test_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "missing.png"
            with self.assertRaises(ImageFileError) as ctx:
                probe_image(path)
        self.assertEqual(ctx.exception.path, path)
        self.assertIn("missing or incorrect image file", str(ctx.exception))

    def test_not_an_image(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "fake.png"
            path.write_bytes(b"not an image")
            with self.assertRaises(ImageFileError):
                probe_image(path)


class TestImageRegistry(unittest.TestCase):
    def test_register_assigns_indexes_in_order(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            first = _write_image(Path(tmp) / "first.png")
            second = _write_image(Path(tmp) / "second.png", size=(2, 2))
            registry = ImageRegistry()
            info_first = registry.register(first)
            info_second = registry.register(second)

        self.assertEqual(info_first, ImageInfo(width=4, height=3, type=ImageType.PNG, index=1))
        self.assertEqual(info_second.index, 2)
        self.assertEqual(len(registry), 2)
        self.assertIn(first, registry)
        self.assertIs(registry.get(str(second)), info_second)

    def test_each_path_probed_once(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = _write_image(Path(tmp) / "logo.png")
            registry = ImageRegistry()
            with mock.patch.object(
                images_module, "probe_image", wraps=images_module.probe_image
            ) as probe:
                registry.register(path)
                registry.register(path)
                registry.register(str(path))
        self.assertEqual(probe.call_count, 1)

    def test_failed_probe_is_not_cached(self) -> None:
        registry = ImageRegistry()
        with self.assertRaises(ImageFileError):
            registry.register("/nonexistent/image.png")
        self.assertEqual(len(registry), 0)


class TestRequireSupported(unittest.TestCase):
    def test_supported_types_pass(self) -> None:
        for kind in (ImageType.GIF, ImageType.JPEG, ImageType.PNG):
            require_supported(ImageInfo(1, 1, kind, 1), path="x")

    def test_other_type_rejected(self) -> None:
        with self.assertRaises(UnsupportedImageTypeError) as ctx:
            require_supported(ImageInfo(1, 1, ImageType.OTHER, 1), path="scan.bmp")
        self.assertEqual(ctx.exception.path, Path("scan.bmp"))


if __name__ == "__main__":
    unittest.main()
