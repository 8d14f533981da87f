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

import unittest

from fpdf import FPDF

from forgepdf.errors import NoFontSelectedError, UndefinedCharacterWidthError
from forgepdf.render.surface import FpdfFontMetrics, FpdfSurface
from forgepdf.render.table import RowRenderer


def _pdf(*, font: bool = True) -> FPDF:
    pdf = FPDF(unit="mm", format="A4")
    pdf.add_page()
    if font:
        pdf.set_font("Helvetica", size=10)
    return pdf


class TestFpdfFontMetrics(unittest.TestCase):
    def test_widths_in_font_units(self) -> None:
        metrics = FpdfFontMetrics(_pdf())
        # Helvetica AFM widths
        self.assertAlmostEqual(metrics["a"], 556, places=3)
        self.assertAlmostEqual(metrics[" "], 278, places=3)
        self.assertAlmostEqual(metrics["W"], 944, places=3)

    def test_widths_are_cached(self) -> None:
        metrics = FpdfFontMetrics(_pdf())
        metrics["a"]
        metrics["b"]
        metrics["a"]
        self.assertEqual(sorted(metrics), ["a", "b"])
        self.assertEqual(len(metrics), 2)

    def test_fresh_metrics_are_truthy(self) -> None:
        metrics = FpdfFontMetrics(_pdf())
        self.assertEqual(len(metrics), 0)
        self.assertTrue(metrics)

    def test_unencodable_character_is_missing(self) -> None:
        metrics = FpdfFontMetrics(_pdf())
        with self.assertRaises(KeyError):
            metrics["漢"]
        self.assertNotIn("漢", metrics)


class TestFpdfSurface(unittest.TestCase):
    def test_exposes_cursor_and_page_state(self) -> None:
        pdf = _pdf()
        surface = FpdfSurface(pdf)
        self.assertAlmostEqual(surface.get_x(), pdf.l_margin)
        self.assertAlmostEqual(surface.get_y(), pdf.t_margin)
        self.assertAlmostEqual(surface.page_break_trigger, pdf.page_break_trigger)
        self.assertAlmostEqual(surface.cell_margin, pdf.c_margin)
        self.assertAlmostEqual(surface.font_size, pdf.font_size)
        self.assertAlmostEqual(surface.remaining_width(), pdf.w - pdf.r_margin - pdf.l_margin)
        self.assertAlmostEqual(surface.remaining_width(100.0), pdf.w - pdf.r_margin - 100.0)

    def test_no_font_selected(self) -> None:
        surface = FpdfSurface(_pdf(font=False))
        with self.assertRaises(NoFontSelectedError):
            surface.font_metrics()

    def test_add_page_keeps_orientation(self) -> None:
        pdf = FPDF(orientation="L", unit="mm", format="A4")
        pdf.add_page()
        surface = FpdfSurface(pdf)
        surface.add_page()
        self.assertEqual(pdf.page, 2)
        self.assertGreater(pdf.w, pdf.h)


class TestRowRendererOnFpdf(unittest.TestCase):
    def test_row_advances_cursor_by_row_height(self) -> None:
        pdf = _pdf()
        renderer = RowRenderer(FpdfSurface(pdf))
        renderer.set_widths([40, 60, 40])
        start_y = pdf.get_y()
        height = renderer.render_row(["short", "line one\nline two\nline three", "a\nb"])

        self.assertEqual(height, 15.0)
        self.assertAlmostEqual(pdf.get_y(), start_y + 15.0)
        self.assertAlmostEqual(pdf.get_x(), pdf.l_margin)

    def test_long_word_wraps(self) -> None:
        pdf = _pdf()
        renderer = RowRenderer(FpdfSurface(pdf))
        lines = renderer.line_count(20, "W" * 30)
        self.assertGreater(lines, 1)

    def test_row_moves_to_new_page(self) -> None:
        pdf = _pdf()
        renderer = RowRenderer(FpdfSurface(pdf))
        renderer.set_widths([50, 50])
        pdf.set_y(pdf.page_break_trigger - 3)
        renderer.render_row(["a", "b"])

        self.assertEqual(pdf.page, 2)
        self.assertAlmostEqual(pdf.get_y(), pdf.t_margin + 5.0)

    def test_undefined_character(self) -> None:
        pdf = _pdf()
        renderer = RowRenderer(FpdfSurface(pdf))
        renderer.set_widths([50])
        with self.assertRaises(UndefinedCharacterWidthError):
            renderer.render_row(["漢字"])


if __name__ == "__main__":
    unittest.main()
