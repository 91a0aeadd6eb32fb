from __future__ import annotations

import unittest
from unittest.mock import patch

from contracts.errors import MeasurementError
from contracts.locate import InsertionPoint, Strategy
from layout.config import LayoutConfig
from layout.fitter import fit_text, instruction_overflows
from layout.measure import PymupdfTextMeasurer, TextMeasurer


class _FixedAdvanceMeasurer(TextMeasurer):
    """Every character is `advance * font_size` wide."""

    def __init__(self, advance: float = 0.5) -> None:
        self.advance = advance
        self.calls: list[float] = []

    def measure(self, text: str, *, fontname: str, font_size: float) -> float:
        self.calls.append(font_size)
        return len(text) * self.advance * font_size


def _pt(x: float, y: float = 500.0) -> InsertionPoint:
    return InsertionPoint(x=x, y=y, strategy=Strategy.COMMON_POSITION, confidence=0.6)


class TestFitText(unittest.TestCase):
    def test_text_that_fits_keeps_start_size(self) -> None:
        m = _FixedAdvanceMeasurer()
        ins = fit_text(_pt(100), "Jane Doe", page_width=612, measurer=m)
        self.assertEqual(ins.font_size, 12)
        self.assertEqual(ins.rendered_width, 8 * 0.5 * 12)
        self.assertEqual((ins.x, ins.y, ins.text), (100, 500.0, "Jane Doe"))
        self.assertEqual(m.calls, [12])

    def test_overflowing_text_is_shrunk_once(self) -> None:
        m = _FixedAdvanceMeasurer()
        text = "x" * 40  # 240 wide at 12
        ins = fit_text(_pt(400), text, page_width=612, measurer=m)
        # available = 612 - 400 - 20 = 192; floor(12 * 192 / 240) = 9
        self.assertEqual(ins.font_size, 9)
        self.assertEqual(ins.rendered_width, 40 * 0.5 * 9)
        self.assertEqual(m.calls, [12, 9])
        self.assertFalse(instruction_overflows(ins, page_width=612, right_margin=20))

    def test_size_never_drops_below_floor_and_overflow_is_accepted(self) -> None:
        m = _FixedAdvanceMeasurer()
        with self.assertLogs("layout.fitter", level="WARNING"):
            ins = fit_text(_pt(100), "x" * 500, page_width=612, measurer=m)
        self.assertEqual(ins.font_size, 8)
        self.assertTrue(instruction_overflows(ins, page_width=612, right_margin=20))

    def test_available_width_has_a_minimum(self) -> None:
        m = _FixedAdvanceMeasurer()
        # Past the margin: available is clamped to 30; floor(12 * 30 / 60) = 6 -> floor 8.
        ins = fit_text(_pt(600), "x" * 10, page_width=612, measurer=m)
        self.assertEqual(ins.font_size, 8)

    def test_never_grows(self) -> None:
        m = _FixedAdvanceMeasurer(advance=0.01)
        ins = fit_text(_pt(10), "short", page_width=612, measurer=m, config=LayoutConfig(start_font_size=10))
        self.assertEqual(ins.font_size, 10)

    def test_invalid_config(self) -> None:
        with self.assertRaises(ValueError):
            fit_text(_pt(10), "a", page_width=612, measurer=_FixedAdvanceMeasurer(), config=LayoutConfig(start_font_size=4))


class TestPymupdfTextMeasurer(unittest.TestCase):
    def test_width_scales_with_font_size(self) -> None:
        m = PymupdfTextMeasurer()
        w12 = m.measure("Jane Doe", fontname="helv", font_size=12)
        w24 = m.measure("Jane Doe", fontname="helv", font_size=24)
        self.assertGreater(w12, 0)
        self.assertAlmostEqual(w24, 2 * w12, places=3)

    def test_backend_failure_becomes_measurement_error(self) -> None:
        with patch("fitz.get_text_length", side_effect=RuntimeError("boom")):
            with self.assertRaises(MeasurementError):
                PymupdfTextMeasurer().measure("x", fontname="helv", font_size=12)


if __name__ == "__main__":
    unittest.main()
