from __future__ import annotations

import unittest
from pathlib import Path
from unittest.mock import patch

from contracts.errors import NoInsertionPointError, RasterizationError
from contracts.locate import Strategy
from contracts.ocr import BBox, OcrWord
from fill.module import locate_and_fit
from layout.measure import TextMeasurer
from ocr.contracts import OcrConfig, OcrEngineName, OcrFailure, OcrResult
from rasterize.contracts import ColorMode, PageSize, RenderedPage


class _FakeRasterEngine:
    def __init__(self, *, fail_size: bool = False, fail_render: bool = False) -> None:
        self.fail_size = fail_size
        self.fail_render = fail_render
        self.out_dirs: list[Path] = []

    def backend_id(self) -> str:
        return "fake_backend"

    def get_page_size(self, *, pdf_bytes: bytes, page_index: int) -> PageSize:
        if self.fail_size:
            raise RasterizationError("cannot open", code="RASTERIZE_OPEN_FAILED")
        return PageSize(width=612.0, height=792.0)

    def render_page(
        self, *, pdf_bytes: bytes, page_index: int, out_dir: Path, dpi: int, color_mode: ColorMode
    ) -> RenderedPage:
        self.out_dirs.append(out_dir)
        if self.fail_render:
            raise RasterizationError("render failed", code="RASTERIZE_RENDER_FAILED")
        f = out_dir / f"page_{page_index + 1:03d}.png"
        f.write_bytes(b"")  # materialize deterministically
        return RenderedPage(
            page_index=page_index,
            image_file=f,
            width_px=1700,
            height_px=2200,
            page_size=PageSize(width=612.0, height=792.0),
        )


class _FakeOcrEngine:
    def __init__(self, words: list[OcrWord] | None = None, *, fail: bool = False) -> None:
        self.words = words or []
        self.fail = fail
        self.seen_files: list[Path] = []

    def run_on_image_file(self, *, config: OcrConfig, image_file: Path) -> OcrResult:
        self.seen_files.append(image_file)
        if self.fail:
            return OcrResult(
                ok=False,
                engine=OcrEngineName.TESSERACT_CLI,
                words=[],
                errors=[OcrFailure(code="OCR_TIMEOUT", message="OCR backend timed out")],
                meta={},
            )
        return OcrResult(ok=True, engine=OcrEngineName.TESSERACT_CLI, words=self.words, errors=[], meta={})


class _FixedAdvanceMeasurer(TextMeasurer):
    def measure(self, text: str, *, fontname: str, font_size: float) -> float:
        return len(text) * 0.5 * font_size


_NAME_WORDS = [
    OcrWord(text="Name:", bbox=BBox(100, 190, 180, 210), confidence=92),
    OcrWord(text="______", bbox=BBox(185, 190, 400, 210), confidence=80),
]


class TestLocateAndFit(unittest.TestCase):
    def _run(self, raster: _FakeRasterEngine, ocr: _FakeOcrEngine, known=None):
        with patch("rasterize.module._get_engine", return_value=raster), patch(
            "ocr.module._get_engine", return_value=ocr
        ):
            return locate_and_fit(b"%PDF-fake", 0, "Jane Doe", known, measurer=_FixedAdvanceMeasurer())

    def test_detected_label_drives_instruction(self) -> None:
        raster, ocr = _FakeRasterEngine(), _FakeOcrEngine(_NAME_WORDS)
        r = self._run(raster, ocr)

        self.assertEqual(r.region.strategy, Strategy.OCR_DETECTED)
        self.assertEqual(r.region.confidence, 92)
        self.assertEqual(r.image_size, (1700, 2200))
        self.assertEqual(r.word_count, 2)
        self.assertEqual(r.instruction.font_size, 12)
        self.assertAlmostEqual(r.instruction.x, 400 * 612.0 / 1700 + 6.0)
        self.assertFalse(r.overflow)
        self.assertEqual(r.errors, [])

    def test_scratch_image_is_removed_after_run(self) -> None:
        raster, ocr = _FakeRasterEngine(), _FakeOcrEngine(_NAME_WORDS)
        self._run(raster, ocr)
        self.assertEqual(len(raster.out_dirs), 1)
        self.assertTrue(ocr.seen_files[0].name.endswith(".png"))
        self.assertFalse(raster.out_dirs[0].exists())

    def test_ocr_failure_degrades_to_fallback(self) -> None:
        raster, ocr = _FakeRasterEngine(), _FakeOcrEngine(fail=True)
        r = self._run(raster, ocr, known=["applicant_name"])
        self.assertEqual(r.region.strategy, Strategy.NAME_FIELD_DETECTED)
        self.assertEqual(r.errors[0]["code"], "OCR_TIMEOUT")
        self.assertEqual(r.word_count, 0)
        self.assertFalse(raster.out_dirs[0].exists())

    def test_no_words_uses_common_position(self) -> None:
        r = self._run(_FakeRasterEngine(), _FakeOcrEngine([]))
        self.assertEqual(r.region.strategy, Strategy.COMMON_POSITION)
        self.assertAlmostEqual(r.instruction.x, 612.0 * 0.25)
        self.assertAlmostEqual(r.instruction.y, 792.0 * 0.65)

    def test_render_failure_propagates_and_cleans_up(self) -> None:
        raster = _FakeRasterEngine(fail_render=True)
        with self.assertRaises(RasterizationError):
            self._run(raster, _FakeOcrEngine())
        self.assertFalse(raster.out_dirs[0].exists())

    def test_missing_page_geometry_raises_no_insertion_point(self) -> None:
        with self.assertRaises(NoInsertionPointError) as ctx:
            self._run(_FakeRasterEngine(fail_size=True), _FakeOcrEngine())
        self.assertEqual(ctx.exception.detail["cause"]["code"], "RASTERIZE_OPEN_FAILED")

    def test_result_serializes(self) -> None:
        d = self._run(_FakeRasterEngine(), _FakeOcrEngine(_NAME_WORDS)).to_dict()
        self.assertEqual(d["region"]["strategy"], "ocr_detected")
        self.assertEqual(d["page_size"], {"width": 612.0, "height": 792.0})
        self.assertEqual(d["instruction"]["text"], "Jane Doe")


if __name__ == "__main__":
    unittest.main()
