from __future__ import annotations

import unittest

from contracts.locate import FieldRegion, Strategy
from contracts.ocr import BBox, OcrWord
from locate.config import LocatorConfig
from locate.resolver import has_known_name_field, insertion_point_for, resolve_position

PAGE = (612.0, 792.0)
IMAGE = (1700, 2200)


def _w(text: str, x0: int, y0: int, x1: int, y1: int, conf: float = 90.0) -> OcrWord:
    return OcrWord(text=text, bbox=BBox(x0=x0, y0=y0, x1=x1, y1=y1), confidence=conf)


class TestResolvePosition(unittest.TestCase):
    def test_empty_words_without_known_fields_uses_common_position(self) -> None:
        res = resolve_position([], image_size=IMAGE, page_size=PAGE)
        self.assertEqual(res.region.strategy, Strategy.COMMON_POSITION)
        self.assertAlmostEqual(res.region.x, 612.0 * 0.25)
        self.assertAlmostEqual(res.region.y, 792.0 * 0.65)
        self.assertEqual(res.region.confidence, 0.6)
        # Fallback regions are used as-is for the insertion point.
        self.assertEqual((res.point.x, res.point.y), (res.region.x, res.region.y))

    def test_known_name_field_beats_common_position(self) -> None:
        res = resolve_position(
            [_w("Signature", 10, 10, 90, 30)],
            image_size=IMAGE,
            page_size=PAGE,
            known_field_names=["Date", "applicant_FullAddress"],
        )
        self.assertEqual(res.region.strategy, Strategy.NAME_FIELD_DETECTED)
        self.assertAlmostEqual(res.region.x, 612.0 * 0.30)
        self.assertAlmostEqual(res.region.y, 792.0 * 0.75)
        self.assertEqual(res.region.confidence, 0.8)

    def test_ocr_unavailable_falls_back(self) -> None:
        res = resolve_position(None, image_size=None, page_size=PAGE, known_field_names=["Name1"])
        self.assertEqual(res.region.strategy, Strategy.NAME_FIELD_DETECTED)

    def test_detected_label_offsets_insertion_point(self) -> None:
        words = [
            _w("Name:", 100, 190, 180, 210, conf=92),
            _w("______", 185, 190, 400, 210, conf=80),
        ]
        res = resolve_position(words, image_size=IMAGE, page_size=PAGE, known_field_names=["name"])
        self.assertEqual(res.region.strategy, Strategy.OCR_DETECTED)
        self.assertAlmostEqual(res.point.x, res.region.x + res.region.width + 6.0)
        # Region height (7.2) is below the font size, so no vertical offset.
        self.assertAlmostEqual(res.point.y, res.region.y)

    def test_resolution_is_deterministic(self) -> None:
        words = [_w("Surname", 100, 190, 180, 210, conf=50)]
        self.assertEqual(
            resolve_position(words, image_size=IMAGE, page_size=PAGE),
            resolve_position(words, image_size=IMAGE, page_size=PAGE),
        )

    def test_invalid_config_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            resolve_position([], image_size=IMAGE, page_size=PAGE, config=LocatorConfig(common_x_frac=1.5))


class TestInsertionPoint(unittest.TestCase):
    def test_tall_region_centers_text_vertically(self) -> None:
        region = FieldRegion(x=50, y=100, width=200, height=40, confidence=90, strategy=Strategy.OCR_DETECTED)
        pt = insertion_point_for(region, font_size=12, gap=6)
        self.assertEqual(pt.x, 256)
        self.assertEqual(pt.y, 114)


class TestKnownNameField(unittest.TestCase):
    def test_matching(self) -> None:
        self.assertTrue(has_known_name_field(["FULL_ADDRESS"]))
        self.assertTrue(has_known_name_field(["lastName"]))
        self.assertFalse(has_known_name_field(["Date", "Signature"]))
        self.assertFalse(has_known_name_field(None))
        self.assertFalse(has_known_name_field([]))


if __name__ == "__main__":
    unittest.main()
