from __future__ import annotations

import logging
from pathlib import Path

from contracts.errors import OCRError
from contracts.ocr import OcrWord

from .contracts import OcrConfig, OcrEngineName, OcrResult
from .engines import TesseractCliEngine, WordRecognizer

logger = logging.getLogger(__name__)


def _get_engine(engine: OcrEngineName) -> WordRecognizer:
    if engine == OcrEngineName.TESSERACT_CLI:
        return TesseractCliEngine()
    raise ValueError(f"Unsupported OCR engine: {engine}")


def run_ocr_on_image_file(*, config: OcrConfig, image_file: Path) -> OcrResult:
    """
    Run OCR on an explicit image file path and return the full result record.
    """

    engine = _get_engine(config.engine)
    return engine.run_on_image_file(config=config, image_file=image_file)


def recognize_words(*, config: OcrConfig, image_file: Path) -> list[OcrWord]:
    """
    Word-level OCR for one page image.

    Returns an empty list when no text is detected; raises `OCRError`
    (carrying the first backend failure code) when the engine fails.
    """

    result = run_ocr_on_image_file(config=config, image_file=image_file)
    if not result.ok:
        first = result.errors[0] if result.errors else None
        raise OCRError(
            first.message if first else "OCR failed",
            code=first.code if first else None,
            detail=first.detail if first else None,
        )
    return result.words
