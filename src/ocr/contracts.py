from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from contracts.ocr import OcrWord


class OcrEngineName(str, Enum):
    """
    OCR backends supported by this module.

    Note: The OCR module is *perception only*; the backend must not perform
    post-correction / semantic filtering within this module.
    """

    TESSERACT_CLI = "tesseract_cli"


@dataclass(frozen=True, slots=True)
class OcrFailure:
    code: str
    message: str
    detail: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class OcrResult:
    """
    Word-level OCR output for one page image.

    On failure, `ok` is False and `words` is empty. No content is
    fabricated to "fill in" missing OCR results.
    """

    ok: bool
    engine: OcrEngineName
    words: list[OcrWord]
    errors: list[OcrFailure]
    meta: dict[str, Any]


@dataclass(frozen=True, slots=True)
class OcrConfig:
    """
    OCR module configuration.

    `timeout_s` bounds the whole backend call; a timeout is reported as a
    failure and callers fall through to heuristic positioning.
    """

    engine: OcrEngineName = OcrEngineName.TESSERACT_CLI
    confidence_floor: float = 0.0  # 0..100, engine-native scale
    language: str = "eng"  # engine hint only; not a semantic correction.
    psm: int | None = None  # Tesseract page segmentation mode; if None, use default.
    timeout_s: float = 60.0

    def __post_init__(self) -> None:
        if self.confidence_floor < 0.0 or self.confidence_floor > 100.0:
            raise ValueError("confidence_floor must be within [0.0, 100.0]")
        if self.timeout_s <= 0:
            raise ValueError("timeout_s must be > 0")
