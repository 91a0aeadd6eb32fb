"""
OCR stage (perception only).

- Input: one rendered page image
- Output: word text, absolute pixel bounding boxes, confidence scores
- Constraints: no correction, no merging, no inference; optional confidence floor
"""

from .contracts import OcrConfig, OcrEngineName, OcrFailure, OcrResult
from .module import recognize_words, run_ocr_on_image_file

__all__ = [
    "OcrConfig",
    "OcrEngineName",
    "OcrFailure",
    "OcrResult",
    "recognize_words",
    "run_ocr_on_image_file",
]
