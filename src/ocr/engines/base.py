from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from ..contracts import OcrConfig, OcrResult


class WordRecognizer(ABC):
    """
    Interface for OCR perception engines.

    IMPORTANT:
    - Engines must return literal text hypotheses, bounding boxes, confidences.
    - Engines must NOT apply semantic correction/guessing/normalization.
    - Engines report backend failures in the result instead of raising.
    """

    @abstractmethod
    def run_on_image_file(self, *, config: OcrConfig, image_file: Path) -> OcrResult:
        raise NotImplementedError
