from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .ocr import BBox, OcrWord


class Strategy(str, Enum):
    """
    Heuristic that produced a field region, carried through for diagnostics.
    """

    OCR_DETECTED = "ocr_detected"
    NAME_FIELD_DETECTED = "name_field_detected"
    COMMON_POSITION = "common_position"


@dataclass(frozen=True, slots=True)
class Line:
    key: int  # vertical bucket, pixels
    words: list[OcrWord]  # ordered left -> right by x0
    joined_text: str  # lower-cased, single-space joined


@dataclass(frozen=True, slots=True)
class LabelMatch:
    box: BBox  # pixel space, label words only
    confidence: float  # mean OCR confidence of the label words, 0..100
    label_text: str
    line_key: int


@dataclass(frozen=True, slots=True)
class FieldRegion:
    """
    Estimated blank area in page units (bottom-left origin).

    Fallback strategies synthesize a zero-size region at their insertion point.
    """

    x: float
    y: float
    width: float
    height: float
    confidence: float
    strategy: Strategy

    def to_dict(self) -> dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "confidence": self.confidence,
            "strategy": self.strategy.value,
        }


@dataclass(frozen=True, slots=True)
class InsertionPoint:
    x: float
    y: float
    strategy: Strategy
    confidence: float

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "strategy": self.strategy.value, "confidence": self.confidence}


@dataclass(frozen=True, slots=True)
class DrawInstruction:
    """
    Final text placement handed to the drawing backend.

    (x, y) is the text baseline origin in page units, bottom-left origin.
    """

    x: float
    y: float
    font_size: int
    text: str
    rendered_width: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "font_size": self.font_size,
            "text": self.text,
            "rendered_width": self.rendered_width,
        }
