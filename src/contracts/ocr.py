from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BBox:
    """
    Absolute pixel coordinates in image space:
    - (x0, y0) is top-left
    - (x1, y1) is bottom-right
    """

    x0: int
    y0: int
    x1: int
    y1: int

    def y_center(self) -> float:
        return (self.y0 + self.y1) / 2.0

    def union(self, other: "BBox") -> "BBox":
        return BBox(
            x0=min(self.x0, other.x0),
            y0=min(self.y0, other.y0),
            x1=max(self.x1, other.x1),
            y1=max(self.y1, other.y1),
        )


@dataclass(frozen=True, slots=True)
class OcrWord:
    """
    Single recognized word.

    `text` is exactly as recognized by the OCR engine (no correction).
    `confidence` is engine-native, 0..100.
    """

    text: str
    bbox: BBox
    confidence: float
