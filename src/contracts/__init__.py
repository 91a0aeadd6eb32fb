"""
Shared data contracts for the name-fill pipeline.

These models are the schema boundary between stages:
rasterize -> ocr -> grouping -> locate -> layout -> fill.

Pixel-space types (BBox, OcrWord, Line, LabelMatch) use a top-left origin.
Page-space types (FieldRegion, InsertionPoint, DrawInstruction) use a bottom-left origin.
"""

from .errors import (
    MeasurementError,
    NameFillError,
    NoInsertionPointError,
    OCRError,
    RasterizationError,
)
from .locate import DrawInstruction, FieldRegion, InsertionPoint, LabelMatch, Line, Strategy
from .ocr import BBox, OcrWord

__all__ = [
    "BBox",
    "OcrWord",
    "Line",
    "LabelMatch",
    "Strategy",
    "FieldRegion",
    "InsertionPoint",
    "DrawInstruction",
    "NameFillError",
    "RasterizationError",
    "OCRError",
    "MeasurementError",
    "NoInsertionPointError",
]
