"""
Name fill orchestration.

- AcroForm documents: fill the first text field whose name mentions "name".
- Flattened/scanned pages: render -> OCR -> locate label -> fit font -> draw.
- Any evidence-gathering failure degrades to a fixed heuristic position.
"""

from .config import FillConfig
from .contracts import FillMethod, FillOutcome, FillReport, LocateResult
from .module import fill_name, locate_and_fit, locate_without_ocr

__all__ = [
    "FillConfig",
    "FillMethod",
    "FillOutcome",
    "FillReport",
    "LocateResult",
    "fill_name",
    "locate_and_fit",
    "locate_without_ocr",
]
