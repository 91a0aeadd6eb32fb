from __future__ import annotations

from abc import ABC, abstractmethod

from contracts.errors import MeasurementError


class TextMeasurer(ABC):
    """Rendered text width in page units."""

    @abstractmethod
    def measure(self, text: str, *, fontname: str, font_size: float) -> float:
        raise NotImplementedError


class PymupdfTextMeasurer(TextMeasurer):
    """Width from PyMuPDF's base-14 font metrics."""

    def measure(self, text: str, *, fontname: str, font_size: float) -> float:
        try:
            import fitz  # PyMuPDF

            return float(fitz.get_text_length(text, fontname=fontname, fontsize=font_size))
        except Exception as e:
            raise MeasurementError(
                "Text width measurement failed",
                detail={"fontname": fontname, "font_size": font_size, "error": repr(e)},
            ) from e
