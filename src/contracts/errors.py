from __future__ import annotations

from typing import Any


class NameFillError(Exception):
    """
    Base error. `code` is a stable identifier suitable for audit reports.
    """

    default_code = "NAME_FILL_ERROR"

    def __init__(self, message: str, *, code: str | None = None, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code or self.default_code
        self.message = message
        self.detail = detail

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "detail": self.detail}


class RasterizationError(NameFillError):
    """Page could not be rendered to an image. Fatal to the OCR attempt."""

    default_code = "RASTERIZE_FAILED"


class OCRError(NameFillError):
    """OCR backend failed. Recoverable: callers treat it as "no match"."""

    default_code = "OCR_FAILED"


class MeasurementError(NameFillError):
    default_code = "MEASURE_FAILED"


class NoInsertionPointError(NameFillError):
    """Page geometry could not be obtained, so no position can be computed."""

    default_code = "NO_INSERTION_POINT"
