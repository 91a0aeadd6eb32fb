from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from ..contracts import ColorMode, PageSize, RenderedPage


class PdfRasterEngine(ABC):
    """
    Page rendering engine abstraction.

    Engines must:
    - Render one PDF page to a raster image file inside `out_dir`
    - Be deterministic for a given input+params
    - Perform NO OCR or text extraction
    - Raise `contracts.RasterizationError` on any backend failure
    """

    @abstractmethod
    def backend_id(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def get_page_size(self, *, pdf_bytes: bytes, page_index: int) -> PageSize:
        raise NotImplementedError

    @abstractmethod
    def render_page(
        self,
        *,
        pdf_bytes: bytes,
        page_index: int,
        out_dir: Path,
        dpi: int,
        color_mode: ColorMode,
    ) -> RenderedPage:
        raise NotImplementedError
