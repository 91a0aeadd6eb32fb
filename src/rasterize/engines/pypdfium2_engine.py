from __future__ import annotations

import logging
from pathlib import Path

from contracts.errors import RasterizationError

from ..contracts import ColorMode, PageSize, RenderedPage
from .base import PdfRasterEngine

logger = logging.getLogger(__name__)


class Pypdfium2Engine(PdfRasterEngine):
    def backend_id(self) -> str:
        return "pypdfium2"

    def _require_pdfium(self):
        try:
            import pypdfium2 as pdfium  # type: ignore

            return pdfium
        except ImportError as e:
            raise RasterizationError(
                "Missing dependency: pypdfium2 is required for page rendering.",
                code="RASTERIZE_BACKEND_NOT_INSTALLED",
            ) from e

    def _open(self, pdfium, pdf_bytes: bytes):
        try:
            return pdfium.PdfDocument(pdf_bytes)
        except Exception as e:
            raise RasterizationError(
                "Failed to open PDF",
                code="RASTERIZE_OPEN_FAILED",
                detail={"error": repr(e)},
            ) from e

    @staticmethod
    def _check_index(page_index: int, page_count: int) -> None:
        if page_index < 0 or page_index >= page_count:
            raise RasterizationError(
                f"Page out of range: {page_index} (0..{page_count - 1})",
                code="RASTERIZE_PAGE_OUT_OF_RANGE",
                detail={"page_index": page_index, "page_count": page_count},
            )

    def get_page_size(self, *, pdf_bytes: bytes, page_index: int) -> PageSize:
        pdfium = self._require_pdfium()
        doc = self._open(pdfium, pdf_bytes)
        try:
            self._check_index(page_index, len(doc))
            width, height = doc[page_index].get_size()
            return PageSize(width=float(width), height=float(height))
        finally:
            doc.close()

    def render_page(
        self,
        *,
        pdf_bytes: bytes,
        page_index: int,
        out_dir: Path,
        dpi: int,
        color_mode: ColorMode,
    ) -> RenderedPage:
        pdfium = self._require_pdfium()
        doc = self._open(pdfium, pdf_bytes)
        try:
            self._check_index(page_index, len(doc))
            page = doc[page_index]
            width, height = page.get_size()

            scale = dpi / 72.0  # PDF points are 1/72 inch
            try:
                bitmap = page.render(scale=scale)
                pil_img = bitmap.to_pil()
            except Exception as e:
                raise RasterizationError(
                    "PDF rendering failed",
                    code="RASTERIZE_RENDER_FAILED",
                    detail={"page_index": page_index, "error": repr(e)},
                ) from e

            if color_mode == ColorMode.GRAY:
                pil_img = pil_img.convert("L")
            else:
                pil_img = pil_img.convert("RGB")

            width_px, height_px = pil_img.size
            out_file = out_dir / f"page_{page_index + 1:03d}.png"
            pil_img.save(out_file, format="PNG")
            logger.debug("Rendered page %d at %d dpi -> %dx%d px", page_index, dpi, width_px, height_px)

            return RenderedPage(
                page_index=page_index,
                image_file=out_file,
                width_px=int(width_px),
                height_px=int(height_px),
                page_size=PageSize(width=float(width), height=float(height)),
            )
        finally:
            doc.close()
