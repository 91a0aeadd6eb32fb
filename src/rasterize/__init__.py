"""
Page rasterization (PDF page -> raster image for OCR).

- Renders exactly one page deterministically.
- Performs NO OCR or text extraction.
- The rendered image lives in a scratch directory scoped to `rasterized_page()`.
"""

from .contracts import ColorMode, PageSize, RasterEngineName, RasterizeConfig, RenderedPage
from .module import rasterized_page, read_page_size

__all__ = [
    "ColorMode",
    "PageSize",
    "RasterEngineName",
    "RasterizeConfig",
    "RenderedPage",
    "rasterized_page",
    "read_page_size",
]
