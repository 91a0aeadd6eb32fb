from __future__ import annotations

import logging
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .contracts import PageSize, RasterEngineName, RasterizeConfig, RenderedPage
from .engines import PdfRasterEngine, Pypdfium2Engine

logger = logging.getLogger(__name__)


def _get_engine(engine: RasterEngineName) -> PdfRasterEngine:
    if engine == RasterEngineName.PYPDFIUM2:
        return Pypdfium2Engine()
    raise ValueError(f"Unsupported raster engine: {engine}")


def read_page_size(*, config: RasterizeConfig, pdf_bytes: bytes, page_index: int = 0) -> PageSize:
    return _get_engine(config.engine).get_page_size(pdf_bytes=pdf_bytes, page_index=page_index)


@contextmanager
def rasterized_page(
    *, config: RasterizeConfig, pdf_bytes: bytes, page_index: int = 0
) -> Iterator[RenderedPage]:
    """
    Render one page into a private scratch directory owned by this call.

    The directory (and the image in it) is removed on every exit path,
    including when rendering or the caller's OCR step raises.
    """

    scratch = Path(tempfile.mkdtemp(prefix="namefill_page_"))
    try:
        engine = _get_engine(config.engine)
        logger.debug("Rendering page %d with %s", page_index, engine.backend_id())
        page = engine.render_page(
            pdf_bytes=pdf_bytes,
            page_index=page_index,
            out_dir=scratch,
            dpi=config.dpi,
            color_mode=config.color_mode,
        )
        yield page
    finally:
        shutil.rmtree(scratch, ignore_errors=True)
        logger.debug("Removed scratch directory %s", scratch)
