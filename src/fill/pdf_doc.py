from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import fitz  # PyMuPDF

from contracts.errors import NoInsertionPointError


@contextmanager
def open_pdf(pdf_bytes: bytes) -> Iterator[fitz.Document]:
    doc = fitz.open(stream=pdf_bytes, filetype="pdf")
    try:
        yield doc
    finally:
        doc.close()


def page_size_of(pdf_bytes: bytes, page_index: int = 0) -> tuple[float, float]:
    """
    Page (width, height) in PDF units, read without rendering.

    Raises `NoInsertionPointError` when the document or page cannot be read.
    """

    try:
        with open_pdf(pdf_bytes) as doc:
            if page_index < 0 or page_index >= doc.page_count:
                raise NoInsertionPointError(
                    f"Page out of range: {page_index} (0..{doc.page_count - 1})",
                    detail={"page_index": page_index, "page_count": doc.page_count},
                )
            rect = doc[page_index].rect
            return float(rect.width), float(rect.height)
    except NoInsertionPointError:
        raise
    except Exception as e:
        raise NoInsertionPointError(
            "Page geometry could not be read",
            detail={"page_index": page_index, "error": repr(e)},
        ) from e
