from __future__ import annotations

import logging
from dataclasses import dataclass

import fitz  # PyMuPDF

from .pdf_doc import open_pdf

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AcroFormFill:
    field_name: str
    pdf_bytes: bytes


def _widgets(doc: fitz.Document):
    for page in doc:
        for w in page.widgets() or []:
            yield w


def list_field_names(pdf_bytes: bytes) -> list[str]:
    """
    Names of all form widgets, in document order, without duplicates.
    """

    names: list[str] = []
    with open_pdf(pdf_bytes) as doc:
        for w in _widgets(doc):
            fn = (getattr(w, "field_name", "") or "").strip()
            if fn and fn not in names:
                names.append(fn)
    logger.debug("Form fields: %s", names)
    return names


def fill_name_field(pdf_bytes: bytes, name: str, *, flatten: bool = True) -> AcroFormFill | None:
    """
    Set the first text widget whose field name contains "name".

    With `flatten`, every widget is baked into the page content so the
    filled value is no longer editable.

    Returns None when the document has no such field.
    """

    with open_pdf(pdf_bytes) as doc:
        for w in _widgets(doc):
            fn = getattr(w, "field_name", "") or ""
            if w.field_type != fitz.PDF_WIDGET_TYPE_TEXT or "name" not in fn.lower():
                continue
            w.field_value = name
            w.update()
            logger.info("Filled form field %r", fn)
            if flatten:
                doc.bake(annots=False, widgets=True)
            return AcroFormFill(field_name=fn, pdf_bytes=doc.tobytes(garbage=3, deflate=True))
    return None
