from __future__ import annotations

from abc import ABC, abstractmethod

import fitz  # PyMuPDF

from contracts.locate import DrawInstruction

from .pdf_doc import open_pdf


class TextDrawer(ABC):
    @abstractmethod
    def draw(
        self,
        page: fitz.Page,
        instruction: DrawInstruction,
        *,
        fontname: str,
        color: tuple[float, float, float],
    ) -> None:
        raise NotImplementedError


class PymupdfTextDrawer(TextDrawer):
    def draw(
        self,
        page: fitz.Page,
        instruction: DrawInstruction,
        *,
        fontname: str,
        color: tuple[float, float, float],
    ) -> None:
        # Instructions use a bottom-left origin; PyMuPDF pages are top-left.
        origin = fitz.Point(instruction.x, page.rect.height - instruction.y)
        page.insert_text(
            origin,
            instruction.text,
            fontname=fontname,
            fontsize=instruction.font_size,
            color=color,
        )


def draw_on_pdf(
    pdf_bytes: bytes,
    page_index: int,
    instruction: DrawInstruction,
    *,
    fontname: str = "helv",
    color: tuple[float, float, float] = (0.0, 0.0, 0.0),
    drawer: TextDrawer | None = None,
) -> bytes:
    drawer = drawer or PymupdfTextDrawer()
    with open_pdf(pdf_bytes) as doc:
        drawer.draw(doc[page_index], instruction, fontname=fontname, color=color)
        return doc.tobytes(garbage=3, deflate=True)
