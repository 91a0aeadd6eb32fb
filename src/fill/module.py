from __future__ import annotations

import logging
from typing import Any, Iterable

from contracts.errors import NoInsertionPointError, OCRError, RasterizationError
from contracts.locate import Strategy
from contracts.ocr import OcrWord

from layout.fitter import fit_text, instruction_overflows
from layout.measure import PymupdfTextMeasurer, TextMeasurer
from locate.resolver import resolve_position
from ocr.module import recognize_words
from rasterize.module import rasterized_page, read_page_size

from .acroform import fill_name_field, list_field_names
from .config import FillConfig
from .contracts import FillMethod, FillOutcome, FillReport, LocateResult
from .draw import TextDrawer, draw_on_pdf
from .pdf_doc import page_size_of

logger = logging.getLogger(__name__)


def _resolve_and_fit(
    *,
    words: list[OcrWord] | None,
    image_size: tuple[int, int] | None,
    page_size: tuple[float, float],
    text: str,
    known_field_names: Iterable[str] | None,
    config: FillConfig,
    measurer: TextMeasurer,
    errors: list[dict[str, Any]],
) -> LocateResult:
    resolution = resolve_position(
        words,
        image_size=image_size,
        page_size=page_size,
        known_field_names=known_field_names,
        font_size=config.layout.start_font_size,
        config=config.locator,
    )
    instruction = fit_text(
        resolution.point,
        text,
        page_width=page_size[0],
        measurer=measurer,
        config=config.layout,
    )
    return LocateResult(
        instruction=instruction,
        region=resolution.region,
        point=resolution.point,
        page_size=page_size,
        image_size=image_size,
        word_count=0 if words is None else len(words),
        overflow=instruction_overflows(
            instruction, page_width=page_size[0], right_margin=config.layout.right_margin
        ),
        errors=errors,
    )


def locate_and_fit(
    pdf_bytes: bytes,
    page_index: int,
    text: str,
    known_field_names: Iterable[str] | None = None,
    *,
    config: FillConfig | None = None,
    measurer: TextMeasurer | None = None,
) -> LocateResult:
    """
    Find where `text` should go on one page and size it to fit.

    - Page geometry unavailable: raises `NoInsertionPointError`.
    - Rendering failure: `RasterizationError` propagates to the caller.
    - OCR failure (including timeout): recorded in `errors`, then the
      heuristic fallbacks are used. OCR is never retried.
    """

    config = config or FillConfig()
    config.validate()
    measurer = measurer or PymupdfTextMeasurer()

    try:
        size = read_page_size(config=config.rasterize, pdf_bytes=pdf_bytes, page_index=page_index)
    except RasterizationError as e:
        raise NoInsertionPointError(
            "Page geometry could not be read",
            detail={"page_index": page_index, "cause": e.to_dict()},
        ) from e
    page_size = (size.width, size.height)

    errors: list[dict[str, Any]] = []
    words: list[OcrWord] | None
    with rasterized_page(config=config.rasterize, pdf_bytes=pdf_bytes, page_index=page_index) as page:
        image_size = (page.width_px, page.height_px)
        try:
            words = recognize_words(config=config.ocr, image_file=page.image_file)
        except OCRError as e:
            logger.warning("OCR failed (%s): %s; using heuristic position", e.code, e.message)
            errors.append(e.to_dict())
            words = None

    return _resolve_and_fit(
        words=words,
        image_size=image_size,
        page_size=page_size,
        text=text,
        known_field_names=known_field_names,
        config=config,
        measurer=measurer,
        errors=errors,
    )


def locate_without_ocr(
    pdf_bytes: bytes,
    page_index: int,
    text: str,
    known_field_names: Iterable[str] | None = None,
    *,
    config: FillConfig | None = None,
    measurer: TextMeasurer | None = None,
    errors: list[dict[str, Any]] | None = None,
) -> LocateResult:
    """
    Heuristic placement only, for when the page cannot be rendered.
    """

    config = config or FillConfig()
    config.validate()
    return _resolve_and_fit(
        words=None,
        image_size=None,
        page_size=page_size_of(pdf_bytes, page_index),
        text=text,
        known_field_names=known_field_names,
        config=config,
        measurer=measurer or PymupdfTextMeasurer(),
        errors=list(errors or []),
    )


def fill_name(
    pdf_bytes: bytes,
    name: str,
    *,
    page_index: int = 0,
    config: FillConfig | None = None,
    measurer: TextMeasurer | None = None,
    drawer: TextDrawer | None = None,
) -> FillOutcome:
    """
    Write `name` into the document.

    A named AcroForm text field is filled directly when present; otherwise
    the name is drawn at the located position on `page_index`.
    """

    if not pdf_bytes:
        raise ValueError("No PDF provided")
    if not name or not name.strip():
        raise ValueError("No name provided")

    config = config or FillConfig()
    config.validate()

    try:
        field_names = list_field_names(pdf_bytes)
    except Exception as e:
        raise NoInsertionPointError("Document could not be opened", detail={"error": repr(e)}) from e
    if config.try_acroform and field_names:
        filled = fill_name_field(pdf_bytes, name, flatten=config.flatten_form)
        if filled is not None:
            report = FillReport(
                method=FillMethod.ACROFORM,
                page_index=page_index,
                field_names=field_names,
                acroform_field=filled.field_name,
            )
            return FillOutcome(pdf_bytes=filled.pdf_bytes, report=report)
        logger.info("No name field among %d form fields; locating on page", len(field_names))

    try:
        located = locate_and_fit(
            pdf_bytes, page_index, name, field_names, config=config, measurer=measurer
        )
    except (RasterizationError, NoInsertionPointError) as e:
        cause = e if isinstance(e, RasterizationError) else e.__cause__
        if not isinstance(cause, RasterizationError):
            raise
        logger.warning("Rasterizer failed (%s): %s; using heuristic position", cause.code, cause.message)
        located = locate_without_ocr(
            pdf_bytes,
            page_index,
            name,
            field_names,
            config=config,
            measurer=measurer,
            errors=[cause.to_dict()],
        )

    out = draw_on_pdf(
        pdf_bytes,
        page_index,
        located.instruction,
        fontname=config.layout.fontname,
        color=config.text_color,
        drawer=drawer,
    )
    method = FillMethod.OCR if located.region.strategy == Strategy.OCR_DETECTED else FillMethod.HEURISTIC
    report = FillReport(method=method, page_index=page_index, field_names=field_names, locate=located)
    return FillOutcome(pdf_bytes=out, report=report)
