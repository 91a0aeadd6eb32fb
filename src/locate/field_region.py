from __future__ import annotations

import re
from typing import Iterable

from contracts.locate import FieldRegion, LabelMatch, Line, Strategy
from contracts.ocr import BBox, OcrWord

from grouping.group_words import group_words_into_lines

from .config import LocatorConfig
from .label_matcher import find_name_label

# Underscore/dash runs conventionally mark a fillable blank on a form.
BLANK_RUN_RE = re.compile(r"^[_\-]{2,}$")


def extend_with_blank_runs(match: LabelMatch, line: Line) -> BBox:
    """
    Grow the label box over blank runs to its right on the same line.

    Only x1/y1 grow and y0 shrinks; x0 stays at the label's left edge.
    Words that are not blank runs are ignored.
    """

    box = match.box
    right_edge = match.box.x1
    for w in line.words:
        if w.bbox.x0 < right_edge:
            continue
        if not BLANK_RUN_RE.match(w.text.strip()):
            continue
        box = BBox(
            x0=box.x0,
            y0=min(box.y0, w.bbox.y0),
            x1=max(box.x1, w.bbox.x1),
            y1=max(box.y1, w.bbox.y1),
        )
    return box


def pixel_box_to_page(
    box: BBox, *, image_size: tuple[int, int], page_size: tuple[float, float]
) -> tuple[float, float, float, float]:
    """
    Convert a top-left-origin pixel box into a bottom-left-origin page rect.

    Returns (x, y, width, height) where (x, y) is the rect's lower-left corner.
    """

    image_w, image_h = image_size
    page_w, page_h = page_size
    if image_w <= 0 or image_h <= 0:
        raise ValueError(f"image dimensions must be positive, got {image_w}x{image_h}")

    sx = page_w / image_w
    sy = page_h / image_h
    x = box.x0 * sx
    y = page_h - box.y1 * sy
    return x, y, (box.x1 - box.x0) * sx, (box.y1 - box.y0) * sy


def estimate_field_region(
    match: LabelMatch,
    line: Line,
    *,
    image_size: tuple[int, int],
    page_size: tuple[float, float],
) -> FieldRegion:
    # Confidence stays the label words' mean; blank runs do not contribute.
    box = extend_with_blank_runs(match, line)
    x, y, width, height = pixel_box_to_page(box, image_size=image_size, page_size=page_size)
    return FieldRegion(
        x=x,
        y=y,
        width=width,
        height=height,
        confidence=match.confidence,
        strategy=Strategy.OCR_DETECTED,
    )


def detect_field_region(
    words: Iterable[OcrWord],
    *,
    image_size: tuple[int, int],
    page_size: tuple[float, float],
    config: LocatorConfig | None = None,
) -> FieldRegion | None:
    """
    OCR words -> lines -> name label -> field region in page units.

    Returns None when no label is found.
    """

    config = config or LocatorConfig()
    lines = group_words_into_lines(words, config.grouping)
    match = find_name_label(
        lines,
        confidence_threshold=config.label_confidence_threshold,
        max_words=config.label_max_words,
    )
    if match is None:
        return None

    line = next(ln for ln in lines if ln.key == match.line_key)
    return estimate_field_region(match, line, image_size=image_size, page_size=page_size)
