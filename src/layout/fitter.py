from __future__ import annotations

import logging
import math

from contracts.locate import DrawInstruction, InsertionPoint

from .config import LayoutConfig
from .measure import TextMeasurer

logger = logging.getLogger(__name__)


def instruction_overflows(instruction: DrawInstruction, *, page_width: float, right_margin: float) -> bool:
    return instruction.x + instruction.rendered_width + right_margin > page_width


def fit_text(
    point: InsertionPoint,
    text: str,
    *,
    page_width: float,
    measurer: TextMeasurer,
    config: LayoutConfig | None = None,
) -> DrawInstruction:
    """
    Single-pass shrink-to-fit against the page's right margin.

    The size only ever shrinks from `start_font_size` and never drops below
    `min_font_size`. If the floor size still overflows, the instruction is
    emitted anyway and a warning is logged.
    """

    config = config or LayoutConfig()
    config.validate()

    size = config.start_font_size
    width = measurer.measure(text, fontname=config.fontname, font_size=size)

    if point.x + width + config.right_margin > page_width:
        available = max(config.min_available_width, page_width - point.x - config.right_margin)
        shrunk = math.floor(size * available / max(1.0, width))
        size = max(config.min_font_size, min(size, shrunk))
        width = measurer.measure(text, fontname=config.fontname, font_size=size)
        logger.debug("Shrunk font to %d to fit %.1f units", size, available)

    instruction = DrawInstruction(x=point.x, y=point.y, font_size=int(size), text=text, rendered_width=width)
    if instruction_overflows(instruction, page_width=page_width, right_margin=config.right_margin):
        logger.warning(
            "Text still overflows the right margin at %d units (x=%.1f, width=%.1f, page_width=%.1f)",
            size,
            point.x,
            width,
            page_width,
        )
    return instruction
