from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable

from contracts.locate import FieldRegion, InsertionPoint, Strategy
from contracts.ocr import OcrWord

from .config import LocatorConfig
from .field_region import detect_field_region

logger = logging.getLogger(__name__)

KNOWN_NAME_FIELD_RE = re.compile(r"name|full", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class Resolution:
    region: FieldRegion
    point: InsertionPoint


def has_known_name_field(known_field_names: Iterable[str] | None) -> bool:
    return any(KNOWN_NAME_FIELD_RE.search(n or "") for n in (known_field_names or ()))


def fallback_region(
    *, page_size: tuple[float, float], known_field_names: Iterable[str] | None, config: LocatorConfig
) -> FieldRegion:
    page_w, page_h = page_size
    if has_known_name_field(known_field_names):
        return FieldRegion(
            x=page_w * config.name_field_x_frac,
            y=page_h * config.name_field_y_frac,
            width=0.0,
            height=0.0,
            confidence=config.name_field_confidence,
            strategy=Strategy.NAME_FIELD_DETECTED,
        )
    return FieldRegion(
        x=page_w * config.common_x_frac,
        y=page_h * config.common_y_frac,
        width=0.0,
        height=0.0,
        confidence=config.common_confidence,
        strategy=Strategy.COMMON_POSITION,
    )


def insertion_point_for(region: FieldRegion, *, font_size: float, gap: float) -> InsertionPoint:
    """
    Text origin for a region: right of a detected region, vertically centered
    on its height. Fallback regions are already insertion points.
    """

    if region.strategy != Strategy.OCR_DETECTED:
        return InsertionPoint(x=region.x, y=region.y, strategy=region.strategy, confidence=region.confidence)
    return InsertionPoint(
        x=region.x + region.width + gap,
        y=region.y + max(0.0, (region.height - font_size) / 2.0),
        strategy=region.strategy,
        confidence=region.confidence,
    )


def resolve_position(
    words: Iterable[OcrWord] | None,
    *,
    image_size: tuple[int, int] | None,
    page_size: tuple[float, float],
    known_field_names: Iterable[str] | None = None,
    font_size: float = 12.0,
    config: LocatorConfig | None = None,
) -> Resolution:
    """
    Pick exactly one field region for the page.

    `words=None` (OCR unavailable) and an empty word list both go straight
    to the heuristic fallbacks, which always succeed.
    """

    config = config or LocatorConfig()
    config.validate()

    region: FieldRegion | None = None
    if words is not None and image_size is not None:
        region = detect_field_region(words, image_size=image_size, page_size=page_size, config=config)

    if region is None:
        region = fallback_region(page_size=page_size, known_field_names=known_field_names, config=config)
        logger.info("No name label detected; using %s fallback", region.strategy.value)
    else:
        logger.info("Name label detected (conf=%.1f)", region.confidence)

    point = insertion_point_for(region, font_size=font_size, gap=config.insert_gap)
    return Resolution(region=region, point=point)
