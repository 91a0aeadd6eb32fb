from __future__ import annotations

import math
import re
from typing import Iterable

from contracts.locate import Line
from contracts.ocr import OcrWord

from .config import GroupingConfig

_WS_RE = re.compile(r"\s+")


def normalize_word_text(text: str) -> str:
    return _WS_RE.sub(" ", text).strip().lower()


def line_key(word: OcrWord, tolerance_px: int) -> int:
    # Round half up so the bucket boundary does not depend on banker's rounding.
    return int(math.floor(word.bbox.y_center() / tolerance_px + 0.5)) * tolerance_px


def group_words_into_lines(words: Iterable[OcrWord], config: GroupingConfig | None = None) -> list[Line]:
    """
    Cluster OCR words into horizontal lines by snapped vertical center.

    Lines are returned top-to-bottom (ascending key); words within a line
    are ordered left-to-right (x0 asc, tie y0, then input order).
    """

    config = config or GroupingConfig()
    config.validate()

    buckets: dict[int, list[OcrWord]] = {}
    for w in words:
        # Pre-filter: drop whitespace-only words (explicit, deterministic)
        if w.text.strip() == "":
            continue
        buckets.setdefault(line_key(w, config.line_tolerance_px), []).append(w)

    lines: list[Line] = []
    for key in sorted(buckets):
        ordered = sorted(buckets[key], key=lambda w: (w.bbox.x0, w.bbox.y0))
        joined = " ".join(normalize_word_text(w.text) for w in ordered)
        lines.append(Line(key=key, words=ordered, joined_text=joined))
    return lines
