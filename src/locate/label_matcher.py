from __future__ import annotations

import logging
import re
from typing import Iterable

from contracts.locate import LabelMatch, Line
from contracts.ocr import OcrWord

from grouping.group_words import normalize_word_text

logger = logging.getLogger(__name__)

# Longer alternatives first so "full name" wins over the bare "name".
NAME_LABEL_RE = re.compile(
    r"(?<![a-z0-9])(full name|first name|last name|given name|family name|surname|name)(?![a-z0-9])[\s:_\-]*",
    re.IGNORECASE,
)


def _word_index_at(words: list[OcrWord], char_pos: int) -> int | None:
    # Offsets follow Line.joined_text: normalized word texts joined by one space.
    pos = 0
    for i, w in enumerate(words):
        end = pos + len(normalize_word_text(w.text))
        if char_pos < end:
            return i
        pos = end + 1
    return None


def _label_words(words: list[OcrWord], start: int, max_words: int) -> list[OcrWord]:
    out: list[OcrWord] = []
    for w in words[start : start + max_words]:
        out.append(w)
        if ":" in w.text:
            break
    return out


def match_line(line: Line, *, max_words: int = 3) -> LabelMatch | None:
    """
    Match a name label in one line and map it back onto the line's words.
    """

    m = NAME_LABEL_RE.search(line.joined_text)
    if m is None:
        return None

    start = _word_index_at(line.words, m.start())
    if start is None:
        return None

    label_words = _label_words(line.words, start, max_words)
    box = label_words[0].bbox
    for w in label_words[1:]:
        box = box.union(w.bbox)

    confidence = sum(w.confidence for w in label_words) / len(label_words) if label_words else 0.0
    return LabelMatch(box=box, confidence=confidence, label_text=m.group(1).lower(), line_key=line.key)


def find_name_label(
    lines: Iterable[Line], *, confidence_threshold: float = 30.0, max_words: int = 3
) -> LabelMatch | None:
    """
    Scan lines top-to-bottom for a name label.

    The first match above `confidence_threshold` is accepted immediately.
    When none clears it, the last match seen is still returned: a garbled
    low-confidence label beats no label.
    """

    best: LabelMatch | None = None
    for line in lines:
        match = match_line(line, max_words=max_words)
        if match is None:
            continue
        best = match
        if match.confidence > confidence_threshold:
            logger.debug("Accepted label %r on line %d (conf=%.1f)", match.label_text, line.key, match.confidence)
            return best

    if best is not None:
        logger.debug("No label above %.1f; keeping low-confidence %r", confidence_threshold, best.label_text)
    return best
