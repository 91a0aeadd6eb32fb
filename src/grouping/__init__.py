"""
Deterministic line grouping: OCR words -> horizontal text lines.

No semantic interpretation, no OCR correction, no ML.
"""

from .config import GroupingConfig
from .group_words import group_words_into_lines

__all__ = ["GroupingConfig", "group_words_into_lines"]
