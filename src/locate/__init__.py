"""
Name-field location on pages without machine-readable form fields.

OCR words -> lines -> label match -> field region (page units) -> insertion point,
with fixed heuristic fallbacks when no label is found.
"""

from .config import LocatorConfig
from .field_region import detect_field_region, estimate_field_region, extend_with_blank_runs, pixel_box_to_page
from .label_matcher import NAME_LABEL_RE, find_name_label, match_line
from .resolver import Resolution, has_known_name_field, insertion_point_for, resolve_position

__all__ = [
    "LocatorConfig",
    "NAME_LABEL_RE",
    "Resolution",
    "detect_field_region",
    "estimate_field_region",
    "extend_with_blank_runs",
    "find_name_label",
    "has_known_name_field",
    "insertion_point_for",
    "match_line",
    "pixel_box_to_page",
    "resolve_position",
]
