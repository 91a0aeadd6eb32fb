from __future__ import annotations

from dataclasses import dataclass, field

from grouping.config import GroupingConfig


@dataclass(frozen=True, slots=True)
class LocatorConfig:
    """
    Label search and fallback placement parameters.

    The fallback fractions encode a fixed prior for single-page portrait forms;
    they are not adaptive.
    """

    grouping: GroupingConfig = field(default_factory=GroupingConfig)

    # A label match above this mean OCR confidence (0..100) ends the search.
    label_confidence_threshold: float = 30.0
    label_max_words: int = 3

    # Gap between the detected region's right edge and the inserted text (page units).
    insert_gap: float = 6.0

    name_field_x_frac: float = 0.30
    name_field_y_frac: float = 0.75
    name_field_confidence: float = 0.8

    common_x_frac: float = 0.25
    common_y_frac: float = 0.65
    common_confidence: float = 0.6

    def validate(self) -> None:
        self.grouping.validate()
        if self.label_max_words < 1:
            raise ValueError("label_max_words must be >= 1")
        if not (0.0 <= self.label_confidence_threshold <= 100.0):
            raise ValueError("label_confidence_threshold must be within [0, 100]")
        if self.insert_gap < 0:
            raise ValueError("insert_gap must be >= 0")
        for name in ("name_field_x_frac", "name_field_y_frac", "common_x_frac", "common_y_frac"):
            v = getattr(self, name)
            if not (0.0 <= v <= 1.0):
                raise ValueError(f"{name} must be within [0, 1]")
