from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    start_font_size: int = 12
    min_font_size: int = 8
    right_margin: float = 20.0
    # Lower bound on the width budget when the insertion point is near the right edge.
    min_available_width: float = 30.0
    fontname: str = "helv"  # PDF base-14 Helvetica

    def validate(self) -> None:
        if self.min_font_size <= 0:
            raise ValueError("min_font_size must be > 0")
        if self.start_font_size < self.min_font_size:
            raise ValueError("start_font_size must be >= min_font_size")
        if self.right_margin < 0:
            raise ValueError("right_margin must be >= 0")
        if self.min_available_width <= 0:
            raise ValueError("min_available_width must be > 0")
