from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GroupingConfig:
    """
    Deterministic line grouping parameters.

    Defaults are explicit constants (no time/randomness).
    """

    # Word vertical centers are snapped to the nearest multiple of this value;
    # words sharing a snapped value form one line.
    line_tolerance_px: int = 10

    def validate(self) -> None:
        if self.line_tolerance_px <= 0:
            raise ValueError("line_tolerance_px must be > 0")
