from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ColorMode(str, Enum):
    RGB = "rgb"
    GRAY = "gray"


class RasterEngineName(str, Enum):
    """
    Rendering backend identifiers.
    """

    PYPDFIUM2 = "pypdfium2"


@dataclass(frozen=True, slots=True)
class PageSize:
    """Page dimensions in PDF units (1/72 inch)."""

    width: float
    height: float


@dataclass(frozen=True, slots=True)
class RenderedPage:
    page_index: int  # 0-indexed
    image_file: Path  # lives inside the caller-owned scratch directory
    width_px: int
    height_px: int
    page_size: PageSize


@dataclass(frozen=True, slots=True)
class RasterizeConfig:
    """
    Rendering parameters for a single page.

    No environment variable reads; callers pass every value explicitly.
    """

    engine: RasterEngineName = RasterEngineName.PYPDFIUM2
    dpi: int = 200
    color_mode: ColorMode = ColorMode.GRAY

    def __post_init__(self) -> None:
        if self.dpi <= 0:
            raise ValueError("dpi must be a positive integer")
