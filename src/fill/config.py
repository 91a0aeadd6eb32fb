from __future__ import annotations

from dataclasses import dataclass, field

from layout.config import LayoutConfig
from locate.config import LocatorConfig
from ocr.contracts import OcrConfig
from rasterize.contracts import RasterizeConfig


@dataclass(frozen=True, slots=True)
class FillConfig:
    """
    End-to-end configuration for one fill request.

    Every stage config is passed explicitly; nothing is read from the environment.
    """

    rasterize: RasterizeConfig = field(default_factory=RasterizeConfig)
    ocr: OcrConfig = field(default_factory=OcrConfig)
    locator: LocatorConfig = field(default_factory=LocatorConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    text_color: tuple[float, float, float] = (0.0, 0.0, 0.0)  # RGB, 0..1
    try_acroform: bool = True
    flatten_form: bool = True

    def validate(self) -> None:
        self.locator.validate()
        self.layout.validate()
        if len(self.text_color) != 3 or any(not (0.0 <= c <= 1.0) for c in self.text_color):
            raise ValueError("text_color must be three components within [0, 1]")
