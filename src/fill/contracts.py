from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from contracts.locate import DrawInstruction, FieldRegion, InsertionPoint


class FillMethod(str, Enum):
    ACROFORM = "acroform"  # named form field filled directly
    OCR = "ocr"  # label found on the rendered page
    HEURISTIC = "heuristic"  # fixed fallback position


@dataclass(frozen=True, slots=True)
class LocateResult:
    instruction: DrawInstruction
    region: FieldRegion
    point: InsertionPoint
    page_size: tuple[float, float]
    image_size: tuple[int, int] | None
    word_count: int
    overflow: bool
    errors: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "instruction": self.instruction.to_dict(),
            "region": self.region.to_dict(),
            "point": self.point.to_dict(),
            "page_size": {"width": self.page_size[0], "height": self.page_size[1]},
            "image_size": (
                None
                if self.image_size is None
                else {"width_px": self.image_size[0], "height_px": self.image_size[1]}
            ),
            "word_count": self.word_count,
            "overflow": self.overflow,
            "errors": list(self.errors),
        }


@dataclass(frozen=True, slots=True)
class FillReport:
    method: FillMethod
    page_index: int
    field_names: list[str]
    acroform_field: str | None = None
    locate: LocateResult | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "method": self.method.value,
            "page_index": self.page_index,
            "field_names": list(self.field_names),
            "acroform_field": self.acroform_field,
            "locate": None if self.locate is None else self.locate.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class FillOutcome:
    pdf_bytes: bytes
    report: FillReport
