from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .contracts import FillReport


def serialize_fill_report(report: FillReport) -> str:
    """
    Stable JSON serialization for audit artifacts.
    """

    payload: dict[str, Any] = report.to_dict()
    return json.dumps(payload, ensure_ascii=False, sort_keys=True, indent=2) + "\n"


def write_fill_report_json(*, report: FillReport, out_file: Path) -> None:
    out_file.parent.mkdir(parents=True, exist_ok=True)
    out_file.write_text(serialize_fill_report(report), encoding="utf-8")
