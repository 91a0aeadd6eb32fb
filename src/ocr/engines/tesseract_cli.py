from __future__ import annotations

import csv
import logging
import subprocess
from pathlib import Path
from typing import Any

from contracts.ocr import BBox, OcrWord

from ..contracts import OcrConfig, OcrEngineName, OcrFailure, OcrResult
from .base import WordRecognizer

logger = logging.getLogger(__name__)


def _failed(code: str, message: str, detail: dict[str, Any] | None, meta: dict[str, Any]) -> OcrResult:
    return OcrResult(
        ok=False,
        engine=OcrEngineName.TESSERACT_CLI,
        words=[],
        errors=[OcrFailure(code=code, message=message, detail=detail)],
        meta=meta,
    )


def parse_tsv_words(tsv: str, *, confidence_floor: float = 0.0) -> list[OcrWord]:
    """
    Parse Tesseract TSV output into word-level entries.

    Ordering is deterministic by (page, block, par, line, word).
    """

    rows: list[tuple[tuple[int, int, int, int, int], OcrWord]] = []
    reader = csv.DictReader(tsv.splitlines(), delimiter="\t", quoting=csv.QUOTE_NONE)

    for row in reader:
        # level meanings: 1=page,2=block,3=para,4=line,5=word
        try:
            level = int(row.get("level", "") or "0")
        except ValueError:
            continue
        if level != 5:
            continue

        text = row.get("text") or ""
        if text.strip() == "":
            continue

        try:
            sort_key = (
                int(row.get("page_num", "") or "1"),
                int(row.get("block_num", "") or "0"),
                int(row.get("par_num", "") or "0"),
                int(row.get("line_num", "") or "0"),
                int(row.get("word_num", "") or "0"),
            )
            left = int(row.get("left", "") or "0")
            top = int(row.get("top", "") or "0")
            width = int(row.get("width", "") or "0")
            height = int(row.get("height", "") or "0")
        except ValueError:
            # Malformed geometry rows are dropped (no guessing).
            continue

        try:
            conf = float(row.get("conf", "") or "0")
        except ValueError:
            conf = 0.0
        conf = max(0.0, min(100.0, conf))
        if conf < confidence_floor:
            continue

        word = OcrWord(
            text=text,
            bbox=BBox(x0=left, y0=top, x1=left + width, y1=top + height),
            confidence=conf,
        )
        rows.append((sort_key, word))

    return [w for _, w in sorted(rows, key=lambda r: r[0])]


class TesseractCliEngine(WordRecognizer):
    """
    Tesseract OCR via `tesseract` CLI, parsed from TSV output.

    This engine performs no correction, no merging, and no semantic filtering.
    Only an optional confidence floor is applied.
    """

    def run_on_image_file(self, *, config: OcrConfig, image_file: Path) -> OcrResult:
        meta: dict[str, Any] = {
            "backend": "tesseract",
            "backend_mode": "cli",
            "language": config.language,
            "psm": config.psm,
            "confidence_floor": config.confidence_floor,
        }

        if not image_file.exists():
            return _failed(
                "OCR_INPUT_NOT_FOUND",
                "Input image file not found",
                {"image_file": image_file.name},
                meta,
            )

        cmd = [
            "tesseract",
            str(image_file),
            "stdout",
            "-l",
            config.language,
        ]

        if config.psm is not None:
            cmd.extend(["--psm", str(config.psm)])

        # Request TSV output (word-level rows will include bounding boxes + conf + text).
        cmd.append("tsv")
        meta["command_template"] = ["tesseract", "<IMAGE_FILE>", *cmd[2:]]

        try:
            proc = subprocess.run(
                cmd,
                check=False,
                capture_output=True,
                text=True,
                timeout=config.timeout_s,
            )
        except FileNotFoundError:
            return _failed(
                "OCR_BACKEND_NOT_INSTALLED",
                "tesseract binary not found on PATH",
                {"expected_command": "tesseract"},
                meta,
            )
        except subprocess.TimeoutExpired:
            return _failed(
                "OCR_TIMEOUT",
                "OCR backend timed out",
                {"timeout_s": config.timeout_s},
                meta,
            )

        if proc.returncode != 0:
            return _failed(
                "OCR_BACKEND_ERROR",
                "OCR backend returned a non-zero exit code",
                {
                    "returncode": proc.returncode,
                    "stderr": proc.stderr[-4000:],
                },
                meta,
            )

        words = parse_tsv_words(proc.stdout, confidence_floor=config.confidence_floor)
        logger.debug("tesseract produced %d words", len(words))

        return OcrResult(
            ok=True,
            engine=OcrEngineName.TESSERACT_CLI,
            words=words,
            errors=[],
            meta=meta,
        )
