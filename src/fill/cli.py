from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from contracts.errors import NameFillError
from layout.config import LayoutConfig
from ocr.contracts import OcrConfig
from rasterize.contracts import RasterizeConfig

from .artifacts import write_fill_report_json
from .config import FillConfig
from .module import fill_name

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def add_pipeline_args(p: argparse.ArgumentParser) -> None:
    """Flags shared by the commands that run the locate pipeline."""

    p.add_argument("--page", type=int, default=0, help="0-indexed page to fill (default: 0).")
    p.add_argument("--dpi", type=int, default=200, help="Render DPI for OCR.")
    p.add_argument("--language", default="eng", help="Tesseract language hint (default: eng).")
    p.add_argument("--psm", type=int, default=None, help="Tesseract page segmentation mode (optional).")
    p.add_argument("--timeout-s", type=float, default=60.0, help="OCR timeout in seconds.")
    p.add_argument("--font-size", type=int, default=12, help="Starting font size before shrink-to-fit.")
    p.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (stderr).",
    )


def config_from_args(args: argparse.Namespace) -> FillConfig:
    return FillConfig(
        rasterize=RasterizeConfig(dpi=args.dpi),
        ocr=OcrConfig(language=args.language, psm=args.psm, timeout_s=args.timeout_s),
        layout=LayoutConfig(start_font_size=args.font_size),
        try_acroform=getattr(args, "try_acroform", True),
    )


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="nf-fill",
        description="Write a name into a PDF: fill a named form field, or locate the name label and draw it.",
    )
    p.add_argument("--pdf", required=True, type=Path, help="Input PDF file.")
    p.add_argument("--name", required=True, help="Text to insert.")
    p.add_argument("--out", required=True, type=Path, help="Output PDF file.")
    p.add_argument("--report", type=Path, default=None, help="Optional JSON audit report file.")
    p.add_argument(
        "--no-acroform",
        action="store_false",
        dest="try_acroform",
        default=True,
        help="Skip form fields and always locate the position on the page.",
    )
    add_pipeline_args(p)
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    configure_logging(args.log_level)

    config = config_from_args(args)

    try:
        outcome = fill_name(args.pdf.read_bytes(), args.name, page_index=args.page, config=config)
    except (NameFillError, ValueError, OSError) as e:
        logger.error("Fill failed: %s", e)
        return 2

    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_bytes(outcome.pdf_bytes)
    if args.report is not None:
        write_fill_report_json(report=outcome.report, out_file=args.report)

    logger.info("Wrote %s (method=%s)", args.out, outcome.report.method.value)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
