from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from .acroform import list_field_names
from .cli import configure_logging

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="nf-fields",
        description="Print the AcroForm field names of a PDF as JSON.",
    )
    p.add_argument("--pdf", required=True, type=Path, help="Input PDF file.")
    p.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (stderr).",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        names = list_field_names(args.pdf.read_bytes())
    except (RuntimeError, ValueError, OSError) as e:
        # fitz reports unreadable documents as RuntimeError subclasses
        logger.error("Reading form fields failed: %s", e)
        return 2

    print(json.dumps({"fields": [{"name": n, "value": ""} for n in names]}, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
