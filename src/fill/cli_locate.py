from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from contracts.errors import NameFillError

from .cli import add_pipeline_args, config_from_args, configure_logging
from .module import locate_and_fit

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="nf-locate",
        description="Locate the name insertion point on a PDF page and print the draw instruction as JSON.",
    )
    p.add_argument("--pdf", required=True, type=Path, help="Input PDF file.")
    p.add_argument("--name", required=True, help="Text to place (used for font fitting).")
    p.add_argument(
        "--known-field",
        action="append",
        default=[],
        dest="known_fields",
        help="Known field name hint; may be repeated.",
    )
    add_pipeline_args(p)
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        located = locate_and_fit(
            args.pdf.read_bytes(),
            args.page,
            args.name,
            args.known_fields,
            config=config_from_args(args),
        )
    except (NameFillError, ValueError, OSError) as e:
        logger.error("Locate failed: %s", e)
        return 2

    print(json.dumps(located.to_dict(), ensure_ascii=False, sort_keys=True, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
