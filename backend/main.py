"""Parse a pasted job posting from a file or stdin and print it as JSON.

Usage:
    python backend/main.py posting.txt
    pbpaste | python backend/main.py --draft
"""

import argparse
import json
import logging
import sys

from config import settings
from services.import_review import count_detected_fields, review_fields, to_job_draft
from services.job_parser import parse_job_posting

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Extract job fields from a pasted posting")
    parser.add_argument("file", nargs="?", help="posting text file (default: stdin)")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--draft", action="store_true", help="print the job-creation draft")
    output.add_argument("--review", action="store_true", help="print per-field confidence")
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=None,
        help="override Settings.log_level",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = "DEBUG" if settings.debug else (args.log_level or settings.log_level.upper())
    if level not in LOG_LEVELS:
        parser.error(f"invalid log level in settings: {level}")
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    if args.file:
        try:
            with open(args.file, encoding="utf-8") as fh:
                text = fh.read()
        except OSError as e:
            parser.error(f"cannot read {args.file}: {e.strerror}")
    else:
        text = sys.stdin.read()

    parsed = parse_job_posting(text)
    logger.info("Extracted %d job details", count_detected_fields(parsed))

    if args.draft:
        payload = to_job_draft(parsed, settings).model_dump(by_alias=True)
    elif args.review:
        payload = review_fields(parsed)
    else:
        payload = parsed.model_dump(by_alias=True)

    json.dump(payload, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
