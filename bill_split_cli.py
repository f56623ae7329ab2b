"""
SplitBill command line tool
- Split a bill JSON file into what each participant pays, rounded to 0.1.
- Point --input at a directory to split every *.json bill in it.

Run:
  python bill_split_cli.py --input=bill.json --output=report.txt --format=text
  python bill_split_cli.py --input=bills/ --output=reports/ --format=xlsx

Dependencies:
  pip install openpyxl python-json-logger
"""
from __future__ import annotations
import argparse
import logging
import os
import sys
from typing import List, Optional

from computations import split_bill
from config import (
    DEFAULT_FORMAT,
    FORMAT_EXTENSIONS,
    LOG_LEVELS,
    SUPPORTED_FORMATS,
    BillSplitError,
    default_log_level,
    load_bill,
)
from logging_utils import setup_json_logger
from models import BillOutput
from report_writer import write_report

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command line arguments"""
    parser = argparse.ArgumentParser(prog="bill-split", description="Split a shared bill.")
    parser.add_argument("--input", required=True, help="bill JSON file, or a directory of them")
    parser.add_argument("--output", required=True, help="report file, or a directory in batch mode")
    parser.add_argument("--format", choices=SUPPORTED_FORMATS, default=DEFAULT_FORMAT)
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=default_log_level(),
    )
    return parser


def process_file(input_path: str, output_path: str, fmt: str = DEFAULT_FORMAT) -> BillOutput:
    """Load one bill, split it and write the report"""
    bill = load_bill(input_path)
    logger.info("Bill loaded", extra={"path": input_path, "location": bill.location})
    output = split_bill(bill)
    write_report(output, output_path, fmt)
    return output


def process_directory(input_dir: str, output_dir: str, fmt: str = DEFAULT_FORMAT) -> int:
    """
    Split every *.json bill in input_dir, writing one report per bill into output_dir.
    A failing bill is logged and skipped. Returns the number of failures.
    """
    os.makedirs(output_dir, exist_ok=True)
    names = sorted(n for n in os.listdir(input_dir) if n.lower().endswith(".json"))
    if not names:
        logger.warning("No bill files found", extra={"path": input_dir})

    failures = 0
    for name in names:
        input_path = os.path.join(input_dir, name)
        output_path = os.path.join(output_dir, os.path.splitext(name)[0] + FORMAT_EXTENSIONS[fmt])
        try:
            process_file(input_path, output_path, fmt)
        except (BillSplitError, OSError) as ex:
            failures += 1
            logger.error(f"Error: {ex}", extra={"path": input_path})

    logger.info("Batch finished", extra={"files": len(names), "failures": failures})
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line tool"""
    args = build_parser().parse_args(argv)
    setup_json_logger(args.log_level)

    try:
        if os.path.isdir(args.input):
            return 1 if process_directory(args.input, args.output, args.format) else 0
        process_file(args.input, args.output, args.format)
    except (BillSplitError, OSError) as ex:
        logger.error(f"Error: {ex}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
