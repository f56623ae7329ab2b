"""
Report rendering and writing for SplitBill
"""
from __future__ import annotations
import json
import logging
from typing import List

from models import BillOutput
from config import SUPPORTED_FORMATS, bill_output_to_dict
from csv_handler import export_report_to_csv
from excel_export import export_excel

logger = logging.getLogger(__name__)


def render_text_report(output: BillOutput) -> str:
    """Fixed-layout text report, amounts with two decimals"""
    lines: List[str] = [
        f"Date: {output.date}",
        f"Location: {output.location}",
        f"Subtotal: {output.sub_total:.2f}",
        f"Tip: {output.tip:.2f}",
        f"Total: {output.total_amount:.2f}",
        "Breakdown:",
    ]
    lines += [f"  {p.name}: {p.amount:.2f}" for p in output.items]
    return "\n".join(lines) + "\n"


def write_json_report(output: BillOutput, filepath: str) -> None:
    """Write the report document as JSON"""
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(bill_output_to_dict(output), f, ensure_ascii=False, indent=2)
        f.write("\n")


def write_text_report(output: BillOutput, filepath: str) -> None:
    """Write the fixed-layout text report"""
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(render_text_report(output))


_WRITERS = {
    "json": write_json_report,
    "text": write_text_report,
    "csv": export_report_to_csv,
    "xlsx": export_excel,
}


def write_report(output: BillOutput, filepath: str, fmt: str = "json") -> None:
    """Write a report in one of SUPPORTED_FORMATS"""
    if fmt not in SUPPORTED_FORMATS:
        raise ValueError(f"Invalid format: {fmt}. Supported formats: {', '.join(SUPPORTED_FORMATS)}")
    _WRITERS[fmt](output, filepath)
    logger.info("Report written", extra={"path": filepath, "format": fmt})
