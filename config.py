"""
Configuration, bill loading and validation for SplitBill
"""
from __future__ import annotations
import json
import math
import os
from typing import Any, Dict

from models import BillInput, BillItem, BillOutput, PersonItem

DEFAULT_FORMAT = "json"
FORMAT_EXTENSIONS = {
    "json": ".json",
    "text": ".txt",
    "csv": ".csv",
    "xlsx": ".xlsx",
}
SUPPORTED_FORMATS = tuple(FORMAT_EXTENSIONS)
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_LEVEL_ENV = "BILL_SPLIT_LOG_LEVEL"


class BillSplitError(Exception):
    """Base class for errors reported to the user"""


class BillValidationError(BillSplitError, ValueError):
    """Bill document does not have the expected shape"""


class BillFileError(BillSplitError, OSError):
    """Bill file cannot be read or parsed"""


def default_log_level() -> str:
    """Log level from the environment, or the built-in default when unset or unknown"""
    level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


def _is_number(v: Any) -> bool:
    """True for finite int/float values; bool does not count"""
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return False
    try:
        return math.isfinite(v)
    except OverflowError:
        # int literal beyond float range
        return False


def _is_text(v: Any) -> bool:
    return isinstance(v, str) and v != ""


def dict_to_bill_item(d: Any, index: int) -> BillItem:
    """Validate one entry of the items array"""
    if not isinstance(d, dict):
        raise BillValidationError(f"Item {index} must be an object")
    if not _is_text(d.get("name")):
        raise BillValidationError(f"Item {index} missing or invalid name field")
    price = d.get("price")
    if not _is_number(price) or price < 0:
        raise BillValidationError(f"Item {index} missing or invalid price field")
    is_shared = d.get("isShared")
    if not isinstance(is_shared, bool):
        raise BillValidationError(f"Item {index} missing or invalid isShared field")
    person = d.get("person")
    if not is_shared and not _is_text(person):
        raise BillValidationError(f"Item {index} missing or invalid person field for personal item")

    return BillItem(
        name=d["name"],
        price=float(price),
        is_shared=is_shared,
        person=None if is_shared else person,
    )


def dict_to_bill_input(d: Any) -> BillInput:
    """Convert a parsed bill document to BillInput, rejecting malformed input"""
    if not isinstance(d, dict):
        raise BillValidationError("Input data must be an object")
    if not _is_text(d.get("date")):
        raise BillValidationError("Missing or invalid date field")
    if not _is_text(d.get("location")):
        raise BillValidationError("Missing or invalid location field")
    tip_percentage = d.get("tipPercentage")
    if not _is_number(tip_percentage) or tip_percentage < 0:
        raise BillValidationError("Missing or invalid tipPercentage field")
    items = d.get("items")
    if not isinstance(items, list) or not items:
        raise BillValidationError("Missing or invalid items field (must be a non-empty array)")

    bill = BillInput(
        date=d["date"],
        location=d["location"],
        tip_percentage=float(tip_percentage),
        items=[dict_to_bill_item(item, i) for i, item in enumerate(items)],
    )

    # sum, tip and ten-cent scaling must all stay within float range
    total = 0.0
    for item in bill.items:
        total += item.price
    total += total * (bill.tip_percentage / 100)
    if not math.isfinite(total * 10):
        raise BillValidationError("Bill total is too large")
    return bill


def load_bill(path: str) -> BillInput:
    """Read and validate a bill JSON file"""
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        raise BillFileError(f"File not found: {path}") from None
    except PermissionError:
        raise BillFileError(f"Permission denied: {path}") from None
    except UnicodeDecodeError as ex:
        raise BillFileError(f"Invalid JSON format: {ex}") from ex

    try:
        data = json.loads(content)
    except json.JSONDecodeError as ex:
        raise BillFileError(f"Invalid JSON format: {ex}") from ex
    return dict_to_bill_input(data)


def bill_output_to_dict(output: BillOutput) -> Dict[str, Any]:
    """Convert BillOutput to its JSON document form"""
    return {
        "date": output.date,
        "location": output.location,
        "subTotal": output.sub_total,
        "tip": output.tip,
        "totalAmount": output.total_amount,
        "items": [{"name": p.name, "amount": p.amount} for p in output.items],
    }


def dict_to_bill_output(d: Dict[str, Any]) -> BillOutput:
    """Convert a report document back to BillOutput"""
    return BillOutput(
        date=d["date"],
        location=d["location"],
        sub_total=float(d["subTotal"]),
        tip=float(d["tip"]),
        total_amount=float(d["totalAmount"]),
        items=[PersonItem(name=p["name"], amount=float(p["amount"])) for p in d.get("items", [])],
    )
