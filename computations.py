"""
Business logic and computations for SplitBill
"""
from __future__ import annotations
import logging
import math
from typing import Dict, List

from models import BillInput, BillItem, BillOutput, PersonItem
from utils import floor_tenths, format_date, from_tenths, round_tenth, to_tenths

logger = logging.getLogger(__name__)


def calculate_sub_total(items: List[BillItem]) -> float:
    """Sum of all item prices, unrounded"""
    # plain left-to-right addition; sum() compensates float error on 3.12+
    total = 0.0
    for item in items:
        total += item.price
    return total


def calculate_tip(sub_total: float, tip_percentage: float) -> float:
    """Tip on the whole bill, rounded to the nearest 0.1"""
    return round_tenth(sub_total * (tip_percentage / 100))


def scan_persons(items: List[BillItem]) -> List[str]:
    """Distinct participants of personal items, in order of first appearance"""
    persons: Dict[str, None] = {}
    for item in items:
        if not item.is_shared:
            persons.setdefault(item.person, None)
    return list(persons)


def calculate_person_amount(
    items: List[BillItem],
    tip_percentage: float,
    name: str,
    persons: int
) -> float:
    """
    Unrounded amount one participant owes, tip included.
    Personal items count in full, shared items are split evenly over `persons`.
    """
    personal_total = 0.0
    shared_total = 0.0
    for item in items:
        if item.is_shared:
            shared_total += item.price / persons
        elif item.person == name:
            personal_total += item.price
    total = personal_total + shared_total
    tip = total * (tip_percentage / 100)
    return total + tip


def calculate_items(items: List[BillItem], tip_percentage: float) -> List[PersonItem]:
    """Per-person amounts rounded to the nearest 0.1, before reconciliation"""
    names = scan_persons(items)
    persons = len(names)
    return [
        PersonItem(
            name=name,
            amount=round_tenth(calculate_person_amount(items, tip_percentage, name, persons)),
        )
        for name in names
    ]


def adjust_amounts(total_amount: float, items: List[PersonItem]) -> List[PersonItem]:
    """
    Make the per-person amounts add up to total_amount exactly.

    Every amount is floored to 0.1 first; the gap is then closed one 0.1 at a
    time, raising the lowest payer (or lowering the highest), ties going to
    the alphabetically first name. Returns new PersonItem objects in the
    original order. With no participants the gap is left as is.
    """
    if not math.isfinite(total_amount):
        raise ValueError(f"total_amount must be finite, got {total_amount!r}")
    if not items:
        return []

    shares = {item.name: floor_tenths(item.amount) for item in items}
    target = to_tenths(total_amount)
    paying = sum(shares.values())
    if paying != target:
        logger.debug("Reconciling split", extra={"paying": from_tenths(paying), "total": total_amount})

    while paying < target:
        name = min(shares, key=lambda n: (shares[n], n))
        shares[name] += 1
        paying += 1

    while paying > target:
        name = min(shares, key=lambda n: (-shares[n], n))
        shares[name] -= 1
        paying -= 1

    return [PersonItem(name=item.name, amount=from_tenths(shares[item.name])) for item in items]


def split_bill(bill: BillInput) -> BillOutput:
    """Split a validated bill into what each participant pays"""
    sub_total = calculate_sub_total(bill.items)
    tip = calculate_tip(sub_total, bill.tip_percentage)
    total_amount = round_tenth(sub_total + tip)
    items = adjust_amounts(total_amount, calculate_items(bill.items, bill.tip_percentage))
    return BillOutput(
        date=format_date(bill.date),
        location=bill.location,
        sub_total=sub_total,
        tip=tip,
        total_amount=total_amount,
        items=items,
    )
