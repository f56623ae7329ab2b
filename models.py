"""
Data models for SplitBill
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class BillItem:
    """Priced line on the bill, shared by everyone or owned by one person"""
    name: str
    price: float
    is_shared: bool
    person: Optional[str] = None  # required when is_shared is False


@dataclass(frozen=True)
class BillInput:
    """Bill as received from the caller"""
    date: str  # YYYY-MM-DD
    location: str
    tip_percentage: float  # e.g. 15 for 15%
    items: List[BillItem] = field(default_factory=list)


@dataclass
class PersonItem:
    """What one participant pays"""
    name: str
    amount: float


@dataclass
class BillOutput:
    """Computed split of a bill"""
    date: str  # display form, e.g. 2024年3月21日
    location: str
    sub_total: float
    tip: float
    total_amount: float
    items: List[PersonItem] = field(default_factory=list)
