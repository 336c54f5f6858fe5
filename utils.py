"""
Utility functions for SalesTracker application
"""
from __future__ import annotations
import math
import os
import uuid
from datetime import date
from typing import Union

from errors import ValidationError


def today_str() -> str:
    """Get today's date as ISO string"""
    return date.today().isoformat()


def new_id() -> str:
    """Fresh opaque record id"""
    return str(uuid.uuid4())


def parse_amount(x: Union[str, int, float, None]) -> float:
    """
    Parse a user or sheet supplied amount.
    Thousands-separator commas are stripped from text.
    Raises ValidationError unless the result is a finite number >= 0.
    """
    if isinstance(x, bool):
        raise ValidationError("Amount must be a number")
    if isinstance(x, (int, float)):
        amount = float(x)
    else:
        text = (x or "").strip().replace(",", "")
        if not text:
            raise ValidationError("Amount is required")
        try:
            amount = float(text)
        except ValueError:
            raise ValidationError(f"Amount must be a number: {x!r}") from None
    if not math.isfinite(amount):
        raise ValidationError("Amount must be a finite number")
    if amount < 0:
        raise ValidationError("Amount must be a non-negative number")
    return amount


def amount_text(value: float) -> str:
    """Editable text for a stored amount; parse_amount(amount_text(x)) == x"""
    return str(int(value)) if value.is_integer() else repr(value)


def format_amount(value: float, symbol: str = "₹") -> str:
    """Format amount with Indian digit grouping, e.g. 123456.5 -> ₹1,23,456.50"""
    sign = "-" if value < 0 else ""
    whole, frac = f"{abs(value):.2f}".split(".")
    if len(whole) > 3:
        head, tail = whole[:-3], whole[-3:]
        pairs = []
        while len(head) > 2:
            pairs.insert(0, head[-2:])
            head = head[:-2]
        if head:
            pairs.insert(0, head)
        whole = ",".join(pairs + [tail])
    return f"{sign}{symbol}{whole}.{frac}"


def app_dir() -> str:
    """
    Get application data directory: ~/Library/Application Support/SalesTracker
    Creates directory if it doesn't exist.
    """
    base = os.path.expanduser("~/Library/Application Support")
    path = os.path.join(base, "SalesTracker")
    os.makedirs(path, exist_ok=True)
    return path
