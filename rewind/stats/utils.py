"""Small numeric and date helpers shared by the statistics modules"""

import math
from datetime import date, datetime
from typing import Optional


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2)"""
    return math.floor(value + 0.5)


def parse_day(value) -> Optional[date]:
    """Parse a YYYY-MM-DD date (a trailing time part is ignored); None if invalid"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value.strip().split("T")[0])
    except ValueError:
        return None
