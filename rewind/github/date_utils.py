"""
UTC date ranges for GitHub API queries.

All bounds are built in UTC so that the local timezone of the server never
shifts a contribution into the neighbouring year.
"""

from datetime import date, datetime, timezone


def utc_today() -> date:
    """Today's date in UTC, read fresh on every call"""
    return datetime.now(timezone.utc).date()


def to_iso(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%dT%H:%M:%SZ")


def create_year_date_range(year: int, today: date = None) -> dict:
    """
    Create the query range for a calendar year.

    Args:
        year: Calendar year
        today: Date the request is made on; for the current year the range ends
            with this day instead of December 31st

    Returns:
        Dictionary with 'from' and 'to' ISO timestamps
    """
    start = datetime(year, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
    end = datetime(year, 12, 31, 23, 59, 59, tzinfo=timezone.utc)

    if today is not None and today.year == year:
        end = datetime(year, today.month, today.day, 23, 59, 59, tzinfo=timezone.utc)

    return {"from": to_iso(start), "to": to_iso(end)}


def parse_timestamp(value: str):
    """Parse a GitHub ISO timestamp ('Z' suffix allowed); None if invalid"""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
