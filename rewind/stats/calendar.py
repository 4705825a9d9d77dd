"""Normalize the contribution calendar and derive rhythm statistics"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from rewind.stats.models import ActivityDay, BusiestDay, CalendarDay, MonthCount
from rewind.stats.utils import parse_day


MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December"
]

DAYS = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]


@dataclass(frozen=True)
class CalendarStats:
    days: tuple
    total_count: int
    active_days: int
    total_days: int
    longest_streak: int
    current_streak: int
    contributions_by_month: tuple
    busiest_month: Optional[str]
    busiest_month_count: int
    busiest_day: Optional[BusiestDay]
    weekday_distribution: tuple
    favorite_weekdays: tuple
    weekend_count: int


def weekday_index(day: date) -> int:
    """Day of week with Sunday as 0"""
    return (day.weekday() + 1) % 7


def clean_days(days) -> list:
    """
    Validate and sort raw calendar entries.

    Entries with a malformed date or count are dropped. Sorting is done on the
    parsed date, so "2024-01-09" comes before "2024-01-10" regardless of how
    the strings compare.
    """
    cleaned = []
    for day in days or []:
        if not isinstance(day, (ActivityDay, CalendarDay, dict)):
            continue
        if isinstance(day, CalendarDay):
            cleaned.append(day)
            continue
        raw_date = day.date if isinstance(day, ActivityDay) else day.get("date")
        raw_count = day.count if isinstance(day, ActivityDay) else day.get("contributionCount", day.get("count"))

        parsed = parse_day(raw_date)
        if parsed is None:
            continue
        try:
            count = int(raw_count or 0)
        except (TypeError, ValueError):
            continue
        cleaned.append(CalendarDay(parsed, max(0, count)))

    return sorted(cleaned, key=lambda d: d.date)


def calculate_streak(days: list, current: bool) -> int:
    """
    Length of a run of consecutive active days.

    Args:
        days: Validated days sorted ascending
        current: Return the streak ending at the latest day instead of the longest one

    Returns:
        Number of days in the streak
    """
    if not days:
        return 0

    if current:
        ordered = list(reversed(days))
        if ordered[0].count == 0:
            return 0
        streak = 1
        for newer, older in zip(ordered, ordered[1:]):
            if older.count == 0 or (newer.date - older.date).days != 1:
                break
            streak += 1
        return streak

    longest = 0
    streak = 0
    prev_date = None
    for day in days:
        if day.count > 0:
            if prev_date is not None and (day.date - prev_date).days == 1:
                streak += 1
            else:
                streak = 1
            longest = max(longest, streak)
            prev_date = day.date
        else:
            streak = 0
            prev_date = None

    return longest


def guarded_max(items: list, key) -> Optional[object]:
    """First item with the largest positive key, or None when nothing is positive"""
    best = None
    best_value = 0
    for item in items:
        value = key(item)
        if value > best_value:
            best = item
            best_value = value
    return best


def format_day(day: date) -> str:
    """Format a date as e.g. 'March 15th'"""
    n = day.day
    if n in (1, 21, 31):
        suffix = "st"
    elif n in (2, 22):
        suffix = "nd"
    elif n in (3, 23):
        suffix = "rd"
    else:
        suffix = "th"
    return f"{MONTHS[day.month - 1]} {n}{suffix}"


def peak_day_context(day) -> str:
    """Short label describing when a peak day happened"""
    parsed = parse_day(day)
    if parsed is None:
        return "Peak day"

    dow = weekday_index(parsed)
    if parsed.month == 12 and parsed.day >= 15:
        return "End-of-year sprint"
    if parsed.month == 1 and parsed.day <= 15:
        return "New year momentum"
    if dow in (0, 6):
        return f"{DAYS[dow]} deep work"
    if dow == 1:
        return "Monday motivation"
    if dow == 5:
        return "Friday push"
    return "Mid-week focus"


def normalize_calendar(days) -> CalendarStats:
    """
    Turn raw calendar entries into rhythm statistics

    Args:
        days: ActivityDay records or raw calendar dicts ({"date", "contributionCount"})

    Returns:
        CalendarStats for the valid entries
    """
    valid = clean_days(days)

    by_month = [0] * 12
    by_weekday = [0] * 7
    for day in valid:
        by_month[day.date.month - 1] += day.count
        by_weekday[weekday_index(day.date)] += day.count

    months = tuple(MonthCount(MONTHS[i], count) for i, count in enumerate(by_month))
    busiest_month = guarded_max(list(months), key=lambda m: m.count)

    peak = guarded_max(valid, key=lambda d: d.count)
    busiest_day = None
    if peak is not None:
        busiest_day = BusiestDay(
            date=peak.date.isoformat(),
            formatted_date=format_day(peak.date),
            commits=peak.count,
            context=peak_day_context(peak.date),
        )

    # No activity means no favorite, not seven tied favorites
    top_weekday = max(by_weekday)
    favorites = ()
    if top_weekday > 0:
        favorites = tuple(DAYS[i] for i, count in enumerate(by_weekday) if count == top_weekday)

    return CalendarStats(
        days=tuple(valid),
        total_count=sum(d.count for d in valid),
        active_days=sum(1 for d in valid if d.count > 0),
        total_days=len(valid),
        longest_streak=calculate_streak(valid, current=False),
        current_streak=calculate_streak(valid, current=True),
        contributions_by_month=months,
        busiest_month=busiest_month.month if busiest_month else None,
        busiest_month_count=busiest_month.count if busiest_month else 0,
        busiest_day=busiest_day,
        weekday_distribution=tuple(by_weekday),
        favorite_weekdays=favorites,
        weekend_count=by_weekday[0] + by_weekday[6],
    )
