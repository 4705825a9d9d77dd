"""Year-over-year comparison of two yearly summaries"""

from rewind.stats.calendar import normalize_calendar
from rewind.stats.models import YearComparison, YearSummary
from rewind.stats.narrative import FULL_YEAR, SAME_PERIOD, NarrativeMetrics, build_insights
from rewind.stats.utils import round_half_up


# A year with fewer calendar days than this is still in progress
FULL_YEAR_THRESHOLD = 350

# Fewer days than this are too noisy to extrapolate
MIN_PROJECTION_DAYS = 7

DAYS_PER_YEAR = 365


def percent_change(delta: int, base: int) -> int:
    """Rounded percentage of delta relative to base, 0 when base is 0"""
    if base <= 0:
        return 0
    return round_half_up(delta / base * 100)


def consistency(active_days: int, total_days: int) -> float:
    return active_days / total_days if total_days > 0 else 0


def day_of_year(day) -> int:
    return day.timetuple().tm_yday


def same_period_days(days, elapsed_days: int) -> list:
    """Days whose day-of-year falls within the first elapsed_days of their own year"""
    return [d for d in days if day_of_year(d.date) <= elapsed_days]


def project_year_total(total: int, elapsed_days: int):
    """Linear projection to a full year, None when there is too little data"""
    if elapsed_days < MIN_PROJECTION_DAYS:
        return None
    return round_half_up(total / elapsed_days * DAYS_PER_YEAR)


def language_changes(current: YearSummary, previous: YearSummary) -> tuple:
    current_names = [lang.name for lang in current.craft.languages]
    previous_names = [lang.name for lang in previous.craft.languages]
    current_set = set(current_names)
    previous_set = set(previous_names)
    new = tuple(name for name in current_names if name not in previous_set)
    dropped = tuple(name for name in previous_names if name not in current_set)
    return new, dropped


def compare_years(current: YearSummary, previous: YearSummary) -> YearComparison:
    """
    Compare the current year against the previous one

    A current year with fewer than FULL_YEAR_THRESHOLD days is compared against
    the same elapsed window of the previous year rather than its full total.

    Args:
        current: Summary of the year being reviewed
        previous: Summary of the year before it

    Returns:
        YearComparison with deltas and narrative insights
    """
    elapsed = current.rhythm.total_days
    mode = SAME_PERIOD if elapsed < FULL_YEAR_THRESHOLD else FULL_YEAR

    if mode == FULL_YEAR:
        baseline = previous.total_contributions
        baseline_active_days = previous.rhythm.active_days
        baseline_total_days = previous.rhythm.total_days
        baseline_streak = previous.rhythm.longest_streak
        projected = None
    else:
        window = normalize_calendar(same_period_days(previous.rhythm.contribution_days, elapsed))
        baseline = window.total_count
        if not window.days and previous.total_contributions > 0:
            # No daily calendar for the previous year: prorate its total
            baseline = round_half_up(previous.total_contributions * elapsed / DAYS_PER_YEAR)
        baseline_active_days = window.active_days
        baseline_total_days = window.total_days
        baseline_streak = window.longest_streak
        projected = project_year_total(current.total_contributions, elapsed)

    contributions_delta = current.total_contributions - baseline
    contributions_percent = percent_change(contributions_delta, baseline)
    active_days_delta = current.rhythm.active_days - baseline_active_days
    streak_delta = current.rhythm.longest_streak - baseline_streak
    pull_requests_delta = (
        current.collaboration.pull_requests_merged - previous.collaboration.pull_requests_merged
    )
    consistency_improved = (
        consistency(current.rhythm.active_days, current.rhythm.total_days)
        > consistency(baseline_active_days, baseline_total_days)
    )
    new_languages, dropped_languages = language_changes(current, previous)

    insights = build_insights(NarrativeMetrics(
        mode=mode,
        elapsed_days=elapsed,
        current_total=current.total_contributions,
        baseline_total=baseline,
        previous_total=previous.total_contributions,
        percent_change=contributions_percent,
        active_days_delta=active_days_delta,
        consistency_improved=consistency_improved,
        longest_streak_delta=streak_delta,
        pull_requests_delta=pull_requests_delta,
        new_languages=new_languages,
        dropped_languages=dropped_languages,
        current_primary_language=current.craft.primary_language,
        previous_primary_language=previous.craft.primary_language,
        projected_total=projected,
    ))

    return YearComparison(
        mode=mode,
        elapsed_days=elapsed,
        contributions_delta=contributions_delta,
        contributions_percent_change=contributions_percent,
        active_days_delta=active_days_delta,
        longest_streak_delta=streak_delta,
        pull_requests_delta=pull_requests_delta,
        new_languages=new_languages,
        dropped_languages=dropped_languages,
        consistency_improved=consistency_improved,
        baseline_contributions=baseline,
        projected_year_total=projected,
        narrative_insights=insights,
    )
