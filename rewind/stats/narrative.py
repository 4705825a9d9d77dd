"""
Narrative insights for year-over-year comparisons.

Text generation is a pure mapping from comparison metrics to an ordered list
of sentences. Partial years are framed by how much of the year has elapsed,
so a two-week sample never gets the same confident claims as a finished year.
"""

from dataclasses import dataclass
from typing import Optional

from rewind.stats.utils import round_half_up


FULL_YEAR = "full-year"
SAME_PERIOD = "same-period"

# Minimum change before a secondary insight is worth mentioning
ACTIVE_DAYS_DELTA_THRESHOLD = 5
STREAK_DELTA_THRESHOLD = 3
PR_DELTA_THRESHOLD = 3

# Streak and consistency comparisons need at least half a year of data
SECONDARY_SIGNALS_MIN_DAYS = 180

# Below this, beating last year's same window is celebrated outright
LOW_BASELINE = 10


@dataclass(frozen=True)
class NarrativeMetrics:
    mode: str
    elapsed_days: int
    current_total: int
    baseline_total: int
    previous_total: int
    percent_change: int
    active_days_delta: int
    consistency_improved: bool
    longest_streak_delta: int
    pull_requests_delta: int
    new_languages: tuple
    dropped_languages: tuple
    current_primary_language: str
    previous_primary_language: str
    projected_total: Optional[int] = None


def join_names(names) -> str:
    """
    Join names into an English list.

    ["Monday"] -> "Monday", ["Go", "Rust"] -> "Go and Rust",
    ["A", "B", "C"] -> "A, B, and C"
    """
    names = list(names or [])
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return f"{names[0]} and {names[1]}"
    return f"{', '.join(names[:-1])}, and {names[-1]}"


def plural(count: int, word: str) -> str:
    return f"{count:,} {word}" if count == 1 else f"{count:,} {word}s"


def stage_for(elapsed_days: int) -> str:
    """Bucket the elapsed part of the year into a framing stage"""
    if elapsed_days <= 30:
        return "early"
    if elapsed_days <= 90:
        return "trajectory"
    if elapsed_days <= 180:
        return "midyear"
    if elapsed_days <= 270:
        return "pace"
    return "final"


# =============================================================================
# Contribution lines
# =============================================================================

def full_year_line(m: NarrativeMetrics) -> str:
    if m.percent_change > 0:
        return f"You contributed {m.percent_change}% more than last year."
    if m.percent_change < 0:
        return f"You contributed {abs(m.percent_change)}% less than last year, quality over quantity."
    return "You matched last year's contribution count exactly."


def same_window_line(m: NarrativeMetrics) -> str:
    window = plural(m.elapsed_days, "day")
    if m.baseline_total == 0 and m.current_total > 0:
        return f"You've already out-contributed the same {window} last year ({m.current_total:,} vs 0)."
    if m.percent_change > 0:
        return f"You've made {m.percent_change}% more contributions than in the same {window} last year."
    if m.percent_change < 0:
        return f"You're {abs(m.percent_change)}% behind the same {window} last year, with plenty of year left."
    if m.current_total == 0:
        return f"No contributions yet in the first {window}, same as last year."
    return f"You're exactly even with the same {window} last year."


def early_lines(m: NarrativeMetrics) -> list:
    if 0 < m.baseline_total < LOW_BASELINE and m.current_total > m.baseline_total:
        return [
            f"Off to a fast start: {plural(m.current_total, 'contribution')} in the first "
            f"{plural(m.elapsed_days, 'day')}, already past the {m.baseline_total} you had at this point last year."
        ]
    return [same_window_line(m)]


def trajectory_lines(m: NarrativeMetrics) -> list:
    lines = [same_window_line(m)]
    if m.projected_total is not None:
        lines.append(
            f"At this pace you're on track for about {m.projected_total:,} contributions this year, "
            f"compared with {m.previous_total:,} last year."
        )
    return lines


def midyear_lines(m: NarrativeMetrics) -> list:
    lines = [same_window_line(m)]
    if m.previous_total > 0:
        if m.current_total >= m.previous_total:
            lines.append(f"You've already surpassed last year's total of {m.previous_total:,} contributions.")
        else:
            share = round_half_up(m.current_total / m.previous_total * 100)
            lines.append(f"You're {share}% of the way to last year's total of {m.previous_total:,} contributions.")
    return lines


def pace_lines(m: NarrativeMetrics) -> list:
    if m.baseline_total == 0 and m.current_total > 0:
        lines = [same_window_line(m)]
    elif m.percent_change > 0:
        lines = [f"Your pace is {m.percent_change}% ahead of the same point last year."]
    elif m.percent_change < 0:
        lines = [f"Your pace is {abs(m.percent_change)}% behind the same point last year."]
    else:
        lines = ["You're keeping exactly last year's pace."]

    if m.projected_total is not None:
        lines.append(f"Keep it up and you'll finish near {m.projected_total:,} contributions.")
    return lines


def final_lines(m: NarrativeMetrics) -> list:
    lines = [same_window_line(m)]
    if m.projected_total is None:
        return lines

    if m.previous_total > 0:
        diff = round_half_up((m.projected_total - m.previous_total) / m.previous_total * 100)
        if diff > 0:
            comparison = f"{diff}% more than last year's {m.previous_total:,}"
        elif diff < 0:
            comparison = f"{abs(diff)}% fewer than last year's {m.previous_total:,}"
        else:
            comparison = f"right in line with last year's {m.previous_total:,}"
        lines.append(f"You're on track to finish the year with about {m.projected_total:,} contributions, {comparison}.")
    else:
        lines.append(f"You're on track to finish the year with about {m.projected_total:,} contributions.")
    return lines


STAGE_LINES = {
    "early": early_lines,
    "trajectory": trajectory_lines,
    "midyear": midyear_lines,
    "pace": pace_lines,
    "final": final_lines,
}


# =============================================================================
# Secondary signals
# =============================================================================

def consistency_lines(m: NarrativeMetrics) -> list:
    lines = []
    if m.consistency_improved and m.active_days_delta > ACTIVE_DAYS_DELTA_THRESHOLD:
        lines.append(f"You were more consistent, coding {m.active_days_delta} more days.")

    if m.longest_streak_delta > STREAK_DELTA_THRESHOLD:
        lines.append(f"Your longest streak grew by {m.longest_streak_delta} days.")
    elif m.longest_streak_delta < -STREAK_DELTA_THRESHOLD:
        lines.append(
            f"Your longest streak was {abs(m.longest_streak_delta)} days shorter, but streaks aren't everything."
        )
    return lines


def language_lines(m: NarrativeMetrics) -> list:
    lines = []
    if len(m.new_languages) == 1:
        lines.append(f"{m.new_languages[0]} entered your stack for the first time.")
    elif m.new_languages:
        lines.append(f"New languages this year: {join_names(m.new_languages)}.")

    if len(m.dropped_languages) == 1:
        lines.append(f"You stepped away from {m.dropped_languages[0]} this year.")
    elif m.dropped_languages:
        lines.append(f"Languages you stepped away from: {join_names(m.dropped_languages)}.")
    return lines


def pull_request_lines(m: NarrativeMetrics) -> list:
    if m.pull_requests_delta <= PR_DELTA_THRESHOLD:
        return []
    if m.mode == SAME_PERIOD:
        return [f"You've already merged {m.pull_requests_delta} more PRs than in all of last year."]
    return [f"You merged {m.pull_requests_delta} more PRs than last year."]


def primary_language_lines(m: NarrativeMetrics) -> list:
    current, previous = m.current_primary_language, m.previous_primary_language
    if current == previous:
        return []
    return [f"Your primary language shifted from {previous} to {current}."]


def build_insights(m: NarrativeMetrics) -> tuple:
    """
    Ordered narrative insights for a comparison

    Args:
        m: Metrics computed by the comparison engine

    Returns:
        Tuple of sentences, the contribution comparison first
    """
    if m.mode == FULL_YEAR:
        insights = [full_year_line(m)]
        insights.extend(consistency_lines(m))
    else:
        insights = STAGE_LINES[stage_for(m.elapsed_days)](m)
        if m.elapsed_days > SECONDARY_SIGNALS_MIN_DAYS:
            insights.extend(consistency_lines(m))

    insights.extend(language_lines(m))
    insights.extend(pull_request_lines(m))
    insights.extend(primary_language_lines(m))
    return tuple(insights)
