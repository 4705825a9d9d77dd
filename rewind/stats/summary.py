"""Assemble one year of statistics from the individual aggregators"""

from rewind.config import FACET_PAGE_CAP
from rewind.stats.calendar import normalize_calendar
from rewind.stats.collaboration import aggregate_collaboration
from rewind.stats.completeness import detect_completeness
from rewind.stats.languages import aggregate_languages
from rewind.stats.models import (
    ContributionPayload,
    CraftStats,
    PeakMoments,
    PrivateRepoStats,
    RhythmStats,
    YearSummary,
)


# Commit timestamps are not analyzed; these stay fixed
FAVORITE_TIME_OF_DAY = "evening"
LATE_NIGHT_COMMITS = 0

SPARSE_MAX_CONTRIBUTIONS = 10
SPARSE_MAX_ACTIVE_DAYS = 5
HIGH_MIN_CONTRIBUTIONS = 500
HIGH_MIN_ACTIVE_DAYS = 100


def classify_activity_level(total_contributions: int, active_days: int) -> str:
    """
    Classify activity as 'zero', 'sparse', 'typical' or 'high'.

    Sparse needs both metrics below their limits; high needs either one at or
    above its limit.
    """
    if total_contributions == 0 and active_days == 0:
        return "zero"
    if total_contributions < SPARSE_MAX_CONTRIBUTIONS and active_days < SPARSE_MAX_ACTIVE_DAYS:
        return "sparse"
    if total_contributions >= HIGH_MIN_CONTRIBUTIONS or active_days >= HIGH_MIN_ACTIVE_DAYS:
        return "high"
    return "typical"


def build_year_summary(
    payload: ContributionPayload,
    year: int,
    private_stats: PrivateRepoStats = None,
) -> YearSummary:
    """
    Compose calendar, language, collaboration and completeness stats

    Args:
        payload: Parsed upstream contribution data for the year
        year: Calendar year the data covers
        private_stats: Optional data gathered from the private repo channel

    Returns:
        YearSummary
    """
    private_stats = private_stats or PrivateRepoStats()

    calendar = normalize_calendar(payload.days)
    languages = aggregate_languages(payload.repositories, private_stats.repos)
    collaboration = aggregate_collaboration(
        payload.user.username,
        payload.pull_requests,
        payload.reviews,
        payload.issues,
    )

    completeness = detect_completeness(
        facet_totals={
            "pull_requests": payload.pull_requests.total_count,
            "pull_request_reviews": payload.reviews.total_count,
            "issues": payload.issues.total_count,
            "repositories": payload.repository_total,
        },
        facet_sample_sizes={
            "pull_requests": payload.pull_requests.retrieved,
            "pull_request_reviews": payload.reviews.retrieved,
            "issues": payload.issues.retrieved,
            "repositories": len(payload.repositories),
        },
        page_cap=FACET_PAGE_CAP,
        total_contributions=payload.total_contributions,
        restricted_contributions=payload.restricted_contributions,
        recovered_contributions=private_stats.total_commits,
        repos_analyzed=len(payload.repositories) + len(private_stats.repos),
    )

    total = payload.total_contributions
    average = total / calendar.active_days if calendar.active_days > 0 else 0

    return YearSummary(
        user=payload.user,
        year=year,
        total_contributions=total,
        data_completeness=completeness,
        rhythm=RhythmStats(
            active_days=calendar.active_days,
            total_days=calendar.total_days,
            longest_streak=calendar.longest_streak,
            current_streak=calendar.current_streak,
            busiest_month=calendar.busiest_month,
            busiest_month_count=calendar.busiest_month_count,
            contributions_by_month=calendar.contributions_by_month,
            contribution_days=calendar.days,
        ),
        craft=CraftStats(
            primary_language=languages.top_language,
            primary_language_percentage=languages.top_language_percentage,
            languages=languages.distribution,
            top_repository=languages.top_repository,
        ),
        collaboration=collaboration,
        peak_moments=PeakMoments(
            busiest_day=calendar.busiest_day,
            favorite_time_of_day=FAVORITE_TIME_OF_DAY,
            favorite_days_of_week=calendar.favorite_weekdays,
            late_night_commits=LATE_NIGHT_COMMITS,
            weekend_commits=calendar.weekend_count,
            average_commits_per_active_day=average,
        ),
        activity_level=classify_activity_level(total, calendar.active_days),
    )
