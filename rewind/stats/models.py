"""Immutable record types shared by the statistics pipeline"""

import dataclasses
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from rewind.stats.utils import parse_day


@dataclass(frozen=True)
class ActivityDay:
    """Raw contribution calendar entry as reported upstream"""
    date: str
    count: int


@dataclass(frozen=True)
class CalendarDay:
    """Validated calendar entry"""
    date: date
    count: int


@dataclass(frozen=True)
class MonthCount:
    month: str
    count: int


@dataclass(frozen=True)
class BusiestDay:
    date: str
    formatted_date: str
    commits: int
    context: str = ""


@dataclass(frozen=True)
class LanguageShare:
    name: str
    bytes: int
    percentage: int
    color: str


@dataclass(frozen=True)
class RepoContribution:
    repo_id: str
    commit_count: int
    language_bytes: dict = field(default_factory=dict)
    language_colors: dict = field(default_factory=dict)


@dataclass(frozen=True)
class CollaboratorTally:
    username: str
    interactions: int


@dataclass(frozen=True)
class PullRequestEvent:
    merged: bool = False
    repository: Optional[str] = None


@dataclass(frozen=True)
class ReviewEvent:
    author: Optional[str] = None


@dataclass(frozen=True)
class IssueEvent:
    closed: bool = False


@dataclass(frozen=True)
class FacetSample:
    """A paginated facet: the total upstream reported plus the records retrieved"""
    total_count: int = 0
    nodes: tuple = ()

    @property
    def retrieved(self) -> int:
        return len(self.nodes)


@dataclass(frozen=True)
class UserIdentity:
    username: str
    name: Optional[str] = None
    avatar_url: str = ""


@dataclass(frozen=True)
class ContributionPayload:
    """Typed view of one year of upstream contribution data"""
    user: UserIdentity
    total_contributions: int = 0
    restricted_contributions: int = 0
    days: tuple = ()
    repositories: tuple = ()
    pull_requests: FacetSample = FacetSample()
    reviews: FacetSample = FacetSample()
    issues: FacetSample = FacetSample()
    repository_total: Optional[int] = None


@dataclass(frozen=True)
class PrivateRepoStats:
    repos: tuple = ()
    total_commits: int = 0


@dataclass(frozen=True)
class TruncationFlags:
    pull_requests: bool = False
    pull_request_reviews: bool = False
    issues: bool = False
    repositories: bool = False


@dataclass(frozen=True)
class DataCompleteness:
    restricted_contributions: int = 0
    percentage_accessible: int = 100
    repos_analyzed: int = 0
    truncation: TruncationFlags = TruncationFlags()


@dataclass(frozen=True)
class RhythmStats:
    active_days: int
    total_days: int
    longest_streak: int
    current_streak: int
    busiest_month: Optional[str]
    busiest_month_count: int
    contributions_by_month: tuple
    contribution_days: tuple = ()


@dataclass(frozen=True)
class CraftStats:
    primary_language: str
    primary_language_percentage: int
    languages: tuple
    top_repository: Optional[str]


@dataclass(frozen=True)
class CollaborationStats:
    pull_requests_opened: int
    pull_requests_merged: int
    pull_requests_reviewed: int
    issues_closed: int
    unique_collaborators: int
    top_collaborators: tuple
    review_style: str
    is_merge_rate_approximate: bool = False


@dataclass(frozen=True)
class PeakMoments:
    busiest_day: Optional[BusiestDay]
    favorite_time_of_day: str
    favorite_days_of_week: tuple
    late_night_commits: int
    weekend_commits: int
    average_commits_per_active_day: float


@dataclass(frozen=True)
class YearSummary:
    user: UserIdentity
    year: int
    total_contributions: int
    data_completeness: DataCompleteness
    rhythm: RhythmStats
    craft: CraftStats
    collaboration: CollaborationStats
    peak_moments: PeakMoments
    activity_level: str

    def to_dict(self) -> dict:
        return to_json_ready(self)


@dataclass(frozen=True)
class YearComparison:
    mode: str
    elapsed_days: int
    contributions_delta: int
    contributions_percent_change: int
    active_days_delta: int
    longest_streak_delta: int
    pull_requests_delta: int
    new_languages: tuple
    dropped_languages: tuple
    consistency_improved: bool
    baseline_contributions: int
    projected_year_total: Optional[int]
    narrative_insights: tuple

    def to_dict(self) -> dict:
        return to_json_ready(self)


def to_json_ready(value):
    """Convert records (and the dates inside them) into plain JSON-compatible data"""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_json_ready(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, (list, tuple)):
        return [to_json_ready(v) for v in value]
    if isinstance(value, dict):
        return {k: to_json_ready(v) for k, v in value.items()}
    if isinstance(value, date):
        return value.isoformat()
    return value


def calendar_days_from_dicts(entries) -> tuple:
    """Saved calendar entries as CalendarDay records; entries with a bad date are skipped"""
    days = []
    for entry in entries or []:
        parsed = parse_day(entry.get("date")) if isinstance(entry, dict) else None
        if parsed is None:
            continue
        days.append(CalendarDay(parsed, entry.get("count", 0)))
    return tuple(days)


def year_summary_from_dict(data: dict) -> YearSummary:
    """
    Rebuild a YearSummary from the output of YearSummary.to_dict().

    Missing sections fall back to empty values so that summaries written by
    older versions still load.
    """
    user = data.get("user") or {}
    completeness = data.get("data_completeness") or {}
    truncation = completeness.get("truncation") or {}
    rhythm = data.get("rhythm") or {}
    craft = data.get("craft") or {}
    collaboration = data.get("collaboration") or {}
    peak = data.get("peak_moments") or {}
    busiest_day = peak.get("busiest_day")

    return YearSummary(
        user=UserIdentity(
            username=user.get("username", ""),
            name=user.get("name"),
            avatar_url=user.get("avatar_url", ""),
        ),
        year=int(data.get("year", 0)),
        total_contributions=int(data.get("total_contributions", 0)),
        data_completeness=DataCompleteness(
            restricted_contributions=completeness.get("restricted_contributions", 0),
            percentage_accessible=completeness.get("percentage_accessible", 100),
            repos_analyzed=completeness.get("repos_analyzed", 0),
            truncation=TruncationFlags(**{
                f.name: bool(truncation.get(f.name, False))
                for f in dataclasses.fields(TruncationFlags)
            }),
        ),
        rhythm=RhythmStats(
            active_days=rhythm.get("active_days", 0),
            total_days=rhythm.get("total_days", 0),
            longest_streak=rhythm.get("longest_streak", 0),
            current_streak=rhythm.get("current_streak", 0),
            busiest_month=rhythm.get("busiest_month"),
            busiest_month_count=rhythm.get("busiest_month_count", 0),
            contributions_by_month=tuple(
                MonthCount(m["month"], m["count"]) for m in rhythm.get("contributions_by_month", [])
            ),
            contribution_days=calendar_days_from_dicts(rhythm.get("contribution_days", [])),
        ),
        craft=CraftStats(
            primary_language=craft.get("primary_language", "Unknown"),
            primary_language_percentage=craft.get("primary_language_percentage", 0),
            languages=tuple(LanguageShare(**lang) for lang in craft.get("languages", [])),
            top_repository=craft.get("top_repository"),
        ),
        collaboration=CollaborationStats(
            pull_requests_opened=collaboration.get("pull_requests_opened", 0),
            pull_requests_merged=collaboration.get("pull_requests_merged", 0),
            pull_requests_reviewed=collaboration.get("pull_requests_reviewed", 0),
            issues_closed=collaboration.get("issues_closed", 0),
            unique_collaborators=collaboration.get("unique_collaborators", 0),
            top_collaborators=tuple(
                CollaboratorTally(**c) for c in collaboration.get("top_collaborators", [])
            ),
            review_style=collaboration.get("review_style", "balanced"),
            is_merge_rate_approximate=collaboration.get("is_merge_rate_approximate", False),
        ),
        peak_moments=PeakMoments(
            busiest_day=BusiestDay(**busiest_day) if busiest_day else None,
            favorite_time_of_day=peak.get("favorite_time_of_day", "evening"),
            favorite_days_of_week=tuple(peak.get("favorite_days_of_week", [])),
            late_night_commits=peak.get("late_night_commits", 0),
            weekend_commits=peak.get("weekend_commits", 0),
            average_commits_per_active_day=peak.get("average_commits_per_active_day", 0),
        ),
        activity_level=data.get("activity_level", "zero"),
    )
