"""Detect truncated facets and estimate how much activity is visible"""

from rewind.config import FACET_PAGE_CAP
from rewind.stats.models import DataCompleteness, TruncationFlags
from rewind.stats.utils import round_half_up


FACETS = ("pull_requests", "pull_request_reviews", "issues", "repositories")


def is_truncated(facet: str, total, retrieved: int, page_cap: int) -> bool:
    """
    True when upstream reported more records than were retrieved.

    The repositories listing reports no total, so a full page is treated as
    likely truncated.
    """
    if total is not None and total > retrieved:
        return True
    if facet == "repositories" and retrieved >= page_cap:
        return True
    return False


def percentage_accessible(total_contributions: int, still_restricted: int) -> int:
    if total_contributions <= 0:
        return 100
    return round_half_up((total_contributions - still_restricted) / total_contributions * 100)


def detect_completeness(
    facet_totals: dict,
    facet_sample_sizes: dict,
    page_cap: int = FACET_PAGE_CAP,
    total_contributions: int = 0,
    restricted_contributions: int = 0,
    recovered_contributions: int = 0,
    repos_analyzed: int = 0,
) -> DataCompleteness:
    """
    Build completeness metadata for a year

    Args:
        facet_totals: facet name -> total reported upstream (None when unknown)
        facet_sample_sizes: facet name -> number of records retrieved
        page_cap: Page size used for the capped queries
        total_contributions: Calendar total for the year
        restricted_contributions: Contributions upstream would not detail
        recovered_contributions: Restricted contributions found through the private repo channel
        repos_analyzed: Repositories that fed the language statistics

    Returns:
        DataCompleteness
    """
    flags = {
        facet: is_truncated(
            facet,
            facet_totals.get(facet),
            facet_sample_sizes.get(facet, 0),
            page_cap,
        )
        for facet in FACETS
    }

    still_restricted = max(0, restricted_contributions - recovered_contributions)

    return DataCompleteness(
        restricted_contributions=still_restricted,
        percentage_accessible=percentage_accessible(total_contributions, still_restricted),
        repos_analyzed=repos_analyzed,
        truncation=TruncationFlags(**flags),
    )
