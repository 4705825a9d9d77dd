"""Derive pull request, review and collaborator statistics"""

from collections import Counter

from rewind.stats.bots import is_bot
from rewind.stats.models import CollaborationStats, CollaboratorTally, FacetSample


MAX_COLLABORATORS = 5
THOROUGH_REVIEW_RATIO = 1.5
QUICK_REVIEW_RATIO = 0.5


def classify_review_style(opened: int, reviewed: int) -> str:
    """'thorough', 'quick' or 'balanced' based on reviews per opened PR"""
    ratio = reviewed / opened if opened > 0 else 0
    if ratio > THOROUGH_REVIEW_RATIO:
        return "thorough"
    if ratio < QUICK_REVIEW_RATIO:
        return "quick"
    return "balanced"


def tally_collaborators(username: str, reviews: FacetSample) -> list:
    """Count reviews per PR author, skipping the user and automated accounts"""
    own_login = (username or "").lower()
    counts = Counter()

    for review in reviews.nodes:
        author = getattr(review, "author", None)
        if not author or author.lower() == own_login or is_bot(author):
            continue
        counts[author] += 1

    # Counter.most_common keeps insertion order among equal counts
    return [CollaboratorTally(name, interactions) for name, interactions in counts.most_common()]


def aggregate_collaboration(
    username: str,
    pull_requests: FacetSample,
    reviews: FacetSample,
    issues: FacetSample,
) -> CollaborationStats:
    """
    Summarize collaboration for one year

    Args:
        username: Login of the user the stats belong to
        pull_requests: PullRequestEvent sample with the reported total
        reviews: ReviewEvent sample with the reported total
        issues: IssueEvent sample with the reported total

    Returns:
        CollaborationStats
    """
    opened = pull_requests.total_count
    reviewed = reviews.total_count
    merged = sum(1 for pr in pull_requests.nodes if getattr(pr, "merged", False))
    closed = sum(1 for issue in issues.nodes if getattr(issue, "closed", False))

    collaborators = tally_collaborators(username, reviews)

    return CollaborationStats(
        pull_requests_opened=opened,
        pull_requests_merged=merged,
        pull_requests_reviewed=reviewed,
        issues_closed=closed,
        unique_collaborators=len(collaborators),
        top_collaborators=tuple(collaborators[:MAX_COLLABORATORS]),
        review_style=classify_review_style(opened, reviewed),
        is_merge_rate_approximate=pull_requests.total_count > pull_requests.retrieved,
    )
