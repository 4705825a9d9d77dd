"""Parse the contributions GraphQL response into typed records"""

from rewind.stats.models import (
    ActivityDay,
    ContributionPayload,
    FacetSample,
    IssueEvent,
    PullRequestEvent,
    RepoContribution,
    ReviewEvent,
    UserIdentity,
)


def as_dict(value) -> dict:
    return value if isinstance(value, dict) else {}


def as_list(value) -> list:
    return value if isinstance(value, list) else []


def as_int(value, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def parse_calendar(calendar: dict) -> tuple:
    """Flatten weeks into ActivityDay records; dates are validated later"""
    days = []
    for week in as_list(calendar.get("weeks")):
        for day in as_list(as_dict(week).get("contributionDays")):
            day = as_dict(day)
            if not day:
                continue
            days.append(ActivityDay(
                date=day.get("date") or "",
                count=as_int(day.get("contributionCount")),
            ))
    return tuple(days)


def parse_repository(entry: dict):
    """Turn a commitContributionsByRepository entry into a RepoContribution"""
    repository = as_dict(entry.get("repository"))
    contributions = as_dict(entry.get("contributions"))
    name = repository.get("nameWithOwner") or repository.get("name")
    if not name or not contributions:
        return None

    language_bytes = {}
    language_colors = {}
    for edge in as_list(as_dict(repository.get("languages")).get("edges")):
        edge = as_dict(edge)
        node = as_dict(edge.get("node"))
        language = node.get("name")
        if not language:
            continue
        language_bytes[language] = language_bytes.get(language, 0) + max(0, as_int(edge.get("size")))
        if node.get("color"):
            language_colors[language] = node["color"]

    return RepoContribution(
        repo_id=name,
        commit_count=as_int(contributions.get("totalCount")),
        language_bytes=language_bytes,
        language_colors=language_colors,
    )


def parse_pull_requests(facet: dict) -> FacetSample:
    nodes = []
    for node in as_list(facet.get("nodes")):
        pull_request = as_dict(as_dict(node).get("pullRequest"))
        if not pull_request:
            continue
        nodes.append(PullRequestEvent(
            merged=bool(pull_request.get("merged")),
            repository=as_dict(pull_request.get("repository")).get("nameWithOwner"),
        ))
    return FacetSample(total_count=as_int(facet.get("totalCount"), len(nodes)), nodes=tuple(nodes))


def parse_reviews(facet: dict) -> FacetSample:
    nodes = []
    for node in as_list(facet.get("nodes")):
        pull_request = as_dict(as_dict(node).get("pullRequest"))
        if not pull_request:
            continue
        nodes.append(ReviewEvent(author=as_dict(pull_request.get("author")).get("login")))
    return FacetSample(total_count=as_int(facet.get("totalCount"), len(nodes)), nodes=tuple(nodes))


def parse_issues(facet: dict) -> FacetSample:
    nodes = []
    for node in as_list(facet.get("nodes")):
        issue = as_dict(as_dict(node).get("issue"))
        if not issue:
            continue
        nodes.append(IssueEvent(closed=issue.get("closedAt") is not None))
    return FacetSample(total_count=as_int(facet.get("totalCount"), len(nodes)), nodes=tuple(nodes))


def parse_contributions_response(data: dict) -> ContributionPayload:
    """
    Build a ContributionPayload from the 'data' part of the contributions query.

    Every nested field is optional upstream, so each access falls back to an
    empty value instead of failing.

    Args:
        data: GraphQL response data ({"user": {...}})

    Returns:
        ContributionPayload
    """
    user = as_dict(as_dict(data).get("user"))
    collection = as_dict(user.get("contributionsCollection"))
    calendar = as_dict(collection.get("contributionCalendar"))

    repositories = []
    for entry in as_list(collection.get("commitContributionsByRepository")):
        repo = parse_repository(as_dict(entry))
        if repo is not None:
            repositories.append(repo)

    return ContributionPayload(
        user=UserIdentity(
            username=user.get("login") or "",
            name=user.get("name"),
            avatar_url=user.get("avatarUrl") or "",
        ),
        total_contributions=as_int(calendar.get("totalContributions")),
        restricted_contributions=as_int(collection.get("restrictedContributionsCount")),
        days=parse_calendar(calendar),
        repositories=tuple(repositories),
        pull_requests=parse_pull_requests(as_dict(collection.get("pullRequestContributions"))),
        reviews=parse_reviews(as_dict(collection.get("pullRequestReviewContributions"))),
        issues=parse_issues(as_dict(collection.get("issueContributions"))),
        repository_total=None,
    )
