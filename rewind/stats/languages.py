"""Aggregate byte-weighted language data across repositories"""

from dataclasses import dataclass
from typing import Optional

from rewind.stats.language_colors import get_language_color
from rewind.stats.models import LanguageShare
from rewind.stats.utils import round_half_up


UNKNOWN_LANGUAGE = "Unknown"
MAX_LANGUAGES = 6


@dataclass(frozen=True)
class LanguageStats:
    distribution: tuple
    top_language: str
    top_language_percentage: int
    top_repository: Optional[str]
    total_bytes: int
    repos: tuple


def merge_repositories(primary_repos, supplementary_repos) -> list:
    """Combine both channels, keeping the first entry seen for each repo_id"""
    merged = []
    seen = set()
    for repo in list(primary_repos or []) + list(supplementary_repos or []):
        if repo is None or repo.repo_id in seen:
            continue
        seen.add(repo.repo_id)
        merged.append(repo)
    return merged


def aggregate_languages(primary_repos, supplementary_repos=None) -> LanguageStats:
    """
    Build the language distribution and pick the top repository

    Args:
        primary_repos: RepoContribution records from the GraphQL listing
        supplementary_repos: RepoContribution records from the private repo listing

    Returns:
        LanguageStats with at most MAX_LANGUAGES entries in the distribution
    """
    repos = merge_repositories(primary_repos, supplementary_repos)

    language_bytes = {}
    language_colors = {}
    top_repo = None
    top_repo_commits = 0

    for repo in repos:
        if repo.commit_count > top_repo_commits:
            top_repo_commits = repo.commit_count
            top_repo = repo.repo_id

        for name, size in (repo.language_bytes or {}).items():
            if not name:
                continue
            if name not in language_bytes:
                language_bytes[name] = 0
                language_colors[name] = get_language_color(name, (repo.language_colors or {}).get(name))
            language_bytes[name] += max(0, int(size or 0))

    total_bytes = sum(language_bytes.values())

    # Filter on raw bytes: hundreds of tiny languages may each round to 0%
    present = [(name, size) for name, size in language_bytes.items() if size > 0]
    present.sort(key=lambda item: item[1], reverse=True)

    distribution = tuple(
        LanguageShare(
            name=name,
            bytes=size,
            percentage=round_half_up(size / total_bytes * 100),
            color=language_colors[name],
        )
        for name, size in present[:MAX_LANGUAGES]
    )

    if distribution:
        top_language = distribution[0].name
        top_percentage = distribution[0].percentage
    else:
        top_language = UNKNOWN_LANGUAGE
        top_percentage = 0

    return LanguageStats(
        distribution=distribution,
        top_language=top_language,
        top_language_percentage=top_percentage,
        top_repository=top_repo,
        total_bytes=total_bytes,
        repos=tuple(repos),
    )
