"""Gather commit and language data for private repositories through the REST API"""

from concurrent.futures import ThreadPoolExecutor
from datetime import timezone

import requests
from github import Auth, Github, GithubException

from rewind.config import PRIVATE_REPO_BATCH_SIZE
from rewind.github.date_utils import create_year_date_range, parse_timestamp
from rewind.stats.models import PrivateRepoStats, RepoContribution


class PrivateRepoFetcher:
    """
    Supplementary channel for contributions GraphQL reports as restricted.

    Each repository is queried independently; a failure on one repository
    counts as zero commits and no languages for that repository only.
    """

    def __init__(self, token: str, batch_size: int = PRIVATE_REPO_BATCH_SIZE, client: Github = None):
        self.client = client or Github(auth=Auth.Token(token))
        self.batch_size = batch_size

    def get_private_repos(self, year: int, today=None) -> list:
        """Private repos the viewer owns or collaborates on, pushed to since the start of the year"""
        date_range = create_year_date_range(year, today)
        year_start = parse_timestamp(date_range["from"])

        repos = self.client.get_user().get_repos(
            visibility="private",
            affiliation="owner,collaborator",
            sort="pushed",
            direction="desc"
        )

        active = []
        for repo in repos:
            if not repo.private or repo.pushed_at is None:
                continue
            pushed_at = repo.pushed_at
            if pushed_at.tzinfo is None:
                pushed_at = pushed_at.replace(tzinfo=timezone.utc)
            if pushed_at >= year_start:
                active.append(repo)

        return active

    def get_repo_commit_count(self, repo, username: str, year: int, today=None) -> int:
        """Count the user's commits in a repository for the year (0 on failure)"""
        date_range = create_year_date_range(year, today)
        try:
            commits = repo.get_commits(
                author=username,
                since=parse_timestamp(date_range["from"]),
                until=parse_timestamp(date_range["to"])
            )
            return commits.totalCount
        except (GithubException, requests.RequestException) as e:
            print(f"      Error fetching commits for {repo.full_name}: {e}")
            return 0

    def get_repo_languages(self, repo) -> dict:
        """Language byte counts for a repository (empty on failure)"""
        try:
            return repo.get_languages()
        except (GithubException, requests.RequestException) as e:
            print(f"      Error fetching languages for {repo.full_name}: {e}")
            return {}

    def _repo_contribution(self, repo, username: str, year: int, today) -> RepoContribution:
        return RepoContribution(
            repo_id=repo.full_name,
            commit_count=self.get_repo_commit_count(repo, username, year, today),
            language_bytes=self.get_repo_languages(repo)
        )

    def fetch_private_repo_stats(self, username: str, year: int, exclude_repos=None, today=None) -> PrivateRepoStats:
        """
        Collect commits and languages for private repos missing from GraphQL results

        Args:
            username: GitHub login whose commits are counted
            year: Calendar year
            exclude_repos: Repository full names already covered by GraphQL
            today: Date of the request, caps the range for the current year

        Returns:
            PrivateRepoStats for repositories with at least one commit
        """
        excluded = set(exclude_repos or [])
        private_repos = self.get_private_repos(year, today)
        to_query = [r for r in private_repos if r.full_name not in excluded]

        print(f"    Found {len(private_repos)} private repos active in {year}, querying {len(to_query)}")

        repos = []
        total_commits = 0

        with ThreadPoolExecutor(max_workers=self.batch_size) as executor:
            for i in range(0, len(to_query), self.batch_size):
                batch = to_query[i:i + self.batch_size]
                results = executor.map(
                    lambda repo: self._repo_contribution(repo, username, year, today),
                    batch
                )
                for result in results:
                    if result.commit_count > 0:
                        repos.append(result)
                        total_commits += result.commit_count
                        print(f"      {result.repo_id}: {result.commit_count} commits")

        return PrivateRepoStats(repos=tuple(repos), total_commits=total_commits)
