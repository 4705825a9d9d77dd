"""Tests for the private repository channel"""

import unittest
from datetime import date, datetime, timezone
from unittest.mock import MagicMock

from github import GithubException

from rewind.github.private_repos import PrivateRepoFetcher


def fake_repo(name, pushed_at, commits=0, languages=None, private=True):
    repo = MagicMock()
    repo.full_name = name
    repo.private = private
    repo.pushed_at = pushed_at
    repo.get_commits.return_value.totalCount = commits
    repo.get_languages.return_value = languages or {}
    return repo


class TestPrivateRepoFetcher(unittest.TestCase):
    """Test filtering, batching and per-repository failure isolation"""

    def setUp(self):
        self.client = MagicMock()
        self.fetcher = PrivateRepoFetcher("token", batch_size=2, client=self.client)
        self.today = date(2024, 6, 1)

    def set_repos(self, *repos):
        self.client.get_user.return_value.get_repos.return_value = list(repos)

    def test_only_private_repos_pushed_this_year(self):
        self.set_repos(
            fake_repo("me/new", datetime(2024, 2, 1, tzinfo=timezone.utc)),
            fake_repo("me/naive", datetime(2024, 3, 1)),
            fake_repo("me/stale", datetime(2023, 12, 31, tzinfo=timezone.utc)),
            fake_repo("me/never", None),
            fake_repo("me/public", datetime(2024, 2, 1, tzinfo=timezone.utc), private=False),
        )

        repos = self.fetcher.get_private_repos(2024, self.today)

        self.assertEqual([r.full_name for r in repos], ["me/new", "me/naive"])

    def test_fetch_stats(self):
        """Test repos without commits and excluded repos are left out"""
        pushed = datetime(2024, 5, 1, tzinfo=timezone.utc)
        self.set_repos(
            fake_repo("me/a", pushed, commits=4, languages={"Go": 100}),
            fake_repo("me/b", pushed, commits=0, languages={"C": 10}),
            fake_repo("me/c", pushed, commits=6, languages={"Rust": 50}),
            fake_repo("me/public-in-graphql", pushed, commits=9),
        )

        stats = self.fetcher.fetch_private_repo_stats(
            "me", 2024, exclude_repos=["me/public-in-graphql"], today=self.today
        )

        self.assertEqual([r.repo_id for r in stats.repos], ["me/a", "me/c"])
        self.assertEqual(stats.total_commits, 10)
        self.assertEqual(stats.repos[1].language_bytes, {"Rust": 50})

    def test_failing_repo_counts_as_zero(self):
        """Test one failing repository does not abort the others"""
        pushed = datetime(2024, 5, 1, tzinfo=timezone.utc)
        broken = fake_repo("me/broken", pushed)
        broken.get_commits.side_effect = GithubException(500, {"message": "boom"}, None)
        flaky = fake_repo("me/flaky", pushed, commits=3)
        flaky.get_languages.side_effect = GithubException(404, {"message": "Not Found"}, None)
        self.set_repos(broken, flaky, fake_repo("me/ok", pushed, commits=2, languages={"Go": 1}))

        stats = self.fetcher.fetch_private_repo_stats("me", 2024, today=self.today)

        self.assertEqual([r.repo_id for r in stats.repos], ["me/flaky", "me/ok"])
        self.assertEqual(stats.repos[0].language_bytes, {})
        self.assertEqual(stats.total_commits, 5)

    def test_commit_query_range(self):
        repo = fake_repo("me/a", datetime(2024, 5, 1, tzinfo=timezone.utc), commits=1)

        self.fetcher.get_repo_commit_count(repo, "me", 2024, self.today)

        kwargs = repo.get_commits.call_args.kwargs
        self.assertEqual(kwargs["author"], "me")
        self.assertEqual(kwargs["since"], datetime(2024, 1, 1, tzinfo=timezone.utc))
        self.assertEqual(kwargs["until"], datetime(2024, 6, 1, 23, 59, 59, tzinfo=timezone.utc))

    def test_no_private_repos(self):
        self.set_repos()

        stats = self.fetcher.fetch_private_repo_stats("me", 2024, today=self.today)

        self.assertEqual(stats.repos, ())
        self.assertEqual(stats.total_commits, 0)


if __name__ == "__main__":
    unittest.main()
