"""Tests for UTC date ranges and error classification"""

import unittest
from datetime import date, datetime, timezone

from rewind.errors import (
    GitHubApiError,
    GitHubAuthError,
    GitHubRateLimitError,
    classify_github_error,
)
from rewind.github.date_utils import create_year_date_range, parse_timestamp


class TestCreateYearDateRange(unittest.TestCase):
    """Test query ranges for past and current years"""

    def test_past_year(self):
        self.assertEqual(
            create_year_date_range(2023, today=date(2025, 2, 1)),
            {"from": "2023-01-01T00:00:00Z", "to": "2023-12-31T23:59:59Z"}
        )

    def test_current_year_capped_at_today(self):
        self.assertEqual(
            create_year_date_range(2024, today=date(2024, 2, 29)),
            {"from": "2024-01-01T00:00:00Z", "to": "2024-02-29T23:59:59Z"}
        )

    def test_without_today(self):
        self.assertEqual(create_year_date_range(2020)["to"], "2020-12-31T23:59:59Z")


class TestParseTimestamp(unittest.TestCase):

    def test_zulu_suffix(self):
        self.assertEqual(
            parse_timestamp("2024-03-01T12:30:00Z"),
            datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc)
        )

    def test_invalid(self):
        self.assertIsNone(parse_timestamp(""))
        self.assertIsNone(parse_timestamp(None))
        self.assertIsNone(parse_timestamp("yesterday"))


class TestClassifyGitHubError(unittest.TestCase):
    """Test mapping of error messages onto error types"""

    def test_auth(self):
        error = classify_github_error(Exception("GitHub API error: 401 Unauthorized"))
        self.assertIsInstance(error, GitHubAuthError)
        self.assertEqual(error.status_code, 401)

    def test_rate_limit(self):
        error = classify_github_error("API rate limit exceeded for user")
        self.assertIsInstance(error, GitHubRateLimitError)
        self.assertEqual(error.status_code, 429)

    def test_generic(self):
        error = classify_github_error(ValueError("something odd"))
        self.assertIs(type(error), GitHubApiError)
        self.assertEqual(error.status_code, 500)
        self.assertEqual(error.message, "something odd")

    def test_already_classified(self):
        original = GitHubRateLimitError("slow down")
        self.assertIs(classify_github_error(original), original)

    def test_empty(self):
        self.assertEqual(classify_github_error(None).message, "Unknown error")


if __name__ == "__main__":
    unittest.main()
