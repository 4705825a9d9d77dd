"""Tests for parsing upstream payloads and assembling yearly summaries"""

import json
import unittest
from datetime import date

from rewind.github.payload import parse_contributions_response
from rewind.stats.models import PrivateRepoStats, RepoContribution, year_summary_from_dict
from rewind.stats.summary import build_year_summary, classify_activity_level


def contributions_response() -> dict:
    """A trimmed-down contributions query response"""
    return {
        "user": {
            "login": "octocat",
            "name": "The Octocat",
            "avatarUrl": "https://avatars.example/octocat",
            "contributionsCollection": {
                "restrictedContributionsCount": 20,
                "contributionCalendar": {
                    "totalContributions": 40,
                    "weeks": [
                        {"contributionDays": [
                            {"date": "2024-01-06", "contributionCount": 10},
                            {"date": "2024-01-07", "contributionCount": 5},
                        ]},
                        {"contributionDays": [
                            {"date": "2024-01-08", "contributionCount": 0},
                            {"date": "2024-01-09", "contributionCount": 25},
                            None,
                            {"date": "bogus", "contributionCount": 99},
                        ]},
                        None,
                    ]
                },
                "commitContributionsByRepository": [
                    {
                        "repository": {
                            "nameWithOwner": "octocat/hello",
                            "languages": {"edges": [
                                {"size": 900, "node": {"name": "Python", "color": "#3572A5"}},
                                {"size": 100, "node": {"name": "Shell", "color": None}},
                                {"size": 50, "node": None},
                            ]},
                        },
                        "contributions": {"totalCount": 12},
                    },
                    {"repository": None, "contributions": {"totalCount": 3}},
                ],
                "pullRequestContributions": {
                    "totalCount": 3,
                    "nodes": [
                        {"pullRequest": {"merged": True, "repository": {"nameWithOwner": "octocat/hello"}}},
                        {"pullRequest": {"merged": False}},
                        {"pullRequest": None},
                    ]
                },
                "pullRequestReviewContributions": {
                    "totalCount": 2,
                    "nodes": [
                        {"pullRequest": {"author": {"login": "hubot"}}},
                        {"pullRequest": {"author": {"login": "dependabot[bot]"}}},
                    ]
                },
                "issueContributions": {
                    "totalCount": 1,
                    "nodes": [{"issue": {"closedAt": "2024-01-09T10:00:00Z"}}]
                },
            }
        }
    }


class TestParseContributions(unittest.TestCase):
    """Test defensive parsing of the GraphQL response"""

    def test_parse_full_response(self):
        """Test a typical response is mapped to typed records"""
        payload = parse_contributions_response(contributions_response())

        self.assertEqual(payload.user.username, "octocat")
        self.assertEqual(payload.total_contributions, 40)
        self.assertEqual(payload.restricted_contributions, 20)
        self.assertEqual(len(payload.days), 5)
        self.assertEqual(len(payload.repositories), 1)
        self.assertEqual(payload.repositories[0].language_bytes, {"Python": 900, "Shell": 100})
        self.assertEqual(payload.repositories[0].language_colors, {"Python": "#3572A5"})
        self.assertEqual(payload.pull_requests.total_count, 3)
        self.assertEqual(payload.pull_requests.retrieved, 2)
        self.assertEqual(payload.reviews.retrieved, 2)
        self.assertTrue(payload.issues.nodes[0].closed)

    def test_parse_empty_response(self):
        """Test missing fields default instead of raising"""
        payload = parse_contributions_response({})

        self.assertEqual(payload.user.username, "")
        self.assertEqual(payload.total_contributions, 0)
        self.assertEqual(payload.days, ())
        self.assertEqual(payload.repositories, ())
        self.assertEqual(payload.pull_requests.total_count, 0)


class TestBuildYearSummary(unittest.TestCase):
    """Test assembling a YearSummary"""

    def setUp(self):
        self.payload = parse_contributions_response(contributions_response())

    def test_summary_fields(self):
        """Test the summary composes all component stats"""
        summary = build_year_summary(self.payload, 2024)

        self.assertEqual(summary.year, 2024)
        self.assertEqual(summary.total_contributions, 40)
        self.assertEqual(summary.rhythm.total_days, 4)
        self.assertEqual(summary.rhythm.active_days, 3)
        self.assertEqual(summary.rhythm.longest_streak, 2)
        self.assertEqual(summary.rhythm.current_streak, 1)
        self.assertEqual(summary.rhythm.busiest_month, "January")
        self.assertEqual(summary.craft.primary_language, "Python")
        self.assertEqual(summary.craft.primary_language_percentage, 90)
        self.assertEqual(summary.craft.top_repository, "octocat/hello")
        self.assertEqual(summary.collaboration.pull_requests_merged, 1)
        self.assertEqual(summary.collaboration.unique_collaborators, 1)
        self.assertTrue(summary.collaboration.is_merge_rate_approximate)
        self.assertEqual(summary.peak_moments.busiest_day.date, "2024-01-09")
        self.assertEqual(summary.peak_moments.weekend_commits, 15)
        self.assertEqual(summary.peak_moments.favorite_days_of_week, ("Tuesday",))
        self.assertEqual(summary.peak_moments.favorite_time_of_day, "evening")
        self.assertEqual(summary.peak_moments.late_night_commits, 0)
        self.assertAlmostEqual(summary.peak_moments.average_commits_per_active_day, 40 / 3)
        self.assertEqual(summary.data_completeness.restricted_contributions, 20)
        self.assertEqual(summary.data_completeness.percentage_accessible, 50)
        self.assertTrue(summary.data_completeness.truncation.pull_requests)
        self.assertFalse(summary.data_completeness.truncation.repositories)
        self.assertEqual(summary.activity_level, "typical")

    def test_private_repo_stats_are_merged(self):
        """Test private repositories feed languages and completeness"""
        private_stats = PrivateRepoStats(
            repos=(RepoContribution("octocat/secret", 15, {"Rust": 4000}),),
            total_commits=15,
        )

        summary = build_year_summary(self.payload, 2024, private_stats)

        self.assertEqual(summary.craft.primary_language, "Rust")
        self.assertEqual(summary.craft.top_repository, "octocat/secret")
        self.assertEqual(summary.data_completeness.restricted_contributions, 5)
        self.assertEqual(summary.data_completeness.percentage_accessible, 88)
        self.assertEqual(summary.data_completeness.repos_analyzed, 2)

    def test_empty_payload(self):
        """Test a payload without data yields an all-zero summary"""
        summary = build_year_summary(parse_contributions_response({}), 2024)

        self.assertEqual(summary.rhythm.longest_streak, 0)
        self.assertIsNone(summary.peak_moments.busiest_day)
        self.assertEqual(summary.peak_moments.favorite_days_of_week, ())
        self.assertEqual(summary.peak_moments.average_commits_per_active_day, 0)
        self.assertEqual(summary.craft.primary_language, "Unknown")
        self.assertEqual(summary.data_completeness.percentage_accessible, 100)
        self.assertEqual(summary.activity_level, "zero")

    def test_summary_survives_json(self):
        """Test a summary written as JSON loads back unchanged"""
        summary = build_year_summary(self.payload, 2024)

        restored = year_summary_from_dict(json.loads(json.dumps(summary.to_dict())))

        self.assertEqual(restored, summary)

    def test_saved_summary_with_bad_dates(self):
        """Test calendar entries with malformed dates are dropped when loading"""
        data = build_year_summary(self.payload, 2024).to_dict()
        data["rhythm"]["contribution_days"].extend([
            {"date": "2024-13-40", "count": 3},
            {"date": None, "count": 1},
            "2024-01-10",
        ])

        restored = year_summary_from_dict(data)

        self.assertEqual(len(restored.rhythm.contribution_days), 4)
        self.assertEqual(restored.rhythm.contribution_days[-1].date, date(2024, 1, 9))


class TestActivityLevel(unittest.TestCase):
    """Test activity level classification"""

    def test_levels(self):
        self.assertEqual(classify_activity_level(0, 0), "zero")
        self.assertEqual(classify_activity_level(5, 3), "sparse")
        self.assertEqual(classify_activity_level(9, 10), "typical")
        self.assertEqual(classify_activity_level(100, 50), "typical")
        self.assertEqual(classify_activity_level(600, 50), "high")
        self.assertEqual(classify_activity_level(50, 100), "high")


if __name__ == "__main__":
    unittest.main()
