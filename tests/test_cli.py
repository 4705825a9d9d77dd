"""Tests for the command line interface"""

import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from rewind import cli
from rewind.github.payload import parse_contributions_response
from rewind.stats.summary import build_year_summary


def summary_for(year, total):
    data = {
        "user": {
            "login": "octocat",
            "contributionsCollection": {
                "contributionCalendar": {
                    "totalContributions": total,
                    "weeks": [{"contributionDays": [
                        {"date": f"{year}-01-01", "contributionCount": total}
                    ]}]
                }
            }
        }
    }
    return build_year_summary(parse_contributions_response(data), year)


class TestCli(unittest.TestCase):
    """Test the summary and compare-files commands"""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()

    def write_summary(self, name, summary):
        path = os.path.join(self.tmpdir.name, name)
        with open(path, 'w') as f:
            json.dump(summary.to_dict(), f)
        return path

    def test_compare_files(self):
        current = self.write_summary("2024.json", summary_for(2024, 30))
        previous = self.write_summary("2023.json", summary_for(2023, 10))

        out = io.StringIO()
        with redirect_stdout(out):
            cli.main(["compare-files", current, previous])

        result = json.loads(out.getvalue())
        self.assertEqual(result["baseline_contributions"], 10)
        self.assertEqual(result["contributions_delta"], 20)

    @patch("rewind.cli.get_github_token", return_value=None)
    def test_summary_requires_token(self, _):
        with self.assertRaises(ValueError):
            cli.main(["summary", "--year", "2024"])

    @patch("rewind.cli.get_github_token", return_value="token")
    @patch("rewind.cli.YearStatsFetcher")
    def test_summary_written_to_file(self, mock_fetcher, _):
        mock_fetcher.return_value.fetch_year_summary.return_value = summary_for(2024, 5)
        path = os.path.join(self.tmpdir.name, "out.json")

        with redirect_stdout(io.StringIO()):
            cli.main(["summary", "--year", "2024", "-o", path])

        mock_fetcher.assert_called_once_with("token")
        self.assertEqual(cli.load_summary(path), summary_for(2024, 5))


if __name__ == "__main__":
    unittest.main()
