"""Fetch a year of GitHub activity and turn it into statistics"""

from rewind.github.client import GitHubClient
from rewind.github.date_utils import utc_today
from rewind.github.payload import parse_contributions_response
from rewind.github.private_repos import PrivateRepoFetcher
from rewind.stats.comparison import compare_years
from rewind.stats.models import PrivateRepoStats
from rewind.stats.summary import build_year_summary


class YearStatsFetcher:
    """Fetches and assembles yearly statistics for the token's owner"""

    def __init__(self, token: str, client: GitHubClient = None, private_fetcher: PrivateRepoFetcher = None):
        """
        Args:
            token: GitHub access token
            client: Optional GraphQL client (created from the token when omitted)
            private_fetcher: Optional private repo channel (created lazily when needed)
        """
        self.token = token
        self.client = client or GitHubClient(token)
        self._private_fetcher = private_fetcher
        self._viewer = None

    @property
    def private_fetcher(self) -> PrivateRepoFetcher:
        if self._private_fetcher is None:
            self._private_fetcher = PrivateRepoFetcher(self.token)
        return self._private_fetcher

    @property
    def viewer(self) -> dict:
        if self._viewer is None:
            self._viewer = self.client.get_viewer()
        return self._viewer

    def fetch_year_summary(self, year: int, today=None):
        """
        Build the YearSummary for a year

        Args:
            year: Calendar year
            today: Date of the request (defaults to the current UTC date)

        Returns:
            YearSummary
        """
        today = today or utc_today()
        username = self.viewer["login"]
        print(f"Fetching stats for {username}, year {year}...")

        data = self.client.get_user_contributions(username, year, today)
        payload = parse_contributions_response(data)
        print(f"  {payload.total_contributions} contributions, "
              f"{payload.restricted_contributions} restricted, "
              f"{len(payload.repositories)} repositories with commits")

        private_stats = PrivateRepoStats()
        if payload.restricted_contributions > 0:
            print("  Fetching private repo stats via REST API...")
            private_stats = self.private_fetcher.fetch_private_repo_stats(
                username,
                year,
                exclude_repos=[r.repo_id for r in payload.repositories],
                today=today
            )
            print(f"  Private repos found: {len(private_stats.repos)} with {private_stats.total_commits} commits")

        return build_year_summary(payload, year, private_stats)

    def fetch_comparison(self, year: int, today=None) -> dict:
        """
        Build summaries for a year and the one before it, and compare them

        Returns:
            Dictionary with 'current', 'previous' and 'comparison' records
        """
        today = today or utc_today()
        current = self.fetch_year_summary(year, today)
        previous = self.fetch_year_summary(year - 1, today)
        return {
            "current": current,
            "previous": previous,
            "comparison": compare_years(current, previous)
        }
