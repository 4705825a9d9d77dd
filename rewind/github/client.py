"""Fetch contribution data from the GitHub GraphQL API"""

import requests

from rewind.config import GITHUB_GRAPHQL_URL, REQUEST_TIMEOUT
from rewind.errors import (
    GitHubApiError,
    GitHubAuthError,
    GitHubRateLimitError,
    classify_github_error,
)
from rewind.github.date_utils import create_year_date_range
from rewind.github.queries import USER_CONTRIBUTIONS_QUERY, VIEWER_QUERY


class GraphQLClient:
    """Simple GitHub GraphQL client"""

    def __init__(self, token: str):
        self.token = token
        self.headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json"
        }

    def execute(self, query: str, variables: dict = None) -> dict:
        """Execute a GraphQL query and return its data"""
        try:
            response = requests.post(
                GITHUB_GRAPHQL_URL,
                headers=self.headers,
                json={"query": query, "variables": variables or {}},
                timeout=REQUEST_TIMEOUT
            )
        except requests.RequestException as e:
            raise GitHubApiError(f"GitHub API request failed: {e}", status_code=502) from e

        if response.status_code == 401:
            raise GitHubAuthError(f"GitHub API error: 401 {response.reason}")
        if response.status_code in (403, 429) and "rate limit" in response.text.lower():
            raise GitHubRateLimitError(f"GitHub API error: {response.status_code} rate limit exceeded")
        if not response.ok:
            raise GitHubApiError(
                f"GitHub API error: {response.status_code} {response.reason}",
                status_code=response.status_code
            )

        result = response.json()

        if result.get("errors"):
            raise classify_github_error(f"GraphQL error: {result['errors'][0].get('message')}")

        return result.get("data") or {}


class GitHubClient:
    """Queries the viewer and their yearly contributions"""

    def __init__(self, token: str):
        self.graphql = GraphQLClient(token)

    def get_viewer(self) -> dict:
        """Get the authenticated user (login, name, avatarUrl)"""
        data = self.graphql.execute(VIEWER_QUERY)
        viewer = data.get("viewer")
        if not viewer:
            raise GitHubAuthError("GitHub API returned no viewer for this token")
        return viewer

    def get_user_contributions(self, username: str, year: int, today=None) -> dict:
        """
        Get one year of contributions for a user

        Args:
            username: GitHub login
            year: Calendar year
            today: Date of the request, caps the range for the current year

        Returns:
            GraphQL response data
        """
        date_range = create_year_date_range(year, today)
        return self.graphql.execute(USER_CONTRIBUTIONS_QUERY, {
            "username": username,
            "from": date_range["from"],
            "to": date_range["to"]
        })
