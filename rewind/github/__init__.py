"""GitHub data fetching"""

from .client import GitHubClient, GraphQLClient
from .private_repos import PrivateRepoFetcher
from .fetcher import YearStatsFetcher
from .payload import parse_contributions_response
