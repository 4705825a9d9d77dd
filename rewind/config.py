"""Centralized configuration for git-rewind"""

import os


# =============================================================================
# GitHub Configuration
# =============================================================================

# API
GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"
GITHUB_REST_URL = "https://api.github.com"

# Environment variable holding the access token
GITHUB_TOKEN_ENV = "GITHUB_TOKEN"

# Page size of the capped contribution facets (PRs, reviews, issues, repositories)
FACET_PAGE_CAP = 100

# Request timeout in seconds
REQUEST_TIMEOUT = 30


# =============================================================================
# Private Repository Channel
# =============================================================================

# Repositories queried in parallel per batch
PRIVATE_REPO_BATCH_SIZE = 10


# =============================================================================
# Web Server Configuration
# =============================================================================

FLASK_PORT = int(os.environ.get("PORT", "5000"))


def get_github_token() -> str:
    """Read the GitHub token from the environment (None if unset)"""
    return os.getenv(GITHUB_TOKEN_ENV)
