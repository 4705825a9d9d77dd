"""Error types raised by the GitHub fetch layer"""


class GitHubApiError(Exception):
    """Generic GitHub API failure"""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class GitHubAuthError(GitHubApiError):
    """Missing, expired or rejected credentials"""

    def __init__(self, message: str):
        super().__init__(message, status_code=401)


class GitHubRateLimitError(GitHubApiError):
    """API rate limit exhausted"""

    def __init__(self, message: str):
        super().__init__(message, status_code=429)


def classify_github_error(error) -> GitHubApiError:
    """
    Map an arbitrary exception (or message) onto a GitHub error type.

    Args:
        error: Exception or message to classify

    Returns:
        GitHubAuthError, GitHubRateLimitError or GitHubApiError
    """
    if isinstance(error, GitHubApiError):
        return error

    message = str(error) if error else "Unknown error"
    lower = message.lower()

    if "401" in lower or "unauthorized" in lower or "bad credentials" in lower:
        return GitHubAuthError(message)

    if "rate limit" in lower or ("403" in lower and "rate" in lower):
        return GitHubRateLimitError(message)

    return GitHubApiError(message)
