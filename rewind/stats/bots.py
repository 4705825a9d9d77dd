"""Detect automated accounts by username"""

# Matched case-insensitively as substrings
BOT_PATTERNS = [
    "[bot]",
    "dependabot",
    "renovate",
    "github-actions",
    "codecov",
]


def is_bot(username: str) -> bool:
    """Check whether a username belongs to a known bot account"""
    if not username:
        return False

    lower = username.lower()
    return any(pattern in lower for pattern in BOT_PATTERNS)
