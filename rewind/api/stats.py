"""Yearly stats API endpoints"""

from datetime import datetime, timezone
from flask import Blueprint, jsonify, request

from rewind.config import get_github_token
from rewind.errors import GitHubApiError
from rewind.github.fetcher import YearStatsFetcher

stats_bp = Blueprint('stats', __name__, url_prefix='/api')


def get_request_token() -> str:
    """Token from the Authorization header, falling back to GITHUB_TOKEN"""
    header = request.headers.get("Authorization", "")
    if header.lower().startswith("bearer "):
        token = header[len("bearer "):].strip()
        if token:
            return token
    return get_github_token()


def get_request_year() -> int:
    """Year query parameter, defaulting to the current UTC year"""
    value = request.args.get("year")
    if not value:
        return datetime.now(timezone.utc).year
    return int(value)


@stats_bp.route("/stats")
def get_stats():
    """Get the yearly summary for the authenticated user"""
    token = get_request_token()
    if not token:
        return jsonify({"error": "Not authenticated"}), 401

    try:
        year = get_request_year()
    except ValueError:
        return jsonify({"error": "year must be an integer"}), 400

    try:
        summary = YearStatsFetcher(token).fetch_year_summary(year)
        return jsonify(summary.to_dict())
    except GitHubApiError as e:
        return jsonify({"error": e.message}), e.status_code
    except Exception as e:
        return jsonify({"error": str(e)}), 500


@stats_bp.route("/compare")
def get_comparison():
    """Compare the requested year with the previous one"""
    token = get_request_token()
    if not token:
        return jsonify({"error": "Not authenticated"}), 401

    try:
        year = get_request_year()
    except ValueError:
        return jsonify({"error": "year must be an integer"}), 400

    try:
        result = YearStatsFetcher(token).fetch_comparison(year)
        return jsonify({
            "current": result["current"].to_dict(),
            "previous": result["previous"].to_dict(),
            "comparison": result["comparison"].to_dict()
        })
    except GitHubApiError as e:
        return jsonify({"error": e.message}), e.status_code
    except Exception as e:
        return jsonify({"error": str(e)}), 500


@stats_bp.route("/health")
def health_check():
    """Health check endpoint (no auth required)"""
    return jsonify({
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "token_configured": bool(get_github_token())
    })
