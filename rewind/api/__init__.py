"""API blueprints for git-rewind"""

from rewind.api.stats import stats_bp

__all__ = ['stats_bp']
