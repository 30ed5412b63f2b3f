"""Aggregate application use cases."""

from .activity import aggregate_recent_activity, get_recent_activity
from .dashboard import get_dashboard
from .stats import summarize

__all__ = [
    "aggregate_recent_activity",
    "get_dashboard",
    "get_recent_activity",
    "summarize",
]
