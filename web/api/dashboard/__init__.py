"""Dashboard API."""

from web.api.dashboard.views import get_voting_overview

__all__ = [
    "get_voting_overview",
]
