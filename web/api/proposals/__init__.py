"""Proposals API."""

from web.api.proposals.views import (
    cast_vote,
    create_proposal,
    get_proposal,
    list_proposals,
    tally_proposal,
)

__all__ = [
    "create_proposal",
    "list_proposals",
    "get_proposal",
    "cast_vote",
    "tally_proposal",
]
