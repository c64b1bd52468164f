"""Tests for the dashboard voting overview."""

import threading
from datetime import timedelta


class TestVotingOverview:
    def test_counts_open_visible_and_pending(self, make_proposal, services, callers):
        voted = make_proposal(title="Voted")
        make_proposal(title="Pending")
        make_proposal(title="Renters only", roles=("Renter",))
        make_proposal(title="Other building", building_id=2)
        make_proposal(title="Later", start=timedelta(days=1), end=timedelta(days=2))
        services.casting.cast(voted.id, callers.owner, "Yes")

        overview = services.dashboard.get_voting_overview(callers.owner)
        assert overview == {
            "user_id": callers.owner.user_id,
            "active_proposals_count": 3,
            "pending_votes_count": 1,
        }

    def test_tallied_proposals_are_not_active(self, make_proposal, services, callers):
        proposal = make_proposal()
        services.tally.tally(proposal.id, callers.admin)

        overview = services.dashboard.get_voting_overview(callers.owner)
        assert overview["active_proposals_count"] == 0
        assert overview["pending_votes_count"] == 0

    def test_vote_cast_mid_read_is_not_counted(self, make_proposal, services, repos, callers, monkeypatch):
        proposal = make_proposal()
        accessible_building_ids = repos.registry.accessible_building_ids

        def read_then_cast(caller):
            ids = accessible_building_ids(caller)
            worker = threading.Thread(target=services.casting.cast, args=(proposal.id, callers.owner, "Yes"))
            worker.start()
            worker.join()
            return ids

        monkeypatch.setattr(repos.registry, "accessible_building_ids", read_then_cast)
        assert services.dashboard.get_voting_overview(callers.owner)["pending_votes_count"] == 1

        monkeypatch.undo()
        assert services.dashboard.get_voting_overview(callers.owner)["pending_votes_count"] == 0
