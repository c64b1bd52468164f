"""End-to-end tests through the API views."""

from datetime import timedelta
from decimal import Decimal

import pytest

from app.container import container
from app.errors import ForbiddenError, InvalidInputError, InvalidStateError, NotFoundError, PersistenceError
from app.models.common import utcnow
from web.api import dashboard, proposals
from web.api.errors import status_code
from web.api.proposals.schemas import CastVoteRequest, CreateProposalRequest

ADMIN, MANAGER, OWNER, RENTER = 1, 2, 3, 5


@pytest.fixture(autouse=True)
def initialized(loaded):
    container.init()


def _create(user_id=ADMIN, **overrides) -> int:
    now = utcnow()
    payload = {
        "title": "Garden renovation",
        "description": "New benches and lighting",
        "start_time": now - timedelta(hours=1),
        "end_time": now + timedelta(days=7),
        "voting_method": "SimpleMajority",
        "eligible_roles": ["Homeowner", "Admin"],
    }
    payload.update(overrides)
    return proposals.create_proposal(user_id, CreateProposalRequest(**payload)).id


class TestProposalViews:
    def test_create_returns_item(self):
        now = utcnow()
        item = proposals.create_proposal(
            ADMIN,
            CreateProposalRequest(
                title="Test Proposal",
                description="This is a test proposal",
                start_time=now - timedelta(minutes=1),
                end_time=now + timedelta(days=7),
                voting_method="SimpleMajority",
                eligible_roles=["Homeowner", "Admin"],
            ),
        )
        assert item.title == "Test Proposal"
        assert item.voting_method == "SimpleMajority"
        assert item.status == "Open"
        assert item.eligible_roles == ["Admin", "Homeowner"]

    def test_homeowner_cannot_create(self):
        with pytest.raises(ForbiddenError):
            _create(user_id=OWNER)

    def test_non_positive_building_is_invalid(self):
        with pytest.raises(InvalidInputError):
            _create(building_id=0)

    def test_list(self):
        for i in range(3):
            _create(title=f"Proposal {i}")
        response = proposals.list_proposals(ADMIN)
        assert response.total == 3
        assert [p.title for p in response.items] == ["Proposal 2", "Proposal 1", "Proposal 0"]

    def test_vote_flow(self):
        proposal_id = _create(voting_method="WeightedArea")

        cast = proposals.cast_vote(OWNER, proposal_id, CastVoteRequest(choice="Yes"))
        assert cast.accepted is True
        assert cast.choice == "Yes"
        assert cast.weight == Decimal(70)

        detail = proposals.get_proposal(OWNER, proposal_id)
        assert detail.yes_count == 1
        assert detail.total_votes == 1
        assert detail.user_vote == "Yes"
        assert detail.user_eligible is True
        assert detail.result is None

        tally = proposals.tally_proposal(MANAGER, proposal_id)
        assert tally.passed is True
        assert tally.yes_weight == Decimal(70)
        assert tally.total_weight == Decimal(70)

        detail = proposals.get_proposal(RENTER, proposal_id)
        assert detail.proposal.status == "Tallied"
        assert detail.user_eligible is False
        assert detail.result.passed is True
        assert detail.result.method_applied_version == "v1"

    def test_user_can_change_vote(self):
        proposal_id = _create()
        proposals.cast_vote(OWNER, proposal_id, CastVoteRequest(choice="Yes"))
        proposals.cast_vote(OWNER, proposal_id, CastVoteRequest(choice="No"))

        detail = proposals.get_proposal(OWNER, proposal_id)
        assert (detail.yes_count, detail.no_count, detail.total_votes) == (0, 1, 1)
        assert detail.user_vote == "No"

    def test_ineligible_user_cannot_vote(self):
        proposal_id = _create(eligible_roles=["Homeowner"])
        with pytest.raises(ForbiddenError):
            proposals.cast_vote(RENTER, proposal_id, CastVoteRequest(choice="Yes"))

    def test_cannot_vote_after_tally(self):
        proposal_id = _create()
        proposals.tally_proposal(ADMIN, proposal_id)
        with pytest.raises(InvalidStateError):
            proposals.cast_vote(OWNER, proposal_id, CastVoteRequest(choice="Yes"))

    def test_homeowner_cannot_tally(self):
        proposal_id = _create()
        with pytest.raises(ForbiddenError):
            proposals.tally_proposal(OWNER, proposal_id)

    def test_missing_proposal(self):
        with pytest.raises(NotFoundError):
            proposals.get_proposal(OWNER, 424242)

    @pytest.mark.parametrize("proposal_id", [0, -3])
    def test_non_positive_proposal_id_is_invalid(self, proposal_id):
        with pytest.raises(InvalidInputError):
            proposals.get_proposal(OWNER, proposal_id)
        with pytest.raises(InvalidInputError):
            proposals.cast_vote(OWNER, proposal_id, CastVoteRequest(choice="Yes"))
        with pytest.raises(InvalidInputError):
            proposals.tally_proposal(ADMIN, proposal_id)


class TestDashboardView:
    def test_overview(self):
        _create()
        overview = dashboard.get_voting_overview(OWNER)
        assert overview.active_proposals_count == 1
        assert overview.pending_votes_count == 1


class TestStatusCodes:
    @pytest.mark.parametrize(
        "error, code",
        [
            (NotFoundError(), 404),
            (InvalidInputError(), 400),
            (InvalidStateError(), 409),
            (ForbiddenError(), 403),
            (PersistenceError(), 500),
        ],
    )
    def test_mapping(self, error, code):
        assert status_code(error) == code

    def test_default_message(self):
        assert NotFoundError().message == "Resource not found"
        assert ForbiddenError("No access").message == "No access"
