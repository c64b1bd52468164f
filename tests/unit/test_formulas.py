"""Tests for voting formulas."""

from decimal import Decimal

import pytest

from app.models.core import OwnedApartment, Role
from app.models.voting import TallySummary, VoteChoice, VotingMethod
from app.services.voting import formulas


def _apt(apartment_id: int, area: str | None) -> OwnedApartment:
    return OwnedApartment(apartment_id=apartment_id, building_id=1, size_sq_m=Decimal(area) if area else None)


def _summary(yes="0", no="0", abstain="0") -> TallySummary:
    return TallySummary(yes_weight=Decimal(yes), no_weight=Decimal(no), abstain_weight=Decimal(abstain))


class TestVoteWeight:
    @pytest.mark.parametrize(
        "method",
        [VotingMethod.SIMPLE_MAJORITY, VotingMethod.PER_SEAT, VotingMethod.CONSENSUS],
    )
    def test_constant_methods_weigh_one(self, method):
        assert formulas.vote_weight(method, [_apt(1, "40"), _apt(2, "30")]) == Decimal(1)

    def test_constant_methods_ignore_missing_ownership(self):
        assert formulas.vote_weight(VotingMethod.PER_SEAT, []) == Decimal(1)

    def test_weighted_area_sums_owned_area(self):
        assert formulas.vote_weight(VotingMethod.WEIGHTED_AREA, [_apt(1, "40"), _apt(2, "30")]) == Decimal(70)

    def test_weighted_area_without_apartments_is_zero(self):
        assert formulas.vote_weight(VotingMethod.WEIGHTED_AREA, []) == Decimal(0)

    def test_unknown_area_counts_as_zero(self):
        assert formulas.vote_weight(VotingMethod.WEIGHTED_AREA, [_apt(1, None), _apt(2, "12.5")]) == Decimal("12.5")

    def test_weighted_area_is_exact(self):
        weight = formulas.vote_weight(VotingMethod.WEIGHTED_AREA, [_apt(i, "0.1") for i in range(3)])
        assert weight == Decimal("0.3")
        assert isinstance(weight, Decimal)


class TestSummarize:
    def test_missing_choices_are_zero(self):
        summary = formulas.summarize({VoteChoice.YES: Decimal(3)})
        assert summary.no_weight == Decimal(0)
        assert summary.abstain_weight == Decimal(0)
        assert summary.total_weight == Decimal(3)

    def test_total_is_sum_of_parts(self):
        summary = formulas.summarize(
            {VoteChoice.YES: Decimal("1.5"), VoteChoice.NO: Decimal("2.25"), VoteChoice.ABSTAIN: Decimal(1)}
        )
        assert summary.total_weight == Decimal("4.75")


class TestMajorityRule:
    def test_yes_over_no_passes(self):
        assert formulas.passes(VotingMethod.SIMPLE_MAJORITY, _summary(yes="3", no="2")) is True

    def test_tie_fails(self):
        assert formulas.passes(VotingMethod.SIMPLE_MAJORITY, _summary(yes="2", no="2")) is False

    def test_abstentions_do_not_break_ties(self):
        assert formulas.passes(VotingMethod.PER_SEAT, _summary(yes="2", no="2", abstain="5")) is False

    def test_no_votes_fails(self):
        assert formulas.passes(VotingMethod.WEIGHTED_AREA, _summary()) is False

    def test_weighted_boundary(self):
        assert formulas.passes(VotingMethod.WEIGHTED_AREA, _summary(yes="70.000001", no="70")) is True


class TestConsensusRule:
    def test_yes_and_abstain_pass(self):
        assert formulas.passes(VotingMethod.CONSENSUS, _summary(yes="1", abstain="1")) is True

    def test_any_dissent_blocks(self):
        assert formulas.passes(VotingMethod.CONSENSUS, _summary(yes="100", no="0.001")) is False

    def test_zero_votes_pass(self):
        # Literal consequence of "no dissent": an empty ballot box passes.
        assert formulas.passes(VotingMethod.CONSENSUS, _summary()) is True


class TestEligibility:
    def test_intersection(self):
        assert formulas.is_eligible({Role.HOMEOWNER, Role.HOA_MEMBER}, {Role.HOA_MEMBER}) is True

    def test_disjoint(self):
        assert formulas.is_eligible({Role.RENTER}, {Role.HOMEOWNER, Role.ADMIN}) is False

    def test_no_roles(self):
        assert formulas.is_eligible(set(), {Role.HOMEOWNER}) is False
