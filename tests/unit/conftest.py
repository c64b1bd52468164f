"""Shared fixtures - a fresh DuckDB file per test and a controllable clock."""

from datetime import datetime, timedelta
from types import SimpleNamespace

import pytest

from app.repositories import (
    ProposalRepository,
    RegistryRepository,
    ResultRepository,
    VoteRepository,
    get_db,
    set_db_path,
    shutdown_db,
)
from app.services import DashboardService, ProposalLifecycle, TallyEngine, VoteCasting
from etl import load_registry

NOW = datetime(2026, 3, 1, 12, 0)


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


REGISTRY = {
    "users": [
        {"id": 1, "roles": ["Admin"]},
        {"id": 2, "roles": ["Manager"]},
        {"id": 3, "roles": ["Homeowner"]},
        {"id": 4, "roles": ["Homeowner", "HOAMember"]},
        {"id": 5, "roles": ["Renter"]},
        {"id": 6, "roles": ["HOAMember"]},
        {"id": 7, "roles": ["Homeowner"]},
        {"id": 8, "roles": ["Homeowner"]},
        {"id": 9, "roles": ["Homeowner"]},
    ],
    "buildings": [
        {"id": 1, "address": "Linden 1", "construction_year": 1998},
        {"id": 2, "address": "Linden 2", "construction_year": 2004},
        {"id": 3, "address": "Oak 7", "construction_year": None},
    ],
    "apartments": [
        {"id": 10, "building_id": 1, "number": "1", "size_sq_m": "40"},
        {"id": 11, "building_id": 1, "number": "2", "size_sq_m": "30"},
        {"id": 12, "building_id": 2, "number": "1", "size_sq_m": None},
        {"id": 13, "building_id": 2, "number": "2", "size_sq_m": "55.25"},
        {"id": 14, "building_id": 1, "number": "3", "size_sq_m": "100", "is_deleted": True},
        {"id": 15, "building_id": 3, "number": "1", "size_sq_m": "61.5"},
    ],
    "owners": [
        {"apartment_id": 10, "user_id": 3},
        {"apartment_id": 11, "user_id": 3},
        {"apartment_id": 14, "user_id": 3},
        {"apartment_id": 12, "user_id": 4},
        {"apartment_id": 13, "user_id": 7},
        {"apartment_id": 15, "user_id": 8},
    ],
    "renters": [
        {"apartment_id": 10, "user_id": 5, "is_active": True},
        {"apartment_id": 13, "user_id": 5, "is_active": False},
    ],
    "managers": [
        {"building_id": 1, "user_id": 2},
    ],
}


@pytest.fixture
def database(tmp_path):
    set_db_path(tmp_path / "voting.duckdb")
    yield get_db()
    shutdown_db()


@pytest.fixture
def registry_data() -> dict:
    return REGISTRY


@pytest.fixture
def loaded(database, registry_data):
    load_registry(database, registry_data)
    return database


@pytest.fixture
def repos(loaded) -> SimpleNamespace:
    return SimpleNamespace(
        registry=RegistryRepository(),
        proposals=ProposalRepository(),
        votes=VoteRepository(),
        results=ResultRepository(),
    )


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def services(repos, clock) -> SimpleNamespace:
    return SimpleNamespace(
        lifecycle=ProposalLifecycle(repos.proposals, repos.votes, repos.results, repos.registry, clock=clock),
        casting=VoteCasting(repos.proposals, repos.votes, repos.registry, clock=clock),
        tally=TallyEngine(repos.proposals, repos.votes, repos.results, clock=clock),
        dashboard=DashboardService(repos.registry, repos.proposals, repos.votes),
    )


@pytest.fixture
def callers(repos) -> SimpleNamespace:
    get = repos.registry.get_caller
    return SimpleNamespace(
        admin=get(1),
        manager=get(2),
        owner=get(3),
        owner_member=get(4),
        renter=get(5),
        member=get(6),
        owner_b2=get(7),
        owner_b3=get(8),
        owner_plain=get(9),
    )


@pytest.fixture
def make_proposal(services, callers, clock):
    """Create a proposal that is Open at the clock's current time unless told otherwise."""

    def make(
        method: str = "SimpleMajority",
        roles=("Homeowner",),
        start=timedelta(hours=-1),
        end=timedelta(days=7),
        building_id=None,
        creator=None,
        title="Replace the roof",
    ):
        return services.lifecycle.create(
            creator or callers.admin,
            title=title,
            description="Full roof replacement in spring",
            start_time=clock.now + start,
            end_time=clock.now + end,
            voting_method=method,
            eligible_roles=list(roles),
            building_id=building_id,
        )

    return make
