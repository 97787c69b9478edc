"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from blast_points import BlastPointsConfig, BlastPointsSession
from tests.helpers.points_api_fakes import (
    BASE_URL,
    CHALLENGE_OK,
    CHALLENGE_PATH,
    CONTRACT_ADDRESS,
    OPERATOR_KEY,
    SOLVE_OK,
    SOLVE_PATH,
    FakeClock,
    FakePointsApi,
)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_api() -> FakePointsApi:
    api = FakePointsApi()
    api.add("POST", CHALLENGE_PATH, CHALLENGE_OK)
    api.add("POST", SOLVE_PATH, SOLVE_OK)
    return api


@pytest.fixture
def points_session(fake_api: FakePointsApi, fake_clock: FakeClock) -> BlastPointsSession:
    session = BlastPointsSession(
        CONTRACT_ADDRESS,
        OPERATOR_KEY,
        BlastPointsConfig(base_url=BASE_URL),
        clock=fake_clock,
    )
    session._request_builder._executor.execute_request = fake_api
    return session
