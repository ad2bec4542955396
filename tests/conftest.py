"""
Test configuration and fixtures for the LightBnB data-access layer.
Repositories are exercised against a fake pool that records every
statement and returns canned rows.
"""

import re
from typing import Any, Optional, Sequence

import pytest

from db.exceptions import QueryError
from repositories.property_repo import PropertyRepository
from repositories.reservation_repo import ReservationRepository
from repositories.user_repo import UserRepository

PLACEHOLDER = re.compile(r"\$(\d+)")


class FakePool:
    """Stands in for ConnectionPool; `rows` is returned by every query."""

    def __init__(self):
        self.calls: list[tuple[str, list]] = []
        self.rows: list[dict] = []
        self.error: Optional[Exception] = None
        self.closed_called = False

    def query(self, sql: str, params: Sequence[Any] = ()) -> list[dict]:
        self.calls.append((sql, list(params)))
        if self.error is not None:
            raise self.error
        return [dict(r) for r in self.rows]

    def close(self) -> None:
        self.closed_called = True

    @property
    def last_sql(self) -> str:
        return " ".join(self.calls[-1][0].split())

    @property
    def last_params(self) -> list:
        return self.calls[-1][1]


def placeholder_indices(sql: str) -> set[int]:
    """Distinct ``$n`` indices referenced by a statement."""
    return {int(n) for n in PLACEHOLDER.findall(sql)}


def sample_property(**overrides) -> dict:
    """A complete 14-field property record in dollars."""
    data = {
        "owner_id": 1,
        "title": "Speed lamp",
        "description": "description",
        "thumbnail_photo_url": "https://images.example.com/thumb.jpg",
        "cover_photo_url": "https://images.example.com/cover.jpg",
        "cost_per_night": 150.00,
        "street": "536 Namsub Highway",
        "city": "Sotboske",
        "province": "Quebec",
        "post_code": "28142",
        "country": "Canada",
        "parking_spaces": 3,
        "number_of_bathrooms": 2,
        "number_of_bedrooms": 4,
    }
    data.update(overrides)
    return data


@pytest.fixture
def fake_pool() -> FakePool:
    return FakePool()


@pytest.fixture
def failing_pool(fake_pool: FakePool) -> FakePool:
    fake_pool.error = QueryError('relation "users" does not exist')
    return fake_pool


@pytest.fixture
def user_repository(fake_pool: FakePool) -> UserRepository:
    return UserRepository(fake_pool)


@pytest.fixture
def reservation_repository(fake_pool: FakePool) -> ReservationRepository:
    return ReservationRepository(fake_pool)


@pytest.fixture
def property_repository(fake_pool: FakePool) -> PropertyRepository:
    return PropertyRepository(fake_pool)
