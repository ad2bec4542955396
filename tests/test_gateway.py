"""
Tests for the async QueryGateway.
"""

import asyncio

import pytest

from db.exceptions import QueryError
from services.gateway import QueryGateway
from tests.conftest import sample_property


@pytest.fixture
def gateway(fake_pool) -> QueryGateway:
    return QueryGateway(fake_pool)


class TestQueryGateway:

    @pytest.mark.asyncio
    async def test_user_operations(self, fake_pool, gateway: QueryGateway):
        fake_pool.rows = [{"id": 1, "name": "A", "email": "a@b.c", "password": "p"}]

        created = await gateway.add_user({"name": "A", "email": "a@b.c", "password": "p"})
        by_id = await gateway.get_user_with_id(created["id"])
        by_email = await gateway.get_user_with_email("A@B.C")

        assert created == by_id == by_email
        assert fake_pool.calls[-1][1] == ["a@b.c"]

    @pytest.mark.asyncio
    async def test_miss_is_none(self, gateway: QueryGateway):
        assert await gateway.get_user_with_email("none@example.com") is None
        assert await gateway.get_user_with_id(404) is None

    @pytest.mark.asyncio
    async def test_property_operations(self, fake_pool, gateway: QueryGateway):
        fake_pool.rows = [{"id": 9, "cost_per_night": 15000}]

        created = await gateway.add_property(sample_property(cost_per_night=150))
        found = await gateway.get_all_properties({"minimum_price_per_night": 100}, 3)

        assert created["cost_per_night"] == 15000
        assert found == [{"id": 9, "cost_per_night": 15000}]
        assert fake_pool.calls[-1][1] == [10000, 3]

    @pytest.mark.asyncio
    async def test_reservations(self, fake_pool, gateway: QueryGateway):
        assert await gateway.get_all_reservations(1) == []
        assert fake_pool.calls[-1][1] == [1, 10]

    @pytest.mark.asyncio
    async def test_concurrent_calls(self, fake_pool, gateway: QueryGateway):
        results = await asyncio.gather(*(gateway.get_user_with_id(i) for i in range(5)))

        assert results == [None] * 5
        assert sorted(params[0] for _, params in fake_pool.calls) == list(range(5))

    @pytest.mark.asyncio
    async def test_failure_propagates(self, failing_pool):
        gateway = QueryGateway(failing_pool)

        with pytest.raises(QueryError):
            await gateway.get_all_properties()

    def test_close(self, fake_pool, gateway: QueryGateway):
        gateway.close()

        assert fake_pool.closed_called
