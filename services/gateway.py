"""
services/gateway.py
-------------------
Async entry point to the data-access layer.

QueryGateway exposes one coroutine per operation. Each call runs a single
statement on a worker thread, so the blocking psycopg2 round trip never
stalls the event loop; the pool queues calls beyond its connection limit.
"""

import asyncio
from typing import Any, Mapping, Optional, Union

from config import DEFAULT_RESULT_LIMIT
from db.connection import ConnectionPool
from models.property import NewProperty, PropertySearchOptions
from models.user import NewUser
from repositories.property_repo import PropertyRepository
from repositories.reservation_repo import ReservationRepository
from repositories.user_repo import UserRepository


class QueryGateway:
    """Users, reservations and properties over one shared connection pool."""

    def __init__(self, pool: ConnectionPool):
        self.pool = pool
        self.user_repo = UserRepository(pool)
        self.reservation_repo = ReservationRepository(pool)
        self.property_repo = PropertyRepository(pool)

    # ── Users ─────────────────────────────────────────────

    async def get_user_with_email(self, email: str) -> Optional[dict]:
        return await asyncio.to_thread(self.user_repo.get_user_with_email, email)

    async def get_user_with_id(self, user_id: Any) -> Optional[dict]:
        return await asyncio.to_thread(self.user_repo.get_user_with_id, user_id)

    async def add_user(self, user: Union[NewUser, Mapping[str, Any]]) -> dict:
        return await asyncio.to_thread(self.user_repo.add_user, user)

    # ── Reservations ──────────────────────────────────────

    async def get_all_reservations(
        self, guest_id: Any, limit: int = DEFAULT_RESULT_LIMIT
    ) -> list[dict]:
        return await asyncio.to_thread(
            self.reservation_repo.get_all_reservations, guest_id, limit
        )

    # ── Properties ────────────────────────────────────────

    async def get_all_properties(
        self,
        options: Union[PropertySearchOptions, Mapping[str, Any], None] = None,
        limit: int = DEFAULT_RESULT_LIMIT,
    ) -> list[dict]:
        return await asyncio.to_thread(self.property_repo.get_all_properties, options, limit)

    async def add_property(self, prop: Union[NewProperty, Mapping[str, Any]]) -> dict:
        return await asyncio.to_thread(self.property_repo.add_property, prop)

    def close(self) -> None:
        """Release every pooled connection."""
        self.pool.close()
