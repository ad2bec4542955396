"""
repositories/reservation_repo.py
---------------------------------
Data access layer for a guest's reservations.
"""

from typing import Any

from config import DEFAULT_RESULT_LIMIT
from db.connection import ConnectionPool
from db.exceptions import QueryError
from utils.logger import get_logger

logger = get_logger(__name__)


class ReservationRepository:
    """Read-only queries on the reservations table."""

    def __init__(self, pool: ConnectionPool):
        self.pool = pool

    def get_all_reservations(self, guest_id: Any, limit: int = DEFAULT_RESULT_LIMIT) -> list[dict]:
        """
        Fetch a guest's reservations, most recent first.

        Each row carries the reserved property's columns, the reservation's
        own id (as ``reservation_id``), dates and the property's average
        rating (None when it has no reviews).

        Args:
            guest_id: Id of the guest.
            limit: Maximum number of rows.

        Returns:
            List of reservation dicts; empty if the guest has none.
        """
        sql = """
            SELECT properties.*,
                   reservations.id AS reservation_id,
                   reservations.guest_id,
                   reservations.start_date,
                   reservations.end_date,
                   avg(property_reviews.rating) AS average_rating
            FROM reservations
            JOIN properties ON reservations.property_id = properties.id
            LEFT JOIN property_reviews ON properties.id = property_reviews.property_id
            WHERE reservations.guest_id = $1
            GROUP BY reservations.id, properties.id
            ORDER BY reservations.start_date DESC
            LIMIT $2;
        """
        try:
            return self.pool.query(sql, [guest_id, limit])
        except QueryError as e:
            logger.error(f"Failed to fetch reservations for guest {guest_id}: {e}")
            raise
