"""
repositories/property_repo.py
------------------------------
Data access layer for property listings: filtered search and insert.
Nightly prices are dollars on the way in and cents in the table.
"""

from typing import Any, Mapping, Optional, Union

from config import DEFAULT_RESULT_LIMIT
from db.connection import ConnectionPool
from db.exceptions import QueryError
from models.property import NewProperty, PropertySearchOptions, PROPERTY_COLUMNS
from repositories.filters import FilterClauseBuilder
from utils.logger import get_logger
from utils.money import to_cents

logger = get_logger(__name__)


def build_search_query(
    options: Optional[PropertySearchOptions] = None,
    limit: int = DEFAULT_RESULT_LIMIT,
) -> tuple[str, list]:
    """
    Assemble the property search statement.

    Reviews are outer-joined so properties without reviews are kept,
    unless a minimum rating is requested.

    Returns:
        ``(sql, params)`` with ``$n`` placeholders; LIMIT is always the last
        parameter.
    """
    builder = FilterClauseBuilder.from_options(options or PropertySearchOptions())
    sql_parts = [
        "SELECT properties.*, avg(property_reviews.rating) AS average_rating",
        "FROM properties",
        "LEFT JOIN property_reviews ON properties.id = property_reviews.property_id",
    ]
    if builder.where_clause:
        sql_parts.append(builder.where_clause)
    sql_parts.append("GROUP BY properties.id")
    if builder.having_clause:
        sql_parts.append(builder.having_clause)
    sql_parts.append("ORDER BY properties.cost_per_night")
    sql_parts.append(f"LIMIT {builder.bind(limit)};")
    return "\n".join(sql_parts), builder.params


class PropertyRepository:
    """Repository for search and inserts on the properties table."""

    def __init__(self, pool: ConnectionPool):
        self.pool = pool

    # ── READ ──────────────────────────────────────────────

    def get_all_properties(
        self,
        options: Union[PropertySearchOptions, Mapping[str, Any], None] = None,
        limit: int = DEFAULT_RESULT_LIMIT,
    ) -> list[dict]:
        """
        Search properties, cheapest first.

        Args:
            options: Optional filters (city, owner_id, minimum/maximum
                price per night in dollars, minimum_rating).
            limit: Maximum number of rows.

        Returns:
            Property dicts with an ``average_rating`` column.
        """
        sql, params = build_search_query(PropertySearchOptions.coerce(options), limit)
        try:
            return self.pool.query(sql, params)
        except QueryError as e:
            logger.error(f"Failed to search properties: {e}")
            raise

    # ── CREATE ────────────────────────────────────────────

    def add_property(self, prop: Union[NewProperty, Mapping[str, Any]]) -> dict:
        """
        Insert a new property listing.

        Args:
            prop: NewProperty or dict with the 14 listing fields; missing
                fields are written as NULL. ``cost_per_night`` is in dollars.

        Returns:
            The inserted row, with ``cost_per_night`` in cents.
        """
        prop = NewProperty.coerce(prop)
        row = prop.as_row()
        row[PROPERTY_COLUMNS.index("cost_per_night")] = to_cents(prop.cost_per_night)
        placeholders = ", ".join(f"${i}" for i in range(1, len(row) + 1))
        sql = f"""
            INSERT INTO properties ({", ".join(PROPERTY_COLUMNS)})
            VALUES ({placeholders})
            RETURNING *;
        """
        try:
            rows = self.pool.query(sql, row)
        except QueryError as e:
            logger.error(f"Failed to add property '{prop.title}': {e}")
            raise
        logger.info(f"Added property {rows[0].get('id')} for owner {prop.owner_id}")
        return rows[0]
