"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Any, Mapping, Optional, Union

from db.connection import ConnectionPool
from db.exceptions import QueryError
from models.user import NewUser
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for lookups and inserts on the users table."""

    def __init__(self, pool: ConnectionPool):
        self.pool = pool

    def get_user_with_email(self, email: str) -> Optional[dict]:
        """
        Fetch a user by email, ignoring case.

        Returns:
            User dict or None.
        """
        sql = "SELECT * FROM users WHERE lower(email) = $1 LIMIT 1;"
        try:
            rows = self.pool.query(sql, [email.lower()])
        except QueryError as e:
            logger.error(f"Failed to fetch user by email: {e}")
            raise
        return rows[0] if rows else None

    def get_user_with_id(self, user_id: Any) -> Optional[dict]:
        """
        Fetch a user by primary key.

        Returns:
            User dict or None.
        """
        sql = "SELECT * FROM users WHERE id = $1;"
        try:
            rows = self.pool.query(sql, [user_id])
        except QueryError as e:
            logger.error(f"Failed to fetch user {user_id}: {e}")
            raise
        return rows[0] if rows else None

    def add_user(self, user: Union[NewUser, Mapping[str, Any]]) -> dict:
        """
        Insert a new user.

        The email is stored as given. Lookups compare lower-cased values,
        so two users whose emails differ only in case collide on lookup;
        callers are expected to normalise the email before inserting.

        Args:
            user: NewUser or dict with name, email and password.

        Returns:
            The inserted row, including its generated id.
        """
        user = NewUser.coerce(user)
        sql = """
            INSERT INTO users (name, email, password)
            VALUES ($1, $2, $3)
            RETURNING *;
        """
        try:
            rows = self.pool.query(sql, [user.name, user.email, user.password])
        except QueryError as e:
            logger.error(f"Failed to add user {user.email}: {e}")
            raise
        logger.info(f"Added user {rows[0].get('id')}")
        return rows[0]
