"""
db/ - Database Layer
====================
Owns the PostgreSQL connection pool and the error type raised when a
statement fails. This layer is the lowest in the architecture and has no
dependencies on other layers.
"""

from db.connection import ConnectionPool
from db.exceptions import QueryError

__all__ = ["ConnectionPool", "QueryError"]
