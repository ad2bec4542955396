"""
db/exceptions.py
----------------
The single error type raised by the data-access layer.
"""

from typing import Any, Optional, Sequence


class QueryError(Exception):
    """
    Raised whenever the database rejects or fails to run a statement:
    constraint violations, connectivity loss, malformed SQL.

    Attributes:
        statement: The SQL text that was submitted (``$n`` form).
        params: The positional parameters bound to it.
    """

    def __init__(
        self,
        message: str,
        statement: Optional[str] = None,
        params: Optional[Sequence[Any]] = None,
    ):
        super().__init__(message)
        self.statement = statement
        self.params = list(params) if params is not None else []
