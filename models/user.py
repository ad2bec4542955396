"""
models/user.py
--------------
Input record for creating a user.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Union


@dataclass
class NewUser:
    """
    A user to be inserted.

    Attributes:
        name: Display name.
        email: Login email; stored exactly as given.
        password: Password hash, opaque to this layer.
    """
    name: str
    email: str
    password: str

    @classmethod
    def coerce(cls, value: Union["NewUser", Mapping[str, Any]]) -> "NewUser":
        """Accept either a NewUser or a plain dict with the same keys."""
        if isinstance(value, cls):
            return value
        return cls(**{f.name: value.get(f.name) for f in fields(cls)})
