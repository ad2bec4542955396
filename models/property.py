"""
models/property.py
------------------
Input records for the properties table: a new listing and the
search options accepted by the property search.
"""

from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Any, Mapping, Optional, Union

Dollars = Union[int, float, Decimal, str]


@dataclass
class NewProperty:
    """
    A property listing to be inserted.

    Every field is bound positionally by the insert statement; a field left
    as None is written as NULL.

    Attributes:
        owner_id: Id of the owning user.
        cost_per_night: Nightly price in dollars (stored as cents).
    """
    owner_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    thumbnail_photo_url: Optional[str] = None
    cover_photo_url: Optional[str] = None
    cost_per_night: Optional[Dollars] = None
    street: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    post_code: Optional[str] = None
    country: Optional[str] = None
    parking_spaces: Optional[int] = None
    number_of_bathrooms: Optional[int] = None
    number_of_bedrooms: Optional[int] = None

    @classmethod
    def coerce(cls, value: Union["NewProperty", Mapping[str, Any]]) -> "NewProperty":
        if isinstance(value, cls):
            return value
        return cls(**{f.name: value.get(f.name) for f in fields(cls)})

    def as_row(self) -> list:
        """Field values in column order."""
        return [getattr(self, f.name) for f in fields(self)]


@dataclass
class PropertySearchOptions:
    """Optional filters for the property search. Unset means "any"."""
    city: Optional[str] = None
    owner_id: Optional[int] = None
    minimum_price_per_night: Optional[Dollars] = None
    maximum_price_per_night: Optional[Dollars] = None
    minimum_rating: Optional[Union[int, float, Decimal]] = None

    @classmethod
    def coerce(
        cls, value: Union["PropertySearchOptions", Mapping[str, Any], None]
    ) -> "PropertySearchOptions":
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        return cls(**{f.name: value.get(f.name) for f in fields(cls)})


PROPERTY_COLUMNS: tuple[str, ...] = tuple(f.name for f in fields(NewProperty))
