"""
repositories/filters.py
-----------------------
Builds the WHERE / HAVING clauses of the property search.

Values are appended to a single parameter list and every placeholder is
the 1-based position of its value in that list, so both clauses and the
trailing LIMIT stay consistent with the bound parameters. Raw-column
predicates go to WHERE; conditions on the average rating go to HAVING.
"""

from dataclasses import dataclass, field
from typing import Any

from models.property import PropertySearchOptions
from utils.money import to_cents


@dataclass
class FilterClauseBuilder:
    """
    Accumulates predicates and their parameters.

    Parameters are only ever appended; `bind()` returns the placeholder
    of the value just added.
    """
    params: list = field(default_factory=list)
    predicates: list[str] = field(default_factory=list)
    aggregate_filters: list[str] = field(default_factory=list)

    def bind(self, value: Any) -> str:
        """Append a parameter and return its ``$n`` placeholder."""
        self.params.append(value)
        return f"${len(self.params)}"

    def where(self, predicate: str) -> None:
        self.predicates.append(predicate)

    def having(self, condition: str) -> None:
        self.aggregate_filters.append(condition)

    @property
    def where_clause(self) -> str:
        if not self.predicates:
            return ""
        return "WHERE " + " AND ".join(self.predicates)

    @property
    def having_clause(self) -> str:
        if not self.aggregate_filters:
            return ""
        return "HAVING " + " AND ".join(self.aggregate_filters)

    @classmethod
    def from_options(cls, options: PropertySearchOptions) -> "FilterClauseBuilder":
        """
        Translate search options into predicates.

        City, owner and price are raw-column predicates. Price is filtered
        with BETWEEN when both bounds are given, otherwise with whichever
        single bound is set; bounds are converted to cents. The minimum
        rating is bound after every WHERE parameter, as a HAVING condition.
        Unset, empty and zero values apply no filter.
        """
        builder = cls()

        if options.city:
            builder.where(f"properties.city ILIKE {builder.bind(f'%{options.city}%')}")

        if options.owner_id:
            builder.where(f"properties.owner_id = {builder.bind(options.owner_id)}")

        min_price = options.minimum_price_per_night
        max_price = options.maximum_price_per_night
        if min_price and max_price:
            low = builder.bind(to_cents(min_price))
            high = builder.bind(to_cents(max_price))
            builder.where(f"properties.cost_per_night BETWEEN {low} AND {high}")
        elif min_price:
            builder.where(f"properties.cost_per_night >= {builder.bind(to_cents(min_price))}")
        elif max_price:
            builder.where(f"properties.cost_per_night <= {builder.bind(to_cents(max_price))}")

        if options.minimum_rating:
            builder.having(f"avg(property_reviews.rating) >= {builder.bind(options.minimum_rating)}")

        return builder
