import logging
from collections.abc import Mapping
from typing import Any

import asyncpg

from lightbnb.exceptions.custom import DatabaseError
from lightbnb.mappers.price_mapper import to_minor_units
from lightbnb.queries import statements
from lightbnb.queries.property_search import DEFAULT_LIMIT, build_property_search
from lightbnb.schemas.properties import NewProperty, Property, PropertyFilters, PropertyWithRating
from lightbnb.services.database import fetch_all, fetch_one

logger = logging.getLogger(__name__)


def property_insert_params(prop: NewProperty) -> list[Any]:
    """Positional values for INSERT_PROPERTY, with the price stored in cents."""
    values = prop.model_dump()
    values["cost_per_night"] = to_minor_units(prop.cost_per_night)
    return [values[column] for column in statements.PROPERTY_COLUMNS]


class PropertyService:
    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    async def get_all_properties(
        self,
        filters: PropertyFilters | Mapping[str, Any] | None = None,
        limit: int = DEFAULT_LIMIT,
    ) -> list[PropertyWithRating]:
        query = build_property_search(filters, limit)
        rows = await fetch_all(self._pool, query.text, *query.params)
        logger.info("Property search returned %d rows", len(rows))
        return [PropertyWithRating(**row) for row in rows]

    async def add_property(self, prop: NewProperty) -> Property:
        row = await fetch_one(self._pool, statements.INSERT_PROPERTY, *property_insert_params(prop))
        if row is None:
            raise DatabaseError("INSERT INTO properties returned no row")

        created = Property(**row)
        logger.info("Created property %s for owner %s", created.id, created.owner_id)
        return created
