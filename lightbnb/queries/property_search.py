import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, PositiveInt, TypeAdapter, ValidationError

from lightbnb.exceptions.custom import InvalidFilterError
from lightbnb.mappers.price_mapper import to_minor_units
from lightbnb.schemas.properties import PropertyFilters

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10

BASE_SELECT = (
    "SELECT properties.*, avg(property_reviews.rating) AS average_rating\n"
    "FROM properties\n"
    "JOIN property_reviews ON properties.id = property_reviews.property_id"
)

_limit_adapter = TypeAdapter(PositiveInt)


class SearchQuery(BaseModel):
    text: str
    params: list[Any]


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _coerce_filters(filters: PropertyFilters | Mapping[str, Any] | None) -> PropertyFilters:
    if filters is None:
        return PropertyFilters()
    if isinstance(filters, PropertyFilters):
        return filters
    try:
        return PropertyFilters.model_validate(dict(filters))
    except ValidationError as exc:
        raise InvalidFilterError(f"Invalid property filters: {exc}") from exc


def coerce_limit(limit: Any) -> int:
    try:
        return _limit_adapter.validate_python(limit)
    except ValidationError as exc:
        raise InvalidFilterError(f"Invalid limit {limit!r}: must be a positive integer") from exc


def build_property_search(
    filters: PropertyFilters | Mapping[str, Any] | None = None,
    limit: Any = DEFAULT_LIMIT,
) -> SearchQuery:
    """Assemble the property search statement and its positional parameters.

    Each present filter appends its value to ``params`` and references it by
    its 1-based position. The first WHERE-level condition gets ``WHERE`` and
    every later one ``AND``, whichever filters happen to be present.
    """
    if isinstance(filters, Mapping) and "limit" in filters:
        # Query-string criteria carry the limit alongside the filters
        filters = dict(filters)
        limit = filters.pop("limit")

    criteria = _coerce_filters(filters)
    row_limit = coerce_limit(limit)

    params: list[Any] = []
    lines = [BASE_SELECT]
    conditions = 0

    def add_condition(template: str, value: Any) -> None:
        nonlocal conditions
        params.append(value)
        keyword = "AND" if conditions else "WHERE"
        lines.append(f"{keyword} {template.format(f'${len(params)}')}")
        conditions += 1

    if criteria.city is not None:
        city = criteria.city.strip().removeprefix("#")
        add_condition("city LIKE {}", f"%{_escape_like(city)}%")

    if criteria.owner_id is not None:
        add_condition("owner_id = {}", criteria.owner_id)

    if criteria.minimum_price_per_night is not None:
        add_condition("cost_per_night >= {}", to_minor_units(criteria.minimum_price_per_night))

    if criteria.maximum_price_per_night is not None:
        add_condition("cost_per_night <= {}", to_minor_units(criteria.maximum_price_per_night))

    lines.append("GROUP BY properties.id")

    if criteria.minimum_rating is not None:
        params.append(criteria.minimum_rating)
        lines.append(f"HAVING avg(property_reviews.rating) >= ${len(params)}")

    params.append(row_limit)
    lines.append("ORDER BY cost_per_night")
    lines.append(f"LIMIT ${len(params)};")

    query = SearchQuery(text="\n".join(lines), params=params)
    logger.debug("Property search: %s %s", query.text, query.params)
    return query
