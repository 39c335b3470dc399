import logging

import asyncpg

from lightbnb.queries import statements
from lightbnb.queries.property_search import DEFAULT_LIMIT, coerce_limit
from lightbnb.schemas.reservations import Reservation
from lightbnb.services.database import fetch_all

logger = logging.getLogger(__name__)


class ReservationService:
    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    async def get_all_reservations(self, guest_id: int, limit: int = DEFAULT_LIMIT) -> list[Reservation]:
        rows = await fetch_all(self._pool, statements.RESERVATIONS_FOR_GUEST, guest_id, coerce_limit(limit))
        logger.info("Found %d reservations for guest %s", len(rows), guest_id)
        return [Reservation(**row) for row in rows]
