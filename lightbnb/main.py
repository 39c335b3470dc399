import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from lightbnb.config import Settings
from lightbnb.services.database import create_pool
from lightbnb.services.properties import PropertyService
from lightbnb.services.reservations import ReservationService
from lightbnb.services.users import UserService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DataAccess:
    users: UserService
    reservations: ReservationService
    properties: PropertyService


@asynccontextmanager
async def lifespan(settings: Settings | None = None) -> AsyncIterator[DataAccess]:
    settings = settings or Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("asyncpg").setLevel(logging.WARNING)

    async with create_pool(settings) as pool:
        logger.info(
            "Connected to %s@%s:%s/%s",
            settings.db_user, settings.db_host, settings.db_port, settings.db_name,
        )
        yield DataAccess(
            users=UserService(pool),
            reservations=ReservationService(pool),
            properties=PropertyService(pool),
        )
