import logging

import asyncpg

from lightbnb.exceptions.custom import DatabaseError
from lightbnb.queries import statements
from lightbnb.schemas.users import NewUser, User
from lightbnb.services.database import fetch_one

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserService:
    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    async def get_user_with_email(self, email: str) -> User | None:
        row = await fetch_one(self._pool, statements.USER_BY_EMAIL, normalize_email(email))
        if row is None:
            logger.debug("No user for email lookup")
            return None
        return User(**row)

    async def get_user_with_id(self, user_id: int) -> User | None:
        row = await fetch_one(self._pool, statements.USER_BY_ID, user_id)
        if row is None:
            logger.info("No user with id %s", user_id)
            return None
        return User(**row)

    async def add_user(self, user: NewUser) -> User:
        row = await fetch_one(
            self._pool,
            statements.INSERT_USER,
            user.name,
            normalize_email(user.email),
            user.password,
        )
        if row is None:
            raise DatabaseError("INSERT INTO users returned no row")

        created = User(**row)
        logger.info("Created user %s", created.id)
        return created
