"""
Credential store — user rows keyed by unique e-mail.
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import User
from utils.errors import ConflictError

logger = logging.getLogger(__name__)

USER_EXISTS_MESSAGE = "User already exists"


class UserStore:
    """Thin async wrapper over the ``users`` table."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_email(self, email: str) -> Optional[User]:
        result = await self._session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def insert(self, user: User) -> User:
        """
        Insert and commit ``user``.

        The unique index on ``users.email`` decides races between concurrent
        registrations: the losing commit surfaces as ``ConflictError``.
        """
        self._session.add(user)
        try:
            await self._session.commit()
        except IntegrityError as exc:
            await self._session.rollback()
            logger.info("Registration lost the race for an existing e-mail")
            raise ConflictError(USER_EXISTS_MESSAGE) from exc
        return user
