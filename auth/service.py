"""
User persistence for the auth flows.
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from api.errors import ConflictError
from config.constants import Messages
from database.models import User
from auth.schemas import PublicUser

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_user_by_email(self, email: str) -> Optional[User]:
        """Exact (case-sensitive) match on the stored email."""
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def create_user(
        self,
        name: str,
        email: str,
        password_hash: str,
        is_admin: bool = False,
    ) -> PublicUser:
        """
        Insert a user and return its public projection.

        Only the public columns are selected back, so the hash never leaves
        this method.  A unique-constraint violation (e.g. a concurrent signup
        with the same email) raises ``ConflictError``.
        """
        stmt = (
            insert(User)
            .values(name=name, email=email, password=password_hash, is_admin=is_admin)
            .returning(
                User.user_id,
                User.name,
                User.email,
                User.created_at,
                User.updated_at,
            )
        )
        try:
            row = (await self.session.execute(stmt)).one()
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            logger.info("Signup conflict on email %s", email)
            raise ConflictError(Messages.USER_EXISTS, Messages.ALREADY_EXISTS) from None
        return PublicUser.model_validate(dict(row._mapping))
