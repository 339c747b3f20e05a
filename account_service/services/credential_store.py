import logging
import uuid
from typing import Protocol, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from account_service.models.user import User
from account_service.services.errors import StorageUnavailable

logger = logging.getLogger(__name__)


class CredentialStore(Protocol):
    async def find_by_email(self, email: str) -> User | None: ...

    async def create(self, record: User) -> User: ...

    async def list_all(self) -> Sequence[User]: ...


class SqlAlchemyCredentialStore:
    """User records in the ``users`` table.

    Email uniqueness is not enforced here. Driver failures are raised as
    ``StorageUnavailable`` so no database detail reaches the caller.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def find_by_email(self, email: str) -> User | None:
        try:
            async with self.session_factory() as session:
                result = await session.execute(select(User).where(User.email == email))
                return result.scalars().first()
        except (SQLAlchemyError, OSError) as e:
            logger.exception("Lookup by email failed")
            raise StorageUnavailable() from e

    async def create(self, record: User) -> User:
        if record.id is None:
            record.id = str(uuid.uuid4())
        try:
            async with self.session_factory() as session:
                session.add(record)
                await session.commit()
                await session.refresh(record)
                return record
        except (SQLAlchemyError, OSError) as e:
            logger.exception("Creating user record failed")
            raise StorageUnavailable() from e

    async def list_all(self) -> Sequence[User]:
        try:
            async with self.session_factory() as session:
                result = await session.execute(select(User))
                return result.scalars().all()
        except (SQLAlchemyError, OSError) as e:
            logger.exception("Listing user records failed")
            raise StorageUnavailable() from e
