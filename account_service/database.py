import os

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from account_service.config import settings


def _get_database_url() -> str:
    url = settings.database_url
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+asyncpg://", 1)
    elif url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def _is_sqlite() -> bool:
    return settings.database_url.startswith("sqlite")


def _sqlite_directory() -> str | None:
    path = settings.database_url.split(":///", 1)[-1]
    if not path or path == ":memory:":
        return None
    return os.path.dirname(path) or None


_database_url = _get_database_url()

_engine_kwargs: dict = {"echo": False}
if _is_sqlite():
    # one connection per checkout, sqlite files are cheap to open
    _engine_kwargs["poolclass"] = NullPool
else:
    _engine_kwargs.update(pool_size=5, max_overflow=10, pool_pre_ping=True)

engine = create_async_engine(_database_url, **_engine_kwargs)
async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


async def create_tables():
    if _is_sqlite():
        directory = _sqlite_directory()
        if directory:
            os.makedirs(directory, exist_ok=True)
    async with engine.begin() as conn:
        from account_service.models import user  # noqa: F401
        await conn.run_sync(Base.metadata.create_all)
