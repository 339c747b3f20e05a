import os
import tempfile

import pytest

# Must be set before account_service.config is imported.
_tmp_dir = tempfile.mkdtemp(prefix="account-service-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_tmp_dir}/test.sqlite3"
os.environ["BCRYPT_ROUNDS"] = "4"

from account_service.services.errors import StorageUnavailable  # noqa: E402


class InMemoryCredentialStore:
    def __init__(self):
        self.records = []

    async def find_by_email(self, email):
        return next((r for r in self.records if r.email == email), None)

    async def create(self, record):
        record.id = f"u-{len(self.records) + 1}"
        self.records.append(record)
        return record

    async def list_all(self):
        return list(self.records)


class UnavailableCredentialStore:
    async def find_by_email(self, email):
        raise StorageUnavailable()

    async def create(self, record):
        raise StorageUnavailable()

    async def list_all(self):
        raise StorageUnavailable()


@pytest.fixture(autouse=True, scope="session")
def setup_test_db():
    import asyncio

    from account_service.database import create_tables

    asyncio.run(create_tables())


@pytest.fixture
def memory_store():
    return InMemoryCredentialStore()


@pytest.fixture
def unavailable_store():
    return UnavailableCredentialStore()


@pytest.fixture
def override_store():
    """Swap the credential store behind every endpoint for the test's own."""
    from account_service.dependencies import get_credential_store
    from account_service.main import app

    def _override(store):
        app.dependency_overrides[get_credential_store] = lambda: store

    yield _override
    app.dependency_overrides.clear()
