"""Registration and authentication flows.

Both flows are stateless: every call reads from and writes to the injected
credential store and nothing is kept between calls.
"""
import logging

from account_service.models.user import User
from account_service.schemas.auth import Identity
from account_service.services.credential_store import CredentialStore
from account_service.services.errors import (
    AccountNotFound,
    DuplicateAccount,
    InvalidCredentials,
    MissingCredentials,
    StorageUnavailable,
)
from account_service.services.passwords import BcryptHasher

logger = logging.getLogger(__name__)


def _require(email: str, password: str) -> None:
    if not email or not password:
        raise MissingCredentials()


class RegistrationFlow:
    def __init__(self, store: CredentialStore, hasher: BcryptHasher):
        self.store = store
        self.hasher = hasher

    async def register(self, username: str | None, email: str, password: str) -> Identity:
        """Create a user record unless the email is already registered.

        The duplicate check and the insert are two separate store calls, so
        two concurrent sign-ups with the same email can both succeed.
        """
        _require(email, password)
        try:
            existing = await self.store.find_by_email(email)
            if existing is not None:
                logger.info("Sign-up rejected, email already registered")
                raise DuplicateAccount(email)

            record = await self.store.create(User(
                username=username,
                email=email,
                password_hash=self.hasher.hash(password),
            ))
        except StorageUnavailable as e:
            raise StorageUnavailable("registration") from e

        logger.info("Registered user %s", record.id)
        return Identity.model_validate(record)


class AuthenticationFlow:
    def __init__(self, store: CredentialStore, hasher: BcryptHasher):
        self.store = store
        self.hasher = hasher

    async def authenticate(self, email: str, password: str) -> Identity:
        _require(email, password)
        try:
            record = await self.store.find_by_email(email)
        except StorageUnavailable as e:
            raise StorageUnavailable("login") from e

        if record is None:
            logger.info("Login rejected, email not registered")
            raise AccountNotFound(email)

        if not self.hasher.verify(password, record.password_hash):
            logger.warning("Login rejected, password mismatch for user %s", record.id)
            raise InvalidCredentials()

        logger.info("User %s logged in", record.id)
        return Identity.model_validate(record)
