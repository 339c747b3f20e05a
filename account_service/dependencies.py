from fastapi import Depends

from account_service.database import async_session
from account_service.services.accounts import AuthenticationFlow, RegistrationFlow
from account_service.services.credential_store import CredentialStore, SqlAlchemyCredentialStore
from account_service.services.passwords import BcryptHasher


def get_credential_store() -> CredentialStore:
    return SqlAlchemyCredentialStore(async_session)


def get_password_hasher() -> BcryptHasher:
    return BcryptHasher()


def get_registration_flow(
    store: CredentialStore = Depends(get_credential_store),
    hasher: BcryptHasher = Depends(get_password_hasher),
) -> RegistrationFlow:
    return RegistrationFlow(store, hasher)


def get_authentication_flow(
    store: CredentialStore = Depends(get_credential_store),
    hasher: BcryptHasher = Depends(get_password_hasher),
) -> AuthenticationFlow:
    return AuthenticationFlow(store, hasher)
