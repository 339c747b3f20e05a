import bcrypt

from account_service.config import settings

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def _encode(plain: str) -> bytes:
    return plain.encode("utf-8", errors="surrogatepass")[:MAX_PASSWORD_BYTES]


class BcryptHasher:
    """Salted one-way hashing backed by bcrypt."""

    def __init__(self, rounds: int | None = None):
        self.rounds = rounds or settings.bcrypt_rounds

    def hash(self, plain: str) -> str:
        return bcrypt.hashpw(_encode(plain), bcrypt.gensalt(rounds=self.rounds)).decode()

    def verify(self, plain: str, password_hash: str) -> bool:
        return bcrypt.checkpw(_encode(plain), password_hash.encode())
