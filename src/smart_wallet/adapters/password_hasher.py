"""Password hashing backed by passlib."""

from passlib.context import CryptContext

from smart_wallet.interfaces.password_hasher import PasswordHasher

DEFAULT_SCHEMES = ("pbkdf2_sha256",)


class PasslibPasswordHasher(PasswordHasher):
    """Hash and verify passwords with a passlib `CryptContext`.

    Args:
        schemes: passlib scheme names, the first one is used for new hashes.
    """

    def __init__(self, schemes: tuple[str, ...] = DEFAULT_SCHEMES) -> None:
        self._context = CryptContext(schemes=list(schemes), deprecated="auto")

    def hash(self, plaintext: str) -> str:
        return self._context.hash(plaintext)

    def verify(self, plaintext: str, hashed: str) -> bool:
        return self._context.verify(plaintext, hashed)
