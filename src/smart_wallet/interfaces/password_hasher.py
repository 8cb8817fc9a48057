"""Interface for password hashing."""

import abc


class PasswordHasher(abc.ABC):
    """Contract for turning plaintext credentials into stored hashes."""

    @abc.abstractmethod
    def hash(self, plaintext: str) -> str:
        """Return the stored hash for a plaintext password."""

    @abc.abstractmethod
    def verify(self, plaintext: str, hashed: str) -> bool:
        """Return True if the plaintext matches the stored hash."""
