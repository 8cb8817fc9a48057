"""ID generators for SMART WALLET."""

import uuid

from smart_wallet.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class UUIDv4Generator(IdGenerator):
    """UUIDv4 generator.

    UUIDv4 are universally unique identifiers that are randomly generated.
    They are not guaranteed to be sequential or ordered in any way.
    This generator uses Python's built-in `uuid` library to create UUIDv4 identifiers.
    """

    def new_id(self) -> uuid.UUID:
        """Generate a new UUID."""
        return uuid.uuid4()


class SimpleIdGenerator(IdGenerator):
    """A simple ID generator that produces sequential UUIDs.

    Note:
        Not suitable for production use; primarily for testing and demos.
    """

    def __init__(self) -> None:
        self._counter = 0

    def new_id(self) -> uuid.UUID:
        """Generate a new unique identifier."""
        self._counter += 1
        return uuid.UUID(int=self._counter)
