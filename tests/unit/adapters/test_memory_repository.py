"""Unit tests for the in-memory user repository."""

import uuid

import pytest

from smart_wallet.adapters.users import InMemoryUserRepository
from smart_wallet.domain.aggregates import User


def test_save_and_get():
    """A saved user is returned by id as the same instance."""
    repo = InMemoryUserRepository()
    user = User(id=uuid.uuid4(), username="svetlana")

    assert repo.save(user) is user
    assert repo.get(user.id) is user


def test_find_by_username_exact_match():
    """Username lookup is an exact match."""
    repo = InMemoryUserRepository()
    user = repo.save(User(id=uuid.uuid4(), username="svetlana"))

    assert repo.find_by_username("svetlana") is user
    assert repo.find_by_username("Svetlana") is None


def test_missing_lookups_return_none():
    """Lookups on an empty repository return None."""
    repo = InMemoryUserRepository()
    assert repo.get(uuid.uuid4()) is None
    assert repo.find_by_username("nobody") is None
    assert not repo.list_all()


def test_list_all():
    """Every saved user is listed."""
    repo = InMemoryUserRepository()
    repo.save(User(id=uuid.uuid4()))
    repo.save(User(id=uuid.uuid4()))
    assert len(repo.list_all()) == 2


def test_save_without_id_rejected():
    """Users need an id before they can be stored."""
    with pytest.raises(ValueError):
        InMemoryUserRepository().save(User())
