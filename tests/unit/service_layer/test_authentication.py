"""Unit tests for AuthenticationMetadata."""

import uuid

import pytest

from smart_wallet.domain.value_objects import UserRole
from smart_wallet.service_layer.authentication import AuthenticationMetadata


@pytest.mark.parametrize(
    ("role", "authority"),
    [(UserRole.USER, "ROLE_USER"), (UserRole.ADMIN, "ROLE_ADMIN")],
)
def test_single_authority_per_role(role, authority):
    """Each role grants exactly one ROLE_<NAME> authority."""
    metadata = AuthenticationMetadata(
        user_id=uuid.uuid4(),
        username="svetlana",
        password="hash",
        is_active=True,
        role=role,
    )
    assert metadata.authorities == frozenset({authority})


def test_is_enabled_follows_active_flag():
    """is_enabled mirrors is_active."""
    metadata = AuthenticationMetadata(
        user_id=None, username="x", password=None, is_active=False, role=UserRole.USER
    )
    assert metadata.is_enabled is False
