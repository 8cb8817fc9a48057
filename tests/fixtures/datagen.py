"""Data generation fixtures."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from smart_wallet.domain.value_objects import Country
from smart_wallet.service_layer.dto import RegisterRequest, UserEditRequest


@pytest.fixture
def make_register_request() -> Callable[..., RegisterRequest]:
    """Factory for registration requests with sensible defaults."""

    def _make(**overrides: Any) -> RegisterRequest:
        params: dict[str, Any] = {
            "username": "svetlana",
            "password": "testtest123",
            "country": Country.SWITZERLAND,
        }
        params.update(overrides)
        return RegisterRequest(**params)

    return _make


@pytest.fixture
def make_edit_request() -> Callable[..., UserEditRequest]:
    """Factory for profile edit requests with sensible defaults."""

    def _make(**overrides: Any) -> UserEditRequest:
        params: dict[str, Any] = {
            "first_name": "Svetlana",
            "last_name": "Sieber",
            "email": "sieber.test@gmail.com",
            "profile_picture": "www.image.com",
        }
        params.update(overrides)
        return UserEditRequest(**params)

    return _make
