"""Unit tests for the user -> edit request mapper."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from smart_wallet.domain.aggregates import User
from smart_wallet.service_layer.mapper import map_user_to_user_edit_request


def test_happy_path():
    """The four profile fields are copied over."""
    user = User(
        first_name="Svetlana",
        last_name="Sieber",
        email="sieber.test@gmail.com",
        profile_picture="www.image.com",
    )

    result = map_user_to_user_edit_request(user)

    assert result.first_name == user.first_name
    assert result.last_name == user.last_name
    assert result.email == user.email
    assert result.profile_picture == user.profile_picture


optional_text = st.one_of(st.none(), st.text(max_size=30))


@pytest.mark.property
@given(
    first_name=optional_text,
    last_name=optional_text,
    email=optional_text,
    profile_picture=optional_text,
)
def test_copies_any_profile(first_name, last_name, email, profile_picture):
    """Output fields equal input fields for any profile, None and '' included."""
    user = User(
        first_name=first_name,
        last_name=last_name,
        email=email,
        profile_picture=profile_picture,
    )

    result = map_user_to_user_edit_request(user)

    assert (result.first_name, result.last_name, result.email, result.profile_picture) == (
        first_name,
        last_name,
        email,
        profile_picture,
    )
