"""Unit tests for the user model and email value object."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from muse.domain.model.user import User, UserPatch
from muse.domain.value import Email, UserId


class TestEmail:
    """Tests for the Email value object."""

    def test_normalizes_case_and_whitespace(self):
        assert Email("  Ada.Lovelace@Example.COM ").root == "ada.lovelace@example.com"

    def test_equality_ignores_case(self):
        assert Email("ADA@example.com") == Email("ada@EXAMPLE.com")

    @pytest.mark.parametrize(
        "value", ["", "ada", "ada@", "@example.com", "ada@example", "a b@example.com"]
    )
    def test_rejects_malformed(self, value):
        with pytest.raises(ValidationError):
            Email(value)

    def test_rejects_overlong(self):
        with pytest.raises(ValidationError):
            Email(f"{'a' * 250}@example.com")


class TestUser:
    """Tests for the User model."""

    def test_requires_a_credential(self):
        """A user with no password and no federated id should not validate."""
        with pytest.raises(ValidationError):
            User(id=UserId(uuid4()), email=Email("ada@example.com"))

    @pytest.mark.parametrize(
        "credentials",
        [
            {"password_hash": "digest"},
            {"federated_id": "g-1"},
            {"password_hash": "digest", "federated_id": "g-1"},
        ],
    )
    def test_accepts_either_credential(self, credentials):
        user = User(id=UserId(uuid4()), email=Email("ada@example.com"), **credentials)

        assert user.theme_defined is False
        assert user.has_password == ("password_hash" in credentials)

    def test_empty_password_hash_is_not_a_password(self):
        """An empty digest counts as no password, both for validation and ``has_password``."""
        with pytest.raises(ValidationError):
            User(id=UserId(uuid4()), email=Email("ada@example.com"), password_hash="")

        user = User(
            id=UserId(uuid4()),
            email=Email("ada@example.com"),
            password_hash="",
            federated_id="g-1",
        )

        assert user.has_password is False

    def test_is_immutable(self):
        user = User(id=UserId(uuid4()), email=Email("ada@example.com"), federated_id="g")

        with pytest.raises(ValidationError):
            user.theme_defined = True


class TestUserPatch:
    """Tests for UserPatch."""

    def test_changes_lists_given_fields(self):
        patch = UserPatch(email=Email("ada@example.com"), theme_defined=False)

        assert patch.changes() == {
            "email": Email("ada@example.com"),
            "theme_defined": False,
        }

    def test_empty_patch_changes_nothing(self):
        assert UserPatch().changes() == {}
