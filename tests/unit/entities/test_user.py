"""Unit tests for the User entity.

Covers field assignment and reads, null acceptance, the role set,
timestamps and all-field equality/hashing.
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from src.usermanagement.entities.core.role.entity import Role
from src.usermanagement.entities.core.user.entity import User


class TestUserFields:
    """Assignment followed by a read returns the assigned value."""

    def test_user_creation(self, user: User):
        assert user is not None

    def test_id(self, user: User):
        assert user.id == 1

    def test_first_name(self, user: User):
        assert user.first_name == "John"

    def test_last_name(self, user: User):
        assert user.last_name == "Doe"

    def test_full_name_expression(self, user: User):
        assert user.first_name + " " + user.last_name == "John Doe"

    def test_email(self, user: User):
        assert "@" in user.email
        assert user.email == "john.doe@example.com"

    def test_username(self, user: User):
        assert user.username == "johndoe"

    def test_passwords(self, user: User):
        assert user.password == "securePassword123"
        assert user.confirm_password == "securePassword123"

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("id", 42),
            ("first_name", "Ada"),
            ("last_name", "Lovelace"),
            ("email", "ada@example.org"),
            ("username", "ada"),
            ("password", "p4ssw0rd!"),
            ("confirm_password", "something else"),
            ("roles", {Role(id=7, name="ROLE_ADMIN")}),
            ("created_on", datetime(2023, 5, 1, 9, 0)),
            ("last_modified_on", datetime(2023, 5, 2, 9, 0)),
        ],
    )
    def test_assignment_round_trip(self, field: str, value: object):
        """Reading a field returns the very object that was assigned."""
        user = User()
        setattr(user, field, value)

        assert getattr(user, field) is value

    def test_no_validation_on_assignment(self):
        """Values that break the validation rules are stored as given."""
        user = User()
        user.first_name = "J"
        user.email = "not-an-email"
        user.password = ""

        assert user.first_name == "J"
        assert len(user.first_name) < 2
        assert user.email == "not-an-email"
        assert user.password == ""

    def test_assignment_accepts_non_text_values(self):
        user = User()
        user.first_name = 123

        assert user.first_name == 123

    def test_keyword_construction_is_type_checked(self):
        with pytest.raises(ValidationError):
            User(first_name=123)

    def test_valid_data_does_not_raise(self):
        safe_user = User()
        safe_user.first_name = "ValidName"
        safe_user.email = "valid@email.com"

        assert safe_user.first_name == "ValidName"


class TestUserDefaults:
    """A new user starts with every field unset."""

    def test_all_fields_unset(self):
        user = User()

        assert user.id is None
        assert user.first_name is None
        assert user.last_name is None
        assert user.email is None
        assert user.username is None
        assert user.password is None
        assert user.confirm_password is None
        assert user.roles == set()
        assert user.created_on is None
        assert user.last_modified_on is None

    def test_role_sets_are_not_shared(self):
        first, second = User(), User()
        first.roles.add(Role(id=1, name="ROLE_USER"))

        assert second.roles == set()

    def test_first_name_accepts_none(self):
        null_user = User()
        null_user.first_name = None

        assert null_user.first_name is None

    def test_populated_fields_accept_none(self, user: User):
        user.email = None
        user.created_on = None

        assert user.email is None
        assert user.created_on is None


class TestUserRoles:
    def test_roles_not_empty(self, user: User):
        assert user.roles
        assert len(user.roles) == 1

    def test_role_content(self, user: User):
        first_role = next(iter(user.roles))

        assert first_role.name == "ROLE_USER"

    def test_duplicate_role_is_stored_once(self, user: User):
        user.roles.add(Role(id=1, name="ROLE_USER"))

        assert len(user.roles) == 1

    def test_membership_by_equality(self, user: User):
        assert Role(id=1, name="ROLE_USER") in user.roles
        assert Role(id=2, name="ROLE_USER") not in user.roles


class TestUserTimestamps:
    def test_created_on(self, user: User):
        assert user.created_on is not None
        assert user.created_on.year == 2024

    def test_last_modified_after_created(self, user: User):
        assert user.last_modified_on > user.created_on

    def test_ordering_not_enforced_on_assignment(self, user: User):
        """The entity stores timestamps in any order; callers keep them ordered."""
        user.last_modified_on = datetime(2023, 12, 31, 23, 59)

        assert user.last_modified_on < user.created_on


class TestUserEquality:
    """Equality and hashing cover every field."""

    def _copy(self, user: User) -> User:
        return User(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            username=user.username,
            password=user.password,
            confirm_password=user.confirm_password,
            roles=set(user.roles),
            created_on=user.created_on,
            last_modified_on=user.last_modified_on,
        )

    def test_identical_fields_are_equal(self, user: User):
        other = self._copy(user)

        assert user == other
        assert hash(user) == hash(other)

    def test_same_id_different_first_name_not_equal(self, user: User):
        user2 = User()
        user2.id = 1
        user2.first_name = "Jane"

        assert user != user2

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("first_name", "Jane"),
            ("last_name", "Roe"),
            ("email", "other@example.com"),
            ("username", "other"),
            ("password", "differentPassword"),
            ("confirm_password", "differentPassword"),
            ("roles", set()),
            ("created_on", datetime(2020, 1, 1)),
            ("last_modified_on", datetime(2020, 1, 2)),
        ],
    )
    def test_single_field_difference_breaks_equality(
        self, user: User, field: str, value: object
    ):
        other = self._copy(user)
        setattr(other, field, value)

        assert user != other

    def test_equality_is_not_keyed_on_id(self):
        assert User(id=1, first_name="A") != User(id=1, first_name="B")
        assert User(first_name="A") == User(first_name="A")

    def test_empty_users_are_equal(self):
        assert User() == User()
        assert hash(User()) == hash(User())

    def test_hash_with_unset_fields(self):
        user = User()
        user.roles = None

        assert isinstance(hash(user), int)
        assert user == user

    def test_hash_requires_hashable_values(self):
        user = User()
        user.first_name = ["J"]

        with pytest.raises(TypeError):
            hash(user)
        assert user == user

    def test_users_usable_in_sets(self, user: User):
        assert len({user, self._copy(user)}) == 1

    def test_not_equal_to_other_types(self, user: User):
        assert user != "johndoe"
        assert user != Role(id=1, name="ROLE_USER")


class TestUserRepresentation:
    def test_repr_shows_profile_fields(self, user: User):
        user_str = repr(user)

        assert "John" in user_str
        assert "Doe" in user_str
        assert "john.doe@example.com" in user_str

    def test_repr_hides_passwords(self, user: User):
        assert "securePassword123" not in repr(user)
        assert "securePassword123" not in str(user)
