from datetime import datetime

from loguru import logger
from sqlmodel import Session

from src.usermanagement.core.services.validation.user_validation import ensure_valid
from src.usermanagement.entities.core.role.entity import Role
from src.usermanagement.entities.core.role.repository import RoleRepository
from src.usermanagement.entities.core.user.entity import User
from src.usermanagement.entities.core.user.repository import UserRepository
from src.usermanagement.runtime.config.config_data import ValidationPolicy


class UserManagementService:
    """Registers users, maintains their roles and keeps their timestamps.

    Every write validates the user first and commits the session on
    success; on failure the session is rolled back and the error re-raised.
    """

    def __init__(self, db_session: Session, policy: ValidationPolicy | None = None):
        self._db_session = db_session
        self._policy = policy
        self._user_repo = UserRepository(db_session)
        self._role_repo = RoleRepository(db_session)

    def register_user(self, user: User) -> User:
        """Validate and store a new user.

        Unset timestamps are stamped with the current time; timezone-aware
        ones are converted to naive local time.

        Raises:
            UserValidationError: If the user breaks a validation rule.
            ValueError: If the username is already taken.
        """
        ensure_valid(user, self._policy)
        try:
            if self._user_repo.get_by_username(user.username) is not None:
                raise ValueError(f"Username '{user.username}' is already taken")

            _localize_timestamps(user)
            now = datetime.now()
            if user.created_on is None:
                user.created_on = now
            if user.last_modified_on is None:
                user.last_modified_on = max(now, user.created_on)

            created = self._user_repo.create(user)
            self._db_session.commit()
            logger.info("Registered user {} (id={})", created.username, created.id)
            return created
        except Exception as e:
            logger.error(f"Error registering user {user.username}: {e}")
            self._db_session.rollback()
            raise

    def update_user(self, user: User) -> User:
        """Validate and overwrite an existing user, refreshing last_modified_on.

        Raises:
            UserValidationError: If the user breaks a validation rule.
            ValueError: If the user does not exist or the new username
                belongs to another user.
        """
        ensure_valid(user, self._policy)
        try:
            if user.id is None or self._user_repo.get(user.id) is None:
                raise ValueError(f"User {user.username} not found")
            holder = self._user_repo.get_by_username(user.username)
            if holder is not None and holder.id != user.id:
                raise ValueError(f"Username '{user.username}' is already taken")

            _localize_timestamps(user)
            self._touch(user)
            self._user_repo.update(user)
            self._db_session.commit()
            logger.info("Updated user {} (id={})", user.username, user.id)
            return user
        except Exception as e:
            logger.error(f"Error updating user {user.username}: {e}")
            self._db_session.rollback()
            raise

    def create_role(self, name: str) -> Role:
        """Store a new role.

        Raises:
            ValueError: If the name is blank or already used.
        """
        name = (name or "").strip()
        if not name:
            raise ValueError("Role name must not be blank")
        try:
            if self._role_repo.get_by_name(name) is not None:
                raise ValueError(f"Role '{name}' already exists")

            role = self._role_repo.create(Role(name=name))
            self._db_session.commit()
            logger.info("Created role {} (id={})", role.name, role.id)
            return role
        except Exception as e:
            logger.error(f"Error creating role {name}: {e}")
            self._db_session.rollback()
            raise

    def assign_role(self, username: str, role_name: str) -> User:
        """Add a stored role to a stored user's role set.

        Assigning a role the user already holds leaves the set unchanged.

        Raises:
            ValueError: If the user or the role does not exist.
        """
        try:
            user = self._user_repo.get_by_username(username)
            if user is None:
                raise ValueError(f"User '{username}' not found")
            role = self._role_repo.get_by_name(role_name)
            if role is None:
                raise ValueError(f"Role '{role_name}' not found")

            if role in user.roles:
                logger.debug("User {} already holds role {}", username, role_name)
                return user

            user.roles.add(role)
            self._touch(user)
            self._user_repo.update(user)
            self._db_session.commit()
            logger.info("Assigned role {} to user {}", role_name, username)
            return user
        except Exception as e:
            logger.error(f"Error assigning role {role_name} to {username}: {e}")
            self._db_session.rollback()
            raise

    def get_user(self, username: str) -> User | None:
        return self._user_repo.get_by_username(username)

    def list_users(self) -> list[User]:
        return self._user_repo.list()

    def list_roles(self) -> list[Role]:
        return self._role_repo.list()

    @staticmethod
    def _touch(user: User) -> None:
        """Set last_modified_on to now, never earlier than created_on."""
        now = datetime.now()
        if user.created_on is not None and user.created_on > now:
            now = user.created_on
        user.last_modified_on = now


def _localize_timestamps(user: User) -> None:
    """Convert timezone-aware timestamps to naive local time in place."""
    for field in ("created_on", "last_modified_on"):
        value = getattr(user, field)
        if isinstance(value, datetime) and value.tzinfo is not None:
            setattr(user, field, value.astimezone().replace(tzinfo=None))
