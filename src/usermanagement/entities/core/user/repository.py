"""User repository for data access operations."""

from __future__ import annotations

from collections.abc import Iterable

from sqlmodel import Session, select

from src.usermanagement.entities.core.role.entity import Role
from src.usermanagement.entities.core.role.table import RoleTable

from .entity import User
from .table import UserTable

# confirm_password is never stored; roles go through the link table.
_NON_COLUMN_FIELDS = {"id", "roles", "confirm_password"}


class UserRepository:
    """Data-access layer for users."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, user_id: int) -> User | None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def get_by_username(self, username: str) -> User | None:
        statement = select(UserTable).where(UserTable.username == username)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def list(self) -> list[User]:
        rows = self._session.exec(select(UserTable).order_by(UserTable.id)).all()
        return [User.model_validate(row, from_attributes=True) for row in rows]

    def create(self, user: User) -> User:
        """Persist a user and write the stored identifier back onto it."""
        row = UserTable.model_validate(
            user.model_dump(exclude=_NON_COLUMN_FIELDS - {"id"})
        )
        row.roles = self._role_rows(user.roles)
        self._session.add(row)
        self._session.flush()
        user.id = row.id
        return user

    def update(self, user: User) -> User:
        """Overwrite the stored row for ``user.id`` with the entity's fields."""
        if user.id is None:
            raise ValueError("Cannot update a user without an id")
        row = self._session.get(UserTable, user.id)
        if row is None:
            raise ValueError(f"User {user.id} not found")

        row.sqlmodel_update(user.model_dump(exclude=_NON_COLUMN_FIELDS))
        row.roles = self._role_rows(user.roles)
        self._session.add(row)
        self._session.flush()
        return user

    def delete(self, user_id: int) -> bool:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    def _role_rows(self, roles: Iterable[Role] | None) -> list[RoleTable]:
        """Resolve role entities to their stored rows, by id or else by name."""
        rows = []
        for role in roles or ():
            row = None
            if role.id is not None:
                row = self._session.get(RoleTable, role.id)
            elif role.name is not None:
                statement = select(RoleTable).where(RoleTable.name == role.name)
                row = self._session.exec(statement).first()
            if row is None:
                raise ValueError(f"Role {role.name or role.id} is not stored")
            rows.append(row)
        return rows
