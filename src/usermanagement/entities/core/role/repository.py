"""Role repository for data access operations."""

from __future__ import annotations

from sqlmodel import Session, select

from .entity import Role
from .table import RoleTable


class RoleRepository:
    """Data-access layer for roles."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, role_id: int) -> Role | None:
        row = self._session.get(RoleTable, role_id)
        if row is None:
            return None
        return Role.model_validate(row, from_attributes=True)

    def get_by_name(self, name: str) -> Role | None:
        statement = select(RoleTable).where(RoleTable.name == name)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return Role.model_validate(row, from_attributes=True)

    def list(self) -> list[Role]:
        rows = self._session.exec(select(RoleTable).order_by(RoleTable.name)).all()
        return [Role.model_validate(row, from_attributes=True) for row in rows]

    def create(self, role: Role) -> Role:
        """Persist a role and write the stored identifier back onto it."""
        row = RoleTable.model_validate(role, from_attributes=True)
        self._session.add(row)
        self._session.flush()
        role.id = row.id
        return role

    def delete(self, role_id: int) -> bool:
        """Delete a role and withdraw it from every user holding it."""
        from src.usermanagement.entities.core.user.table import UserRoleLink

        row = self._session.get(RoleTable, role_id)
        if row is None:
            return False
        links = self._session.exec(
            select(UserRoleLink).where(UserRoleLink.role_id == role_id)
        ).all()
        for link in links:
            self._session.delete(link)
        self._session.delete(row)
        self._session.flush()
        # Loaded role collections of users still reference the deleted row
        self._session.expire_all()
        return True
