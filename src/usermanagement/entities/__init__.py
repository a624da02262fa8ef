"""Entities module with entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .core.role import Role, RoleRepository, RoleTable
from .core.user import User, UserRepository, UserRoleLink, UserTable

__all__ = [
    "Role",
    "RoleTable",
    "RoleRepository",
    "User",
    "UserTable",
    "UserRoleLink",
    "UserRepository",
]
