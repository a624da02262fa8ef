"""User entity module.

This module contains all User-related classes organized by responsibility:
- User: Domain entity
- UserTable: Database persistence model
- UserRoleLink: User/role association table
- UserRepository: Data access layer

This structure keeps all User-related code together while maintaining
separation of concerns within the module.
"""

from .entity import User
from .repository import UserRepository
from .table import UserRoleLink, UserTable

__all__ = ["User", "UserTable", "UserRoleLink", "UserRepository"]
