"""Role entity module.

This module contains all Role-related classes organized by responsibility:
- Role: Domain entity
- RoleTable: Database persistence model
- RoleRepository: Data access layer
"""

from .entity import Role
from .repository import RoleRepository
from .table import RoleTable

__all__ = ["Role", "RoleTable", "RoleRepository"]
