"""Core services exports."""

# Database Services
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

# User Services
from .user.user_management import UserManagementService

# Validation
from .validation.user_validation import UserValidationError, ensure_valid, validate_user

__all__ = [
    # Database Services
    "DbManageService",
    "DbSessionService",
    # User Services
    "UserManagementService",
    # Validation
    "UserValidationError",
    "ensure_valid",
    "validate_user",
]
