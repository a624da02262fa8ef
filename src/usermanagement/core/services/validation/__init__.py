from src.usermanagement.runtime.config.config_data import ValidationPolicy

from .user_validation import UserValidationError, ensure_valid, validate_user

__all__ = ["UserValidationError", "ValidationPolicy", "ensure_valid", "validate_user"]
