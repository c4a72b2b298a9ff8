from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)

class DemoError(Exception):
    """Base exception for the ORM demo."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

        logger.error(f"{self.__class__.__name__}: {message}", extra={"details": self.details})

class OperationFailedError(DemoError):
    """Raised when any database operation fails.

    Covers constraint violations, connectivity failures and anything else
    the database client raises; callers do not tell them apart.
    """

    def __init__(self, operation: str, error: str):
        message = f"Database operation '{operation}' failed: {error}"
        details = {"operation": operation, "database_error": error}
        super().__init__(message, details)

class ConfigurationError(DemoError, ValueError):
    """Raised when configuration is invalid."""

    def __init__(self, setting: str, reason: str):
        message = f"Configuration error for '{setting}': {reason}"
        details = {"setting": setting, "reason": reason}
        super().__init__(message, details)
