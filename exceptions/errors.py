"""
Custom exception classes for the application.

Every error carries a stable code and an HTTP status so routers can
render it without knowing where it came from.
"""

from typing import Optional, Any
from datetime import datetime, timezone


class AppError(Exception):
    """
    Base exception for all application errors.

    All custom exceptions inherit from this.

    Attributes:
        code: Error code (e.g., "VIEW_NOT_FOUND")
        message: Human-readable message
        status_code: HTTP status code
        details: Additional context
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to API response format."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "timestamp": self.timestamp
            }
        }


class NotFoundError(AppError):
    """Resource not found (404)."""

    def __init__(
        self,
        resource: str,
        identifier: str,
        code: Optional[str] = None
    ):
        super().__init__(
            code=code or f"{resource.upper()}_NOT_FOUND",
            message=f"{resource} not found",
            status_code=404,
            details={"id": identifier}
        )


class ValidationError(AppError):
    """Validation failed (422)."""

    def __init__(
        self,
        message: str,
        code: str = "VALIDATION_ERROR",
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=422,
            details=details
        )


class ConflictError(AppError):
    """Conflict with existing resource (409)."""

    def __init__(
        self,
        message: str,
        code: str = "CONFLICT",
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=409,
            details=details
        )


class DuplicateError(ConflictError):
    """Duplicate resource (409)."""

    def __init__(
        self,
        resource: str,
        field: str,
        value: str,
        details: Optional[dict] = None
    ):
        super().__init__(
            code=f"{resource.upper()}_{field.upper()}_EXISTS",
            message=f"{resource} with this {field} already exists",
            details={field: value, **(details or {})}
        )


class DatabaseError(AppError):
    """Database operation failed (500)."""

    def __init__(
        self,
        operation: str,
        message: str,
        details: Optional[dict] = None
    ):
        super().__init__(
            code="DATABASE_ERROR",
            message=f"Database {operation} failed: {message}",
            status_code=500,
            details={"operation": operation, **(details or {})}
        )


class ConfigurationError(AppError):
    """Required configuration is missing or invalid (500)."""

    def __init__(self, missing: list[str], message: Optional[str] = None):
        super().__init__(
            code="CONFIGURATION_ERROR",
            message=message or (
                "Missing required configuration: " + ", ".join(missing)
            ),
            status_code=500,
            details={"missing": missing}
        )


# ===================
# PROJECT ERRORS
# ===================

class ProjectNotFoundError(NotFoundError):
    """No project is shared under this public key."""

    def __init__(self, public_key: str):
        super().__init__(
            resource="Project",
            identifier=public_key,
            code="PROJECT_NOT_FOUND"
        )


# ===================
# VIEW ERRORS
# ===================

class ViewNotFoundError(NotFoundError):
    """View not found."""

    def __init__(self, view_id: str):
        super().__init__(
            resource="View",
            identifier=view_id,
            code="VIEW_NOT_FOUND"
        )


class ViewIdxExistsError(DuplicateError):
    """Another view of the same project already uses this idx."""

    def __init__(self, project_id: str, idx: str):
        super().__init__(
            resource="View",
            field="idx",
            value=idx,
            details={"project_id": project_id}
        )


# ===================
# SELECTION ERRORS
# ===================

class InvalidSelectionError(ValidationError):
    """Value is not one of the selectable options."""

    def __init__(self, value: Any, options: list[Any]):
        super().__init__(
            code="INVALID_SELECTION",
            message=f"{value!r} is not a selectable option",
            details={"provided": str(value), "valid": [str(o) for o in options]}
        )
