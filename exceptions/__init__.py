"""
Custom exceptions module.

Import errors from here rather than from exceptions.errors.
"""

from exceptions.errors import (
    # Base exceptions
    AppError,
    NotFoundError,
    ValidationError,
    ConflictError,
    DuplicateError,
    DatabaseError,
    ConfigurationError,

    # Projects
    ProjectNotFoundError,

    # Views
    ViewNotFoundError,
    ViewIdxExistsError,

    # Selection state
    InvalidSelectionError,
)

__all__ = [
    # Base
    "AppError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "DuplicateError",
    "DatabaseError",
    "ConfigurationError",

    # Projects
    "ProjectNotFoundError",

    # Views
    "ViewNotFoundError",
    "ViewIdxExistsError",

    # Selection
    "InvalidSelectionError",
]
