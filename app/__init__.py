"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings, Settings, SearchStrategy
from app.exceptions import (
    AppError,
    ServiceValidationError,
    NotFoundError,
    ConflictError,
    UnauthorizedError,
    InternalError,
)

__all__ = [
    "settings",
    "Settings",
    "SearchStrategy",
    "AppError",
    "ServiceValidationError",
    "NotFoundError",
    "ConflictError",
    "UnauthorizedError",
    "InternalError",
]
