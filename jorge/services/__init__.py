"""Service layer modules for the Jorge archive browser."""

from . import archive_service, user_service

__all__ = [
    "archive_service",
    "user_service",
]
