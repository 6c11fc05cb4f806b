"""Failures raised while locating, reading, or paging the guide."""

from __future__ import annotations

__all__ = [
    "DocumentError",
    "ResourceNotFoundError",
    "AccessDeniedError",
    "PagerUnavailableError",
]


class DocumentError(Exception):
    """Base exception for every viewer failure."""


class ResourceNotFoundError(DocumentError, FileNotFoundError):
    """Raised when the guide is missing from its installed location."""


class AccessDeniedError(DocumentError, PermissionError):
    """Raised when the guide exists but cannot be read."""


class PagerUnavailableError(DocumentError):
    """Raised when the pager broke after part of the guide was already shown."""
