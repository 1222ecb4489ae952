"""Domain-level exceptions.

All failures the core reports are subclasses of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
``category`` tells the presentation layer how to label the message.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""

    category = "error"


class ValidationError(DomainException):
    """User input or order state breaks a business rule."""

    category = "warning"


class NotFoundError(DomainException):
    """A referenced supplier, product or order does not resolve."""


class BackendError(DomainException):
    """A call to the remote procurement backend failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
