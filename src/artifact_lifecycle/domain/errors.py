"""
Domain Errors

Error types raised by the artifact lifecycle domain.
"""
from typing import Any, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(DomainError):
    """Invalid construction input."""
    pass


class InvalidStateError(DomainError):
    """Operation requested in a state that cannot serve it."""
    pass
