"""
Artifact Lifecycle Domain Layer

Value objects, errors and port interfaces shared by the application
and infrastructure layers.
"""

from .errors import DomainError, ValidationError, InvalidStateError
from .value_objects import (
    ArtifactState,
    ArtifactTemplate,
    LifecycleEvent,
    TestStatus,
    TestSummary,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "InvalidStateError",
    "ArtifactState",
    "ArtifactTemplate",
    "LifecycleEvent",
    "TestStatus",
    "TestSummary",
]
