"""
Artifact Lifecycle

Coordinates start/stop/save/discard of ephemeral test artifacts.
"""

__version__ = "0.1.0"

from .domain.errors import DomainError, ValidationError, InvalidStateError
from .domain.outcome import Outcome
from .domain.ports import IArtifact, IArtifactHooks, IArtifactsApi, IEventSink
from .domain.value_objects import (
    ArtifactState,
    ArtifactTemplate,
    LifecycleEvent,
    TestStatus,
    TestSummary,
)
from .application.services import (
    Artifact,
    ArtifactsApiService,
    FileArtifact,
    TwoSnapshotsPerTestPlugin,
)
from .infrastructure.persistence import move_temporary_file

__all__ = [
    "DomainError",
    "ValidationError",
    "InvalidStateError",
    "Outcome",
    "IArtifact",
    "IArtifactHooks",
    "IArtifactsApi",
    "IEventSink",
    "ArtifactState",
    "ArtifactTemplate",
    "LifecycleEvent",
    "TestStatus",
    "TestSummary",
    "Artifact",
    "ArtifactsApiService",
    "FileArtifact",
    "TwoSnapshotsPerTestPlugin",
    "move_temporary_file",
]
