"""
Application Services

Artifact lifecycle coordination and the services that drive it.
"""

from .artifact import Artifact, TemplateHooks
from .file_artifact import FileArtifact
from .artifacts_api import ArtifactsApiService
from .snapshot_plugin import TwoSnapshotsPerTestPlugin

__all__ = [
    "Artifact",
    "TemplateHooks",
    "FileArtifact",
    "ArtifactsApiService",
    "TwoSnapshotsPerTestPlugin",
]
