"""
Artifact Port Interface

Defines the public lifecycle operations of an artifact.
This is an input port - implemented by application layer.
"""

from abc import ABC, abstractmethod
from typing import Any

from artifact_lifecycle.domain.outcome import Outcome


class IArtifact(ABC):
    """
    Port interface for artifact lifecycle operations.

    All operations must be called from inside a running event loop and
    return immediately with an Outcome.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def start(self, *args: Any) -> Outcome:
        """Open a new episode and start capturing."""
        pass

    @abstractmethod
    def stop(self, *args: Any) -> Outcome:
        """Stop capturing once started."""
        pass

    @abstractmethod
    def save(self, artifact_path: str, *args: Any) -> Outcome:
        """Stop if needed, then persist to artifact_path."""
        pass

    @abstractmethod
    def discard(self, *args: Any) -> Outcome:
        """Stop if needed, then throw the artifact away."""
        pass
