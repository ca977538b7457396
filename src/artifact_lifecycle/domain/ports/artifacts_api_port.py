"""
Artifacts API Port Interface

Defines the bookkeeping and scheduling contract consumed by plugins
that drive many artifacts over the course of a test run.
"""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable

from artifact_lifecycle.domain.ports.artifact_port import IArtifact


IdleCallback = Callable[[], Awaitable[Any]]


class IArtifactsApi(ABC):
    """
    Port interface for artifact tracking and deferred work.
    """

    @abstractmethod
    def track_artifact(self, artifact: IArtifact) -> None:
        """
        Register interest in an artifact until it is saved or discarded.

        Args:
            artifact: Artifact to track
        """
        pass

    @abstractmethod
    def untrack_artifact(self, artifact: IArtifact) -> None:
        """
        Deregister an artifact. Unknown artifacts are ignored.

        Args:
            artifact: Artifact to stop tracking
        """
        pass

    @abstractmethod
    def request_idle_callback(self, callback: IdleCallback) -> None:
        """
        Schedule deferred work to run when the runner is idle.

        Args:
            callback: Coroutine function taking no arguments
        """
        pass
