"""
Artifact Hooks Port Interface

Defines the capability interface concrete artifact kinds implement.
This is an output port - implemented by artifact kinds and templates.
"""

from abc import ABC
from typing import Any


class IArtifactHooks(ABC):
    """
    Port interface for the four artifact lifecycle hooks.

    Every hook is a no-op by default so a kind only overrides what it
    needs. The coordinator guarantees each hook runs at most once per
    episode and never concurrently with another hook of the same artifact.
    """

    async def do_start(self, *args: Any) -> Any:
        """
        Begin capturing the artifact (start a recording, open a log).

        Args:
            *args: Arguments passed to Artifact.start()
        """
        return None

    async def do_stop(self, *args: Any) -> Any:
        """
        Finish capturing the artifact.

        Args:
            *args: Arguments passed to Artifact.stop()
        """
        return None

    async def do_save(self, artifact_path: str, *args: Any) -> Any:
        """
        Persist the captured artifact.

        Args:
            artifact_path: Final destination of the artifact
            *args: Extra arguments passed to Artifact.save()
        """
        return None

    async def do_discard(self, *args: Any) -> Any:
        """
        Throw the captured artifact away.

        Args:
            *args: Arguments passed to Artifact.discard()
        """
        return None
