"""
File Artifact Service

Artifact backed by a staged temporary file.
"""

from pathlib import Path
from typing import Any, Optional, Union

from artifact_lifecycle.application.services.artifact import Artifact
from artifact_lifecycle.domain.errors import ValidationError
from artifact_lifecycle.domain.ports import IEventSink
from artifact_lifecycle.domain.value_objects import ArtifactTemplate
from artifact_lifecycle.infrastructure.persistence import (
    move_temporary_file,
    remove_temporary_file,
)


class FileArtifact(Artifact):
    """
    Artifact whose content is a temporary file written elsewhere.

    Saving moves the file into place; discarding removes it. Both
    tolerate a file that is already gone. Template start/stop hooks and
    extras are honoured; save/discard are fixed by the file.
    """

    def __init__(
        self,
        temporary_path: Union[str, Path],
        template: Optional[ArtifactTemplate] = None,
        *,
        event_sink: Optional[IEventSink] = None,
    ):
        """
        Initialize file artifact.

        Args:
            temporary_path: Staged file written by whoever captures the artifact
            template: Optional name, start/stop hooks and extras
            event_sink: Lifecycle event sink

        Raises:
            ValidationError: If the template carries save or discard hooks
        """
        if template is not None and (template.save is not None or template.discard is not None):
            raise ValidationError(
                "FileArtifact saves and discards its temporary file; template save/discard hooks are not allowed",
                details={"name": template.name},
            )

        super().__init__(template, event_sink=event_sink)
        self.temporary_path = Path(temporary_path)

    async def do_save(self, artifact_path: str, *args: Any) -> bool:
        return await move_temporary_file(self._event_sink, self.temporary_path, artifact_path)

    async def do_discard(self, *args: Any) -> bool:
        return await remove_temporary_file(self._event_sink, self.temporary_path)
