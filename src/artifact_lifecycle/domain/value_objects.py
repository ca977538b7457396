"""
Artifact Value Objects

Immutable value objects describing artifact lifecycle concepts.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Optional

from artifact_lifecycle.domain.errors import ValidationError


Hook = Callable[..., Awaitable[Any]]


class LifecycleEvent(str, Enum):
    """Kind tag attached to every lifecycle log record."""

    START = "START"
    STOP = "STOP"
    SAVE = "SAVE"
    SAVE_ERROR = "SAVE_ERROR"
    DISCARD = "DISCARD"
    MOVE_FILE = "MOVE_FILE"
    MOVE_FILE_MISSING = "MOVE_FILE_MISSING"


class ArtifactState(str, Enum):
    """
    Lifecycle state of an artifact.

    Never stored: always derived from which outcome slots are populated.
    """

    FRESH = "fresh"
    RUNNING = "running"
    STOPPED = "stopped"
    SAVED = "saved"
    DISCARDED = "discarded"


class TestStatus(str, Enum):
    """Status of the test an artifact belongs to."""

    __test__ = False

    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"


@dataclass
class ArtifactTemplate:
    """
    Construction contract for an artifact.

    Attributes:
        name: Display name; the artifact class name is used when empty
        start: Async hook run by Artifact.start()
        stop: Async hook run by Artifact.stop()
        save: Async hook run by Artifact.save(path), receives the path first
        discard: Async hook run by Artifact.discard()
        extras: Free-form side table for caller data, not used by the lifecycle
    """

    name: Optional[str] = None
    start: Optional[Hook] = None
    stop: Optional[Hook] = None
    save: Optional[Hook] = None
    discard: Optional[Hook] = None
    extras: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Reject hooks that cannot be called."""
        for hook_name in ("start", "stop", "save", "discard"):
            hook = getattr(self, hook_name)
            if hook is not None and not callable(hook):
                raise ValidationError(
                    f"Template hook '{hook_name}' must be callable",
                    details={"hook": hook_name, "type": type(hook).__name__},
                )


@dataclass(frozen=True)
class TestSummary:
    """
    Test being recorded by a snapshot plugin.

    Attributes:
        title: Short test title
        full_name: Fully qualified test name
        status: Current test status
    """

    __test__ = False

    title: str
    full_name: str
    status: TestStatus = TestStatus.RUNNING

    @property
    def passed(self) -> bool:
        return self.status == TestStatus.PASSED
