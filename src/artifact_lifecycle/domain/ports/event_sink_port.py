"""
Event Sink Port Interface

Defines the contract for recording lifecycle observability events.
This is an output port - implemented by infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import Any

from artifact_lifecycle.domain.value_objects import LifecycleEvent


class IEventSink(ABC):
    """
    Port interface for structured lifecycle events.

    The only side channel of an artifact besides its outcomes.
    """

    @abstractmethod
    def record(
        self,
        event: LifecycleEvent,
        message: str,
        level: str = "debug",
        **fields: Any,
    ) -> None:
        """
        Record a lifecycle event.

        Args:
            event: Event kind tag
            message: Human-readable description
            level: Log level name (debug, info, warning, error)
            **fields: Additional structured fields
        """
        pass
