"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from typing import Any, List, Tuple

import pytest

# Add src to path so tests run without an editable install
_src_path = Path(__file__).resolve().parent.parent / "src"
if str(_src_path) not in sys.path:
    sys.path.insert(0, str(_src_path))

from artifact_lifecycle.domain.ports import IEventSink
from artifact_lifecycle.domain.value_objects import LifecycleEvent


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external resources")


class RecordingEventSink(IEventSink):
    """Event sink keeping every record in memory."""

    def __init__(self):
        self.records: List[Tuple[LifecycleEvent, str, str, dict]] = []

    def record(self, event: LifecycleEvent, message: str, level: str = "debug", **fields: Any) -> None:
        self.records.append((event, message, level, fields))

    def events(self, level: str = None) -> List[LifecycleEvent]:
        return [
            event
            for event, _, record_level, _ in self.records
            if level is None or record_level == level
        ]

    @property
    def warnings(self) -> List[LifecycleEvent]:
        return self.events(level="warning")


@pytest.fixture
def event_sink() -> RecordingEventSink:
    """Create an in-memory event sink."""
    return RecordingEventSink()
