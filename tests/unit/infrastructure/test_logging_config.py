"""
Unit tests for structured logging configuration.
"""

from unittest.mock import Mock

import pytest
import structlog

from artifact_lifecycle.domain.value_objects import LifecycleEvent
from artifact_lifecycle.infrastructure.logging import (
    StructlogEventSink,
    configure_logging,
    get_logger,
)


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestStructlogEventSink:
    """Tests for StructlogEventSink."""

    def test_record_uses_level_and_event_kind(self):
        logger = Mock()
        sink = StructlogEventSink(logger)

        sink.record(LifecycleEvent.SAVE_ERROR, "cannot save", level="warning", artifact="video")

        logger.warning.assert_called_once_with(
            "cannot save", event_kind="SAVE_ERROR", artifact="video"
        )

    def test_record_defaults_to_debug(self):
        logger = Mock()
        StructlogEventSink(logger).record(LifecycleEvent.START, "starting video")

        logger.debug.assert_called_once_with("starting video", event_kind="START")

    def test_records_reach_structlog(self):
        with structlog.testing.capture_logs() as captured:
            StructlogEventSink(structlog.get_logger()).record(
                LifecycleEvent.MOVE_FILE_MISSING,
                "did not find temporary file: /tmp/a",
                level="warning",
                source="/tmp/a",
            )

        assert captured == [
            {
                "event": "did not find temporary file: /tmp/a",
                "event_kind": "MOVE_FILE_MISSING",
                "source": "/tmp/a",
                "log_level": "warning",
            }
        ]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_renderer(self):
        configure_logging("DEBUG", "json")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert structlog.get_config()["wrapper_class"] is structlog.stdlib.BoundLogger

    def test_text_renderer(self):
        configure_logging("INFO", "text")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


class TestGetLogger:
    """Tests for get_logger and the default sink logger."""

    def test_default_sink_writes_through_get_logger(self):
        with structlog.testing.capture_logs() as captured:
            StructlogEventSink().record(
                LifecycleEvent.STOP, "stopping video", artifact="video"
            )

        assert captured == [
            {
                "event": "stopping video",
                "event_kind": "STOP",
                "artifact": "video",
                "log_level": "debug",
            }
        ]

    def test_get_logger_writes_to_structlog(self):
        with structlog.testing.capture_logs() as captured:
            get_logger("tests").info("saving video", artifact_path="/out/video.mp4")

        assert captured == [
            {
                "event": "saving video",
                "artifact_path": "/out/video.mp4",
                "log_level": "info",
            }
        ]
