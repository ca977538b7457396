"""
Snapshot Plugin

Base plugin taking a snapshot artifact before and after each test.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

import structlog

from artifact_lifecycle.application.services.file_artifact import FileArtifact
from artifact_lifecycle.domain.ports import IArtifact, IArtifactsApi
from artifact_lifecycle.domain.value_objects import TestSummary


logger = structlog.get_logger(__name__)


class TwoSnapshotsPerTestPlugin(ABC):
    """
    Takes a "beforeEach" and an "afterEach" snapshot of every test.

    The afterEach snapshot is only taken for tests whose artifacts are
    kept. Saving and discarding are never awaited by the test hooks;
    they are deferred to the artifacts API idle callbacks.

    Subclasses decide how a snapshot is captured (create_test_artifact)
    and where it is saved (prepare_path_for_snapshot).
    """

    def __init__(
        self,
        api: IArtifactsApi,
        enabled: bool = True,
        keep_only_failed: bool = False,
    ):
        """
        Initialize plugin.

        Args:
            api: Artifacts API used for tracking and idle callbacks
            enabled: Whether automatic snapshots are taken
            keep_only_failed: Discard snapshots of tests that passed
        """
        self.api = api
        self.enabled = enabled
        self.keep_only_failed = keep_only_failed
        self.test_summary: Optional[TestSummary] = None
        self.snapshots: Dict[str, Optional[IArtifact]] = {}

    async def on_before_each(self, test_summary: TestSummary) -> None:
        """Flush leftover snapshots, then snapshot the test's initial state."""
        self.test_summary = None
        self._start_saving_snapshots()

        self.test_summary = test_summary
        await self._take_automatic_snapshot("beforeEach")

    async def on_after_each(self, test_summary: TestSummary) -> None:
        """Snapshot and keep, or throw away, the test's snapshots."""
        self.test_summary = test_summary

        if self.should_keep_artifact_of_test(test_summary):
            await self._take_automatic_snapshot("afterEach")
            self._start_saving_snapshots()
        else:
            self._start_discarding_snapshots()

    async def on_after_all(self) -> None:
        """Save snapshots registered outside of any test."""
        self._start_saving_snapshots()

    def should_keep_artifact_of_test(self, test_summary: TestSummary) -> bool:
        if self.keep_only_failed and test_summary.passed:
            return False
        return True

    @abstractmethod
    async def prepare_path_for_snapshot(
        self, test_summary: Optional[TestSummary], snapshot_name: str
    ) -> Union[str, Path]:
        """
        Resolve the destination of a snapshot.

        Args:
            test_summary: Test the snapshot belongs to, None outside a test
            snapshot_name: Name the snapshot was registered under

        Returns:
            Destination path
        """
        pass

    @abstractmethod
    def create_test_artifact(self) -> IArtifact:
        """
        Create a handle for a new snapshot.

        Returns:
            Artifact whose start/stop capture the snapshot
        """
        pass

    def register_snapshot(self, name: str, snapshot: Union[str, Path, IArtifact]) -> None:
        """
        Register a snapshot to be saved or discarded with the current test.

        Args:
            name: Snapshot name
            snapshot: An artifact, or the path of an already captured
                temporary file
        """
        if isinstance(snapshot, (str, Path)):
            artifact: IArtifact = FileArtifact(snapshot)
            # the file is captured already; saving must move it
            artifact.start()
            artifact.stop()
        else:
            artifact = snapshot

        self.snapshots[name] = artifact
        self.api.track_artifact(artifact)

    async def _take_automatic_snapshot(self, name: str) -> None:
        if self.enabled:
            await self._take_snapshot(name)

    async def _take_snapshot(self, name: str) -> None:
        snapshot = self.create_test_artifact()
        await snapshot.start()
        await snapshot.stop()

        self.register_snapshot(name, snapshot)

    def _start_saving_snapshots(self) -> None:
        test_summary = self.test_summary
        snapshots, self.snapshots = self.snapshots, {}

        for name, snapshot in snapshots.items():
            if snapshot is None:
                continue

            logger.debug("Scheduling snapshot save", snapshot=name, artifact=snapshot.name)
            self.api.request_idle_callback(self._save_callback(test_summary, name, snapshot))

    def _start_discarding_snapshots(self) -> None:
        snapshots, self.snapshots = self.snapshots, {}

        for name, snapshot in snapshots.items():
            if snapshot is None:
                continue

            logger.debug("Scheduling snapshot discard", snapshot=name, artifact=snapshot.name)
            self.api.request_idle_callback(self._discard_callback(snapshot))

    def _save_callback(
        self,
        test_summary: Optional[TestSummary],
        name: str,
        snapshot: IArtifact,
    ):
        async def save_snapshot() -> None:
            artifact_path = await self.prepare_path_for_snapshot(test_summary, name)
            await snapshot.save(str(artifact_path))
            self.api.untrack_artifact(snapshot)

        return save_snapshot

    def _discard_callback(self, snapshot: IArtifact):
        async def discard_snapshot() -> None:
            await snapshot.discard()
            self.api.untrack_artifact(snapshot)

        return discard_snapshot
