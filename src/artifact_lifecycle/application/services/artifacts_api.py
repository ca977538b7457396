"""
Artifacts API Service

Tracks live artifacts and runs deferred save/discard work when idle.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import List, Optional

import structlog

from artifact_lifecycle.domain.errors import InvalidStateError
from artifact_lifecycle.domain.ports import IArtifact, IArtifactsApi, IdleCallback


logger = structlog.get_logger(__name__)


class ArtifactsApiService(IArtifactsApi):
    """
    Service backing the artifacts API handed to plugins.

    Handles:
    - Tracking artifacts until they are saved or discarded
    - Running idle callbacks one at a time on a worker task
    - Discarding whatever is still tracked at shutdown
    """

    def __init__(self, idle_callback_timeout: Optional[float] = None):
        """
        Initialize artifacts API service.

        Args:
            idle_callback_timeout: Seconds after which a running idle callback
                is reported as slow (None disables the report)
        """
        self._idle_callback_timeout = idle_callback_timeout
        self._tracked: List[IArtifact] = []
        self._queue: "asyncio.Queue[Optional[IdleCallback]]" = asyncio.Queue()
        self._worker: Optional[asyncio.Task] = None

    def track_artifact(self, artifact: IArtifact) -> None:
        if artifact not in self._tracked:
            self._tracked.append(artifact)
            logger.debug("Artifact tracked", artifact=artifact.name)

    def untrack_artifact(self, artifact: IArtifact) -> None:
        try:
            self._tracked.remove(artifact)
        except ValueError:
            logger.debug("Artifact was not tracked", artifact=artifact.name)
            return
        logger.debug("Artifact untracked", artifact=artifact.name)

    @property
    def tracked_artifacts(self) -> List[IArtifact]:
        return list(self._tracked)

    def request_idle_callback(self, callback: IdleCallback) -> None:
        """
        Queue a callback to run once earlier callbacks finished.

        Raises:
            InvalidStateError: If the service is not running
        """
        if not self.running:
            raise InvalidStateError("Artifacts API is not running; call start() first")

        self._queue.put_nowait(callback)

    async def wait_idle(self) -> None:
        """Wait until every queued idle callback has run."""
        await self._queue.join()

    async def discard_tracked(self) -> None:
        """
        Discard and untrack every tracked artifact.

        Failures are logged per artifact and do not stop the others.
        """
        artifacts = self.tracked_artifacts
        if not artifacts:
            return

        logger.info("Discarding tracked artifacts", count=len(artifacts))

        results = await asyncio.gather(
            *(artifact.discard().wait() for artifact in artifacts),
            return_exceptions=True,
        )
        for artifact, result in zip(artifacts, results):
            if isinstance(result, Exception):
                logger.warning(
                    "Failed to discard artifact",
                    artifact=artifact.name,
                    error=str(result),
                )
            self.untrack_artifact(artifact)

    async def start(self) -> None:
        """
        Start the idle callback worker.

        Does nothing if the worker is already running.
        """
        if self.running:
            logger.warning("Artifacts API already running")
            return

        self._worker = asyncio.create_task(self._run())
        logger.info("Artifacts API started")

    async def stop(self) -> None:
        """
        Run the callbacks queued so far, then stop the worker.
        """
        if not self.running:
            return

        self._queue.put_nowait(None)
        worker, self._worker = self._worker, None
        await worker
        logger.info("Artifacts API stopped")

    @asynccontextmanager
    async def lifecycle(self):
        """
        Service lifecycle context manager.

        Usage:
            async with api.lifecycle():
                # idle callbacks are served
                pass
            # queued callbacks ran, tracked artifacts discarded
        """
        await self.start()
        try:
            yield self
        finally:
            await self.stop()
            await self.discard_tracked()

    @property
    def running(self) -> bool:
        return self._worker is not None and not self._worker.done()

    async def _run(self) -> None:
        """
        Worker loop.

        Runs callbacks in request order until the stop sentinel arrives.
        A failing callback is logged and does not stop the loop.
        """
        while True:
            callback = await self._queue.get()
            try:
                if callback is None:
                    return
                await self._run_callback(callback)
            finally:
                self._queue.task_done()

    async def _run_callback(self, callback: IdleCallback) -> None:
        try:
            task = asyncio.ensure_future(callback())
            if self._idle_callback_timeout is not None:
                done, _ = await asyncio.wait({task}, timeout=self._idle_callback_timeout)
                if not done:
                    logger.warning(
                        "Idle callback is taking long",
                        callback=getattr(callback, "__qualname__", repr(callback)),
                        timeout=self._idle_callback_timeout,
                    )
            await task
        except Exception as e:
            logger.error(
                "Error in idle callback",
                error=str(e),
                exc_info=True,
            )
