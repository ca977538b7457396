"""
Unit tests for ArtifactsApiService.

Tests artifact tracking, idle callback ordering and shutdown.
"""

import asyncio
from unittest.mock import AsyncMock, Mock

import pytest

from artifact_lifecycle.application.services.artifact import Artifact
from artifact_lifecycle.application.services.artifacts_api import ArtifactsApiService
from artifact_lifecycle.domain.errors import InvalidStateError
from artifact_lifecycle.domain.value_objects import ArtifactState, ArtifactTemplate


class TestArtifactTracking:
    """Tests for track/untrack bookkeeping."""

    @pytest.fixture
    def api(self):
        return ArtifactsApiService()

    def test_track_and_untrack(self, api, event_sink):
        artifact = Artifact(event_sink=event_sink)

        api.track_artifact(artifact)
        api.track_artifact(artifact)
        assert api.tracked_artifacts == [artifact]

        api.untrack_artifact(artifact)
        assert api.tracked_artifacts == []

    def test_untrack_unknown_artifact_is_ignored(self, api, event_sink):
        api.untrack_artifact(Artifact(event_sink=event_sink))

        assert api.tracked_artifacts == []

    @pytest.mark.asyncio
    async def test_discard_tracked(self, api, event_sink):
        discard = AsyncMock()
        artifacts = [
            Artifact(ArtifactTemplate(name=f"log{i}", discard=discard), event_sink=event_sink)
            for i in range(3)
        ]
        for artifact in artifacts:
            artifact.start()
            api.track_artifact(artifact)

        await api.discard_tracked()

        assert api.tracked_artifacts == []
        assert discard.await_count == 3
        assert all(artifact.state == ArtifactState.DISCARDED for artifact in artifacts)

    @pytest.mark.asyncio
    async def test_discard_tracked_continues_after_failure(self, api, event_sink):
        failing = Artifact(
            ArtifactTemplate(discard=AsyncMock(side_effect=OSError("busy"))),
            event_sink=event_sink,
        )
        healthy_discard = AsyncMock()
        healthy = Artifact(ArtifactTemplate(discard=healthy_discard), event_sink=event_sink)
        for artifact in (failing, healthy):
            artifact.start()
            api.track_artifact(artifact)

        await api.discard_tracked()

        assert api.tracked_artifacts == []
        healthy_discard.assert_awaited_once()


class TestIdleCallbacks:
    """Tests for the idle callback worker."""

    @pytest.mark.asyncio
    async def test_request_before_start_raises(self):
        api = ArtifactsApiService()

        with pytest.raises(InvalidStateError):
            api.request_idle_callback(AsyncMock())

    @pytest.mark.asyncio
    async def test_callbacks_run_in_request_order(self):
        api = ArtifactsApiService()
        order = []

        def make_callback(index):
            async def callback():
                await asyncio.sleep(0.01 * (3 - index))
                order.append(index)

            return callback

        await api.start()
        for index in range(3):
            api.request_idle_callback(make_callback(index))

        await api.wait_idle()
        await api.stop()

        assert order == [0, 1, 2]
        assert not api.running

    @pytest.mark.asyncio
    async def test_failing_callback_does_not_stop_worker(self):
        api = ArtifactsApiService()
        after = AsyncMock()

        await api.start()
        api.request_idle_callback(AsyncMock(side_effect=RuntimeError("boom")))
        api.request_idle_callback(after)
        await api.wait_idle()

        after.assert_awaited_once()
        assert api.running

        await api.stop()

    @pytest.mark.asyncio
    async def test_callback_raising_when_called_does_not_stop_worker(self):
        """A callback failing before returning an awaitable is logged and skipped."""
        api = ArtifactsApiService()
        after = AsyncMock()

        await api.start()
        api.request_idle_callback(Mock(side_effect=RuntimeError("boom")))
        api.request_idle_callback(Mock(return_value="not awaitable"))
        api.request_idle_callback(after)
        await api.wait_idle()

        after.assert_awaited_once()
        assert api.running

        api.request_idle_callback(after)
        await api.stop()

        assert after.await_count == 2

    @pytest.mark.asyncio
    async def test_stop_runs_queued_callbacks(self):
        api = ArtifactsApiService()
        callback = AsyncMock()

        await api.start()
        api.request_idle_callback(callback)
        await api.stop()

        callback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_slow_callback_still_completes(self):
        api = ArtifactsApiService(idle_callback_timeout=0.01)
        done = []

        async def slow():
            await asyncio.sleep(0.05)
            done.append(True)

        await api.start()
        api.request_idle_callback(slow)
        await api.wait_idle()
        await api.stop()

        assert done == [True]

    @pytest.mark.asyncio
    async def test_lifecycle_discards_leftovers(self, event_sink):
        discard = AsyncMock()
        artifact = Artifact(ArtifactTemplate(discard=discard), event_sink=event_sink)

        async with ArtifactsApiService().lifecycle() as api:
            assert api.running
            artifact.start()
            api.track_artifact(artifact)

        assert not api.running
        assert api.tracked_artifacts == []
        discard.assert_awaited_once()
