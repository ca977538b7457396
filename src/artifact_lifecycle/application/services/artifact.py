"""
Artifact Service

Coordinates the start/stop/save/discard lifecycle of a single artifact.
"""

import inspect
from typing import Any, Callable, Dict, Optional

from artifact_lifecycle.domain.errors import ValidationError
from artifact_lifecycle.domain.outcome import Outcome
from artifact_lifecycle.domain.ports import IArtifact, IArtifactHooks, IEventSink
from artifact_lifecycle.domain.value_objects import (
    ArtifactState,
    ArtifactTemplate,
    Hook,
    LifecycleEvent,
)
from artifact_lifecycle.infrastructure.logging import StructlogEventSink


async def _call_hook(hook: Optional[Hook], *args: Any) -> Any:
    if hook is None:
        return None

    result = hook(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


class TemplateHooks(IArtifactHooks):
    """
    Adapts the callables of an ArtifactTemplate to IArtifactHooks.

    Missing callables behave as no-op hooks.
    """

    def __init__(self, template: ArtifactTemplate):
        self._template = template

    async def do_start(self, *args: Any) -> Any:
        return await _call_hook(self._template.start, *args)

    async def do_stop(self, *args: Any) -> Any:
        return await _call_hook(self._template.stop, *args)

    async def do_save(self, artifact_path: str, *args: Any) -> Any:
        return await _call_hook(self._template.save, artifact_path, *args)

    async def do_discard(self, *args: Any) -> Any:
        return await _call_hook(self._template.discard, *args)


async def _run_after(predecessor: Outcome, hook: Callable[..., Any], *args: Any) -> Any:
    await predecessor
    return await hook(*args)


class Artifact(IArtifact, IArtifactHooks):
    """
    Lifecycle coordinator for one artifact.

    Keeps one outcome slot per operation for the current episode. The
    slots are only touched synchronously from the event loop thread, so
    overlapping callers share the same outcomes and every hook runs at
    most once per episode, after the operations it depends on settled.

    Hooks come from, in order of precedence: an IArtifactHooks instance,
    the callables of a template, or do_* overrides in a subclass.
    """

    def __init__(
        self,
        template: Optional[ArtifactTemplate] = None,
        *,
        hooks: Optional[IArtifactHooks] = None,
        event_sink: Optional[IEventSink] = None,
    ):
        """
        Initialize artifact.

        Args:
            template: Name, hook callables and extras for this artifact
            hooks: Capability object implementing the four hooks
            event_sink: Destination for lifecycle events (default: structlog)

        Raises:
            ValidationError: If both hooks and template hook callables are given
        """
        self._start_outcome: Optional[Outcome] = None
        self._stop_outcome: Optional[Outcome] = None
        self._save_outcome: Optional[Outcome] = None
        self._discard_outcome: Optional[Outcome] = None

        template = template or ArtifactTemplate()
        has_template_hooks = any(
            getattr(template, hook_name) is not None
            for hook_name in ("start", "stop", "save", "discard")
        )
        if hooks is not None and has_template_hooks:
            raise ValidationError(
                "Pass hooks either as a template or as an IArtifactHooks instance, not both",
                details={"name": template.name},
            )

        self._name = template.name or ""
        self._extras: Dict[str, Any] = dict(template.extras)
        self._hooks: Optional[IArtifactHooks] = hooks
        if hooks is None and has_template_hooks:
            self._hooks = TemplateHooks(template)

        self._event_sink = event_sink or StructlogEventSink()

    @property
    def name(self) -> str:
        return self._name or type(self).__name__

    @property
    def extras(self) -> Dict[str, Any]:
        """Caller data copied from the template's side table."""
        return self._extras

    @property
    def state(self) -> ArtifactState:
        """Lifecycle state derived from the populated slots."""
        if self._save_outcome is not None:
            if self._save_outcome.operation == "discard":
                return ArtifactState.DISCARDED
            return ArtifactState.SAVED
        if self._discard_outcome is not None:
            return ArtifactState.DISCARDED
        if self._stop_outcome is not None:
            return ArtifactState.STOPPED
        if self._start_outcome is not None:
            return ArtifactState.RUNNING
        return ArtifactState.FRESH

    def start(self, *args: Any) -> Outcome:
        """
        Start a new episode.

        Waits for a pending save or discard, or stops a running episode,
        before do_start runs.

        Returns:
            Outcome of do_start
        """
        self._record(LifecycleEvent.START, f"starting {self.name}", args)

        if self._save_outcome is not None:
            self._start_outcome = self._chain(self._save_outcome, "start", self.do_start, *args)
        elif self._discard_outcome is not None:
            self._start_outcome = self._chain(self._discard_outcome, "start", self.do_start, *args)
        elif self._start_outcome is not None or self._stop_outcome is not None:
            self._start_outcome = self._chain(self.stop(), "start", self.do_start, *args)
        else:
            self._start_outcome = Outcome.schedule(self.do_start(*args), "start")

        self._stop_outcome = self._save_outcome = self._discard_outcome = None
        return self._start_outcome

    def stop(self, *args: Any) -> Outcome:
        """
        Stop the current episode once it has started.

        Stopping a never-started artifact succeeds immediately and marks
        it as started.

        Returns:
            Outcome of do_stop, shared by every call in the episode
        """
        if self._stop_outcome is None:
            self._record(LifecycleEvent.STOP, f"stopping {self.name}", args)

            if self._start_outcome is not None:
                self._stop_outcome = self._chain(self._start_outcome, "stop", self.do_stop, *args)
            else:
                self._stop_outcome = self._start_outcome = Outcome.resolved(operation="stop")

        return self._stop_outcome

    def save(self, artifact_path: str, *args: Any) -> Outcome:
        """
        Stop the current episode and persist the artifact.

        An already discarded artifact is not saved: a SAVE_ERROR warning is
        recorded and the discard outcome is returned.

        Args:
            artifact_path: Final destination of the artifact

        Returns:
            Outcome of do_save, shared by every call in the episode
        """
        if self._save_outcome is None:
            self._record(
                LifecycleEvent.SAVE,
                f"saving {self.name} to: {artifact_path}",
                args,
                artifact_path=str(artifact_path),
            )

            if self._discard_outcome is not None:
                self._event_sink.record(
                    LifecycleEvent.SAVE_ERROR,
                    f"cannot save an already discarded artifact to: {artifact_path}",
                    level="warning",
                    artifact=self.name,
                    artifact_path=str(artifact_path),
                )
                self._save_outcome = self._discard_outcome
            elif self._start_outcome is not None:
                self._save_outcome = self._chain(
                    self.stop(), "save", self.do_save, artifact_path, *args
                )
            else:
                self._save_outcome = self._stop_outcome = self._start_outcome = (
                    Outcome.resolved(operation="save")
                )

        return self._save_outcome

    def discard(self, *args: Any) -> Outcome:
        """
        Stop the current episode and throw the artifact away.

        An already saved artifact silently keeps its save outcome.

        Returns:
            Outcome of do_discard, shared by every call in the episode
        """
        if self._discard_outcome is None:
            self._record(LifecycleEvent.DISCARD, f"discarding {self.name}", args)

            if self._save_outcome is not None:
                self._discard_outcome = self._save_outcome
            elif self._start_outcome is not None:
                self._discard_outcome = self._chain(self.stop(), "discard", self.do_discard, *args)
            else:
                self._discard_outcome = self._stop_outcome = self._start_outcome = (
                    Outcome.resolved(operation="discard")
                )

        return self._discard_outcome

    async def do_start(self, *args: Any) -> Any:
        if self._hooks is None:
            return None
        return await self._hooks.do_start(*args)

    async def do_stop(self, *args: Any) -> Any:
        if self._hooks is None:
            return None
        return await self._hooks.do_stop(*args)

    async def do_save(self, artifact_path: str, *args: Any) -> Any:
        if self._hooks is None:
            return None
        return await self._hooks.do_save(artifact_path, *args)

    async def do_discard(self, *args: Any) -> Any:
        if self._hooks is None:
            return None
        return await self._hooks.do_discard(*args)

    def _chain(
        self,
        predecessor: Outcome,
        operation: str,
        hook: Callable[..., Any],
        *args: Any,
    ) -> Outcome:
        return Outcome.schedule(_run_after(predecessor, hook, *args), operation)

    def _record(self, event: LifecycleEvent, message: str, args: tuple, **fields: Any) -> None:
        if args:
            fields["args"] = list(args)
        self._event_sink.record(event, message, artifact=self.name, **fields)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r} state={self.state.value}>"
