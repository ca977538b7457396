"""
Domain Ports

Port interfaces defining contracts between layers.
"""

from .artifact_hooks_port import IArtifactHooks
from .artifact_port import IArtifact
from .artifacts_api_port import IArtifactsApi, IdleCallback
from .event_sink_port import IEventSink

__all__ = [
    "IArtifactHooks",
    "IArtifact",
    "IArtifactsApi",
    "IdleCallback",
    "IEventSink",
]
