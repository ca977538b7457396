"""
Outcome

Shared handle to the pending or settled result of one lifecycle operation.
"""

import asyncio
from typing import Any, Coroutine, Generator, Optional


class Outcome:
    """
    Awaitable result of an artifact operation.

    Any number of callers may await the same outcome; each of them receives
    the operation's result or has its failure raised. Awaiting never runs the
    operation again.
    """

    __slots__ = ("_future", "operation")

    def __init__(self, future: "asyncio.Future[Any]", operation: Optional[str] = None):
        self._future = future
        self.operation = operation

    @classmethod
    def schedule(
        cls, coro: Coroutine[Any, Any, Any], operation: Optional[str] = None
    ) -> "Outcome":
        """Run a coroutine as a task on the running event loop."""
        return cls(asyncio.get_running_loop().create_task(coro), operation)

    @classmethod
    def resolved(cls, result: Any = None, operation: Optional[str] = None) -> "Outcome":
        """Create an outcome that has already succeeded."""
        future = asyncio.get_running_loop().create_future()
        future.set_result(result)
        return cls(future, operation)

    @property
    def settled(self) -> bool:
        return self._future.done()

    @property
    def succeeded(self) -> bool:
        return (
            self._future.done()
            and not self._future.cancelled()
            and self._future.exception() is None
        )

    def exception(self) -> Optional[BaseException]:
        """
        Return the failure of a settled outcome, None on success.

        Raises:
            asyncio.InvalidStateError: If the outcome is still pending
        """
        return self._future.exception()

    async def wait(self) -> Any:
        """Wait for the outcome without consuming it."""
        return await asyncio.shield(self._future)

    def __await__(self) -> Generator[Any, None, Any]:
        return self.wait().__await__()

    def __repr__(self) -> str:
        if not self._future.done():
            state = "pending"
        elif self.succeeded:
            state = "succeeded"
        else:
            state = "failed"
        return f"<Outcome {self.operation or '?'} {state}>"
