import asyncio
from typing import Callable, Generic, TypeVar

from async_stream.streams import AsyncTryStream, StepStatus

from .models import PollResult, PollStatus

T = TypeVar('T')
E = TypeVar('E', bound=BaseException)


class LegacyStreamAdapter(Generic[T, E]):
    """
    Presents an AsyncTryStream through the older poll convention: each
    ``poll()`` returns READY with a value, NOT_READY, ERROR with the
    stream's error (once) or DONE.

    A NOT_READY result means the producer is waiting. When a ``wake``
    callback is given it is invoked once the stream is worth polling
    again. Polling repeatedly while the producer waits on the same
    future registers ``wake`` only for the first poll.
    """

    __slots__ = (
        "_stream",
        "_wake_waiter",
    )

    def __init__(self, stream: AsyncTryStream[T, E]) -> None:
        self._stream = stream
        self._wake_waiter: asyncio.Future | None = None

    @property
    def stream(self):
        return self._stream

    def poll(
        self,
        wake: Callable[[], None] | None = None,
    ) -> PollResult[T]:
        step = self._stream.advance()

        if step.status == StepStatus.ITEM:
            return PollResult(
                status=PollStatus.READY,
                value=step.item,
            )

        if step.status == StepStatus.PENDING:
            if wake is not None:
                self._register_wake(step.waiter, wake)

            return PollResult(status=PollStatus.NOT_READY)

        if step.status == StepStatus.ERROR and (error := self._stream.take_error()) is not None:
            return PollResult(
                status=PollStatus.ERROR,
                error=error,
            )

        return PollResult(status=PollStatus.DONE)

    def _register_wake(
        self,
        waiter: asyncio.Future | None,
        wake: Callable[[], None],
    ):
        if waiter is not None:
            if waiter is not self._wake_waiter:
                self._wake_waiter = waiter
                waiter.add_done_callback(lambda _: wake())

            return

        try:
            asyncio.get_running_loop().call_soon(wake)

        except RuntimeError:
            # No loop to defer to, the producer can be resumed immediately.
            wake()

    def close(self):
        self._stream.close()
