from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .stream import AsyncStream


def _to_exception(
    typ: type[BaseException] | BaseException,
    val: BaseException | None = None,
) -> BaseException:
    if isinstance(typ, BaseException):
        return typ

    if isinstance(val, BaseException):
        return val

    return typ() if val is None else typ(val)


class StreamAdvance:
    """
    Awaitable returned while a stream is being advanced from inside an
    asyncio task. Resolves to the next terminal or item Step. Every other
    suspension of the producer (futures, ``asyncio.sleep(0)``) is handed
    to the task as-is, and anything the task throws back (cancellation,
    timeouts) is thrown into the producer.
    """

    __slots__ = ("_stream",)

    def __init__(self, stream: AsyncStream) -> None:
        self._stream = stream

    def __await__(self):
        return self

    def __iter__(self):
        return self

    def __next__(self):
        return self.send(None)

    def send(self, value: Any):
        return self._stream._forward()

    def throw(self, typ, val=None, tb=None):
        return self._stream._forward(
            error=_to_exception(typ, val),
        )

    def close(self):
        # The producer belongs to the stream, not to this await.
        pass


class StreamClose(StreamAdvance):
    """
    Awaitable that unwinds a started producer by throwing GeneratorExit
    into it. Cleanup code in the producer may await, those suspensions
    go to the task like in StreamAdvance.
    """

    __slots__ = ("_started",)

    def __init__(self, stream: AsyncStream) -> None:
        super().__init__(stream)
        self._started = False

    def send(self, value: Any):
        if self._started is False:
            self._started = True
            return self._stream._forward_close(
                error=GeneratorExit(),
            )

        return self._stream._forward_close()

    def throw(self, typ, val=None, tb=None):
        self._started = True

        return self._stream._forward_close(
            error=_to_exception(typ, val),
        )
