from __future__ import annotations

import asyncio
import inspect
import itertools
from typing import (
    Any,
    Callable,
    Coroutine,
    Generic,
    TypeVar,
)

from async_stream.exceptions import (
    EmitProtocolError,
    SlotEmpty,
    StreamBusyError,
)
from async_stream.logging import Entry, Logger

from .emit_point import EmitPoint
from .emitter import Emitter
from .logging_models import StreamDebug, StreamError, StreamTrace
from .models import Step, StepStatus, StreamStatus
from .slot import Slot
from .stream_advance import StreamAdvance, StreamClose
from .stream_config import StreamConfig

T = TypeVar('T')

ProducerBody = Callable[[Emitter[T]], Coroutine[Any, Any, Any]]

_stream_ids = itertools.count(1)


class AsyncStream(Generic[T]):
    """
    Produce the items of an async iterator from an ``async def`` body,
    driven in the consumer's own task.

    The body is called once with an Emitter and must return a coroutine.
    No body code runs until the first advance. Each advance resumes the
    producer until it suspends: an awaited ``emit()`` leaves exactly one
    item in the slot, which the driver hands out while the producer stays
    parked at that emit. Any other suspension is reported as pending.
    A producer that returns ends the stream.
    """

    def __init__(
        self,
        body: ProducerBody[T],
        item_type: Any | None = None,
        name: str | None = None,
        strict: bool | None = None,
    ) -> None:
        if strict is None:
            strict = StreamConfig().strict_conversion

        self.stream_id = next(_stream_ids)
        self.name = name or getattr(body, '__qualname__', type(body).__name__)
        self.status = StreamStatus.READY
        self.items_emitted = 0

        self._slot: Slot[T] = Slot()
        self._emitter: Emitter[T] = Emitter(
            self._slot,
            item_type=item_type,
            strict=strict,
        )

        self._waiter: asyncio.Future | None = None
        self._interrupt: BaseException | None = None
        self._terminal: Step[T] | None = None
        self._running = False
        self._logger = Logger(name='async_stream')

        producer = body(self._emitter)
        if not inspect.iscoroutine(producer):
            raise TypeError(
                f"Err. - stream body {self.name} must return a coroutine, got {type(producer).__name__}."
            )

        self._producer: Coroutine[Any, Any, Any] = producer

    @property
    def exhausted(self):
        return self.status in (
            StreamStatus.EXHAUSTED,
            StreamStatus.CLOSED,
        )

    @property
    def running(self):
        return self._running

    def advance(self) -> Step[T]:
        """
        Resume the producer by one step without blocking.

        Returns an ITEM step for an emitted value, a PENDING step while the
        producer waits on something else (``waiter`` is the future it waits
        on, or None when it may be resumed right away), and the terminal
        step once the producer has finished. A pending future that is not
        done yet is not resumed again, so extra calls are harmless.
        """
        if self._terminal is not None:
            return self._terminal

        if self._running:
            raise StreamBusyError(
                f"Err. - stream {self.name} is already being advanced."
            )

        if (
            self._interrupt is None
            and self._waiter is not None
            and self._waiter.done() is False
        ):
            return Step.pending(self._waiter)

        self._waiter = None
        self._running = True

        try:
            step = self._resume(error=self._take_interrupt())

        finally:
            self._running = False

        if step.status == StepStatus.PENDING:
            return self._park(step.waiter)

        return step

    def _resume(self, error: BaseException | None = None) -> Step[T]:
        self.status = StreamStatus.RUNNING

        try:
            if error is None:
                suspended = self._producer.send(None)

            else:
                suspended = self._producer.throw(error)

        except StopIteration:
            return self._finish()

        except BaseException as err:
            return self._fail(err)

        if isinstance(suspended, EmitPoint):
            try:
                item = self._slot.take()

            except SlotEmpty:
                return Step.pending()

            self.items_emitted += 1
            return Step.ready(item)

        if self._slot.filled:
            self._exhaust()
            self._producer.close()

            raise EmitProtocolError(
                f"Err. - stream {self.name} producer suspended on {suspended!r} without awaiting its emit()."
            )

        return Step.pending(suspended)

    def _park(self, suspended: Any) -> Step[T]:
        if suspended is None:
            return Step.pending()

        if getattr(suspended, '_asyncio_future_blocking', None):
            suspended._asyncio_future_blocking = False
            self._waiter = suspended

            return Step.pending(suspended)

        self._interrupt = RuntimeError(
            f"Err. - stream {self.name} producer yielded {suspended!r}, which cannot be waited on."
        )

        return Step.pending()

    def _take_interrupt(self):
        interrupt = self._interrupt
        self._interrupt = None

        return interrupt

    def _finish(self) -> Step[T]:
        unread = self._slot.filled
        self._exhaust()

        if unread:
            raise EmitProtocolError(
                f"Err. - stream {self.name} producer returned without awaiting its last emit()."
            )

        return self._terminal

    def _fail(self, err: BaseException) -> Step[T]:
        self._exhaust()
        raise err

    def _exhaust(self):
        self._emitter.close()
        self._slot.clear()
        self._waiter = None
        self._interrupt = None
        self.status = StreamStatus.EXHAUSTED
        self._terminal = Step.done()

    def _forward(self, error: BaseException | None = None):
        if self._terminal is not None:
            raise StopIteration(self._terminal)

        if self._waiter is not None:
            waiter = self._waiter

            if error is None and waiter.done() is False:
                waiter._asyncio_future_blocking = True
                return waiter

            self._waiter = None

        if error is None:
            error = self._take_interrupt()

        step = self._resume(error=error)

        if step.status != StepStatus.PENDING:
            raise StopIteration(step)

        return step.waiter

    def _forward_close(self, error: BaseException | None = None):
        try:
            if error is None:
                suspended = self._producer.send(None)

            else:
                suspended = self._producer.throw(error)

        except (StopIteration, GeneratorExit):
            raise StopIteration(None)

        if isinstance(suspended, EmitPoint) or self._slot.filled:
            try:
                self._producer.close()

            finally:
                self._slot.clear()

            raise EmitProtocolError(
                f"Err. - stream {self.name} producer emitted while being closed."
            )

        return suspended

    def close(self):
        """
        Close the stream without awaiting. A started producer has
        GeneratorExit thrown in at its current suspension point, so its
        ``finally`` blocks run. Cleanup that needs to await requires
        ``aclose()`` instead.
        """
        if self._terminal is not None:
            return

        if self._running:
            raise StreamBusyError(
                f"Err. - stream {self.name} cannot close while being advanced."
            )

        self._emitter.close()

        try:
            self._producer.close()

        finally:
            self._closed()

    async def aclose(self):
        if self._terminal is not None:
            return

        if self._running:
            raise StreamBusyError(
                f"Err. - stream {self.name} cannot close while being advanced."
            )

        self._emitter.close()

        if self.status == StreamStatus.READY:
            self._producer.close()
            self._closed()

            await self._log(StreamTrace, "Closed stream before it started")
            await self._logger.close()
            return

        self._running = True

        try:
            await StreamClose(self)

        finally:
            self._running = False
            self._closed()

        await self._log(
            StreamDebug,
            f"Closed stream after {self.items_emitted} items",
        )

        await self._logger.close()

    def _closed(self):
        self._emitter.close()
        self._slot.clear()
        self._waiter = None
        self._interrupt = None
        self.status = StreamStatus.CLOSED
        self._terminal = Step.done()

    def __aiter__(self):
        return self

    async def __anext__(self) -> T:
        step = await self._next_step()

        if step.status == StepStatus.ITEM:
            return step.item

        await self._logger.close()
        raise StopAsyncIteration

    async def _next_step(self) -> Step[T]:
        if self._terminal is not None:
            return self._terminal

        if self._running:
            raise StreamBusyError(
                f"Err. - stream {self.name} is already being advanced."
            )

        self._running = True

        try:
            step = await StreamAdvance(self)

        except EmitProtocolError as err:
            await self._log(
                StreamError,
                "Producer broke the emit protocol",
                error=str(err),
            )

            await self._logger.close()
            raise

        finally:
            self._running = False

        if step.status == StepStatus.DONE:
            await self._log(
                StreamDebug,
                f"Stream exhausted after {self.items_emitted} items",
            )

        return step

    async def _log(
        self,
        model: type[Entry],
        message: str,
        **fields: Any,
    ):
        entry = model(
            message=message,
            stream_name=self.name,
            stream_id=self.stream_id,
            items_emitted=self.items_emitted,
            status=self.status.value,
            **fields,
        )

        if self._logger.enabled(entry):
            await self._logger.log(entry)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    def __del__(self):
        producer = getattr(self, "_producer", None)

        if producer is not None and self._terminal is None:
            producer.close()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name} status={self.status.value} items={self.items_emitted}>"
