from __future__ import annotations

from typing import (
    Any,
    Generic,
    TypeVar,
)

from async_stream.exceptions import EmitProtocolError

from .stream import AsyncStream, ProducerBody
from .logging_models import StreamInfo
from .models import Step, StepStatus

T = TypeVar('T')
E = TypeVar('E', bound=BaseException)


class AsyncTryStream(AsyncStream[T], Generic[T, E]):
    """
    AsyncStream whose producer may finish with an error.

    A producer that raises one of ``error_types`` ends the stream with
    that error: ``advance()`` returns the same ERROR step from then on,
    while ``async for`` raises the error once and then stops. Anything
    else the producer raises propagates as it would from AsyncStream.
    """

    def __init__(
        self,
        body: ProducerBody[T],
        item_type: Any | None = None,
        error_types: type[E] | tuple[type[E], ...] = Exception,
        name: str | None = None,
        strict: bool | None = None,
    ) -> None:
        if isinstance(error_types, type):
            error_types = (error_types,)

        self.error_types: tuple[type[E], ...] = tuple(error_types)
        self._error_delivered = False

        super().__init__(
            body,
            item_type=item_type,
            name=name,
            strict=strict,
        )

    @property
    def error(self) -> E | None:
        if self._terminal is not None and self._terminal.status == StepStatus.ERROR:
            return self._terminal.error

    @property
    def failed(self):
        return self.error is not None

    def take_error(self) -> E | None:
        """
        Return the terminal error the first time it is asked for and None
        afterwards, so a consumer observes a failed stream's error once.
        """
        if self._error_delivered:
            return None

        error = self.error
        if error is not None:
            self._error_delivered = True

        return error

    def _fail(self, err: BaseException) -> Step[T]:
        if isinstance(err, self.error_types) and not isinstance(err, EmitProtocolError):
            self._exhaust()
            self._terminal = Step.failed(err)

            return self._terminal

        return super()._fail(err)

    async def __anext__(self) -> T:
        step = await self._next_step()

        if step.status == StepStatus.ITEM:
            return step.item

        if step.status == StepStatus.ERROR and (error := self.take_error()) is not None:
            await self._log(
                StreamInfo,
                f"Stream failed after {self.items_emitted} items - {error!r}",
            )
            await self._logger.close()

            raise error

        await self._logger.close()
        raise StopAsyncIteration
