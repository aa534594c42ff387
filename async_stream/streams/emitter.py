from typing import Any, Generic, TypeVar

import msgspec

from async_stream.exceptions import EmitProtocolError

from .emit_point import EmitPoint
from .slot import Slot

T = TypeVar('T')


class Emitter(Generic[T]):
    """
    Handle passed into a stream's producer body. ``emit()`` deposits one
    item into the shared slot and returns the EmitPoint the producer must
    await before emitting again or returning.
    """

    __slots__ = (
        "_slot",
        "_item_type",
        "_strict",
        "_pending",
        "_closed",
    )

    def __init__(
        self,
        slot: Slot[T],
        item_type: Any | None = None,
        strict: bool = False,
    ) -> None:
        self._slot = slot
        self._item_type = item_type
        self._strict = strict
        self._pending: EmitPoint | None = None
        self._closed = False

    @property
    def closed(self):
        return self._closed

    def emit(self, value: Any) -> EmitPoint:
        if self._closed:
            raise EmitProtocolError(
                "Err. - cannot emit, the stream has already finished or been closed."
            )

        if self._pending is not None and self._pending.resumed is False:
            raise EmitProtocolError(
                "Err. - emit() called before the previous emit() was awaited."
            )

        self._slot.deposit(
            self._convert(value)
        )

        self._pending = EmitPoint()
        return self._pending

    def close(self):
        self._closed = True

    def _convert(self, value: Any) -> T:
        if self._item_type is None:
            return value

        if isinstance(self._item_type, type) and isinstance(value, self._item_type):
            return value

        return msgspec.convert(
            value,
            type=self._item_type,
            strict=self._strict,
        )
