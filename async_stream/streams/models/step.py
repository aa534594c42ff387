from __future__ import annotations

import asyncio
from typing import Any, Generic, TypeVar

import msgspec

from .step_status import StepStatus

T = TypeVar('T')


class Step(msgspec.Struct, Generic[T], kw_only=True):
    """Outcome of resuming a stream's producer by one step."""

    status: StepStatus
    item: T | None = None
    error: Any = None
    waiter: Any = None

    @classmethod
    def ready(cls, item: T) -> Step[T]:
        return cls(
            status=StepStatus.ITEM,
            item=item,
        )

    @classmethod
    def pending(cls, waiter: asyncio.Future | None = None) -> Step[T]:
        return cls(
            status=StepStatus.PENDING,
            waiter=waiter,
        )

    @classmethod
    def done(cls) -> Step[T]:
        return cls(status=StepStatus.DONE)

    @classmethod
    def failed(cls, error: BaseException) -> Step[T]:
        return cls(
            status=StepStatus.ERROR,
            error=error,
        )

    @property
    def is_item(self):
        return self.status == StepStatus.ITEM

    @property
    def is_pending(self):
        return self.status == StepStatus.PENDING

    @property
    def is_terminal(self):
        return self.status in (StepStatus.DONE, StepStatus.ERROR)
