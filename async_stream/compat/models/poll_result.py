from __future__ import annotations

from typing import Any, Generic, TypeVar

import msgspec

from .poll_status import PollStatus

T = TypeVar('T')


class PollResult(msgspec.Struct, Generic[T], kw_only=True):
    status: PollStatus
    value: T | None = None
    error: Any = None

    @property
    def ready(self):
        return self.status == PollStatus.READY

    @property
    def done(self):
        return self.status in (PollStatus.DONE, PollStatus.ERROR)
