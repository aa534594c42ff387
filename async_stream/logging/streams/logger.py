from __future__ import annotations

import sys
from typing import Callable, TypeVar

from async_stream.logging.config import LoggingConfig
from async_stream.logging.models import Entry, Log

from .logger_stream import LoggerStream

T = TypeVar('T', bound=Entry)


class Logger:
    """
    Named logger owned by a single long-lived object. Entries are
    written through one LoggerStream, which holds at most one open log
    file until ``close()`` is awaited.
    """

    def __init__(
        self,
        name: str | None = None,
        template: str | None = None,
    ) -> None:
        if name is None:
            name = 'default'

        self.name = name
        self._config = LoggingConfig()
        self._stream = LoggerStream(
            name=name,
            template=template,
        )

    @property
    def closed(self):
        return self._stream.closed

    def enabled(self, entry: T) -> bool:
        return self._config.enabled(self.name, entry.level)

    async def log(
        self,
        entry: T,
        template: str | None = None,
        filter: Callable[[T], bool] | None = None,
    ):
        if self.enabled(entry) is False:
            return

        frame = sys._getframe(1)
        code = frame.f_code

        await self._stream.log(
            Log(
                entry=entry,
                filename=code.co_filename,
                function_name=code.co_name,
                line_number=frame.f_lineno,
            ),
            template=template,
            filter=filter,
        )

    async def close(self):
        await self._stream.close()
