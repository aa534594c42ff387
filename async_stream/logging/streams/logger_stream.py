import asyncio
import datetime
import io
import os
import pathlib
import sys
import threading
from typing import (
    Callable,
    TypeVar,
)

import msgspec

from async_stream.logging.config import LoggingConfig, StreamType
from async_stream.logging.models import Entry, Log

T = TypeVar('T', bound=Entry)


DEFAULT_TEMPLATE = "{timestamp} - {level} - {thread_id} - {filename}:{function_name}.{line_number} - {message}"
ERROR_TEMPLATE = "{timestamp} - {level} - {thread_id}.{filename}:{function_name}.{line_number} - {error}"


class LoggerStream:
    """
    Writes entries either as rendered templates to stdout/stderr or,
    once a log directory is configured, as JSON lines to
    ``<directory>/<name>.json``. Blocking I/O runs in the loop's
    default executor.
    """

    def __init__(
        self,
        name: str | None = None,
        template: str | None = None,
    ) -> None:
        if name is None:
            name = "default"

        self._name = name
        self._template = template or DEFAULT_TEMPLATE
        self._config = LoggingConfig()

        self._loop: asyncio.AbstractEventLoop | None = None
        self._file_lock = asyncio.Lock()
        self._logfile: io.BufferedRandom | None = None
        self._logfile_path: str | None = None

    @property
    def name(self):
        return self._name

    @property
    def logfile_path(self):
        return self._logfile_path

    @property
    def closed(self):
        return self._logfile is None or self._logfile.closed

    async def log(
        self,
        entry: T | Log[T],
        template: str | None = None,
        filter: Callable[[T], bool] | None = None,
    ):
        if self._should_log(entry, filter=filter) is False:
            return

        if self._loop is None:
            self._loop = asyncio.get_running_loop()

        log = self._to_log(entry)

        if self._config.directory:
            await self._log_to_file(log)

        else:
            await self._loop.run_in_executor(
                None,
                self._write_to_stream,
                self._config.output,
                self._render(log, template or self._template),
            )

    def _should_log(
        self,
        entry_or_log: T | Log[T],
        filter: Callable[[T], bool] | None = None,
    ):
        entry = entry_or_log.entry if isinstance(entry_or_log, Log) else entry_or_log

        if self._config.enabled(self._name, entry.level) is False:
            return False

        return filter is None or filter(entry) is not False

    def _to_log(
        self,
        entry_or_log: T | Log[T],
    ) -> Log[T]:
        if isinstance(entry_or_log, Log):
            return entry_or_log

        log_file, line_number, function_name = self._find_caller()

        return Log(
            entry=entry_or_log,
            filename=log_file,
            function_name=function_name,
            line_number=line_number,
        )

    def _render(self, log: Log, template: str):
        return log.entry.to_template(
            template,
            context={
                "filename": log.filename,
                "function_name": log.function_name,
                "line_number": log.line_number,
                "thread_id": log.thread_id,
                "timestamp": log.timestamp,
            },
        )

    async def _log_to_file(self, log: Log):
        logfile_path = os.path.join(
            self._config.directory,
            f"{self._name}.json",
        )

        try:
            async with self._file_lock:
                if self.closed or logfile_path != self._logfile_path:
                    await self._loop.run_in_executor(
                        None,
                        self._open_file,
                        logfile_path,
                    )

                await self._loop.run_in_executor(
                    None,
                    self._write_to_file,
                    log,
                )

        except OSError as err:
            await self._loop.run_in_executor(
                None,
                self._write_to_stream,
                StreamType.STDERR,
                log.entry.to_template(
                    ERROR_TEMPLATE,
                    context={
                        "filename": log.filename,
                        "function_name": log.function_name,
                        "line_number": log.line_number,
                        "error": str(err),
                        "thread_id": threading.get_native_id(),
                        "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
                    },
                ),
            )

    def _open_file(self, logfile_path: str):
        self._close_logfile()

        resolved_path = pathlib.Path(logfile_path).absolute().resolve()
        resolved_path.parent.mkdir(parents=True, exist_ok=True)

        self._logfile = open(str(resolved_path), "ab+")
        self._logfile_path = logfile_path

    def _write_to_file(self, log: Log):
        self._logfile.write(msgspec.json.encode(log) + b"\n")
        self._logfile.flush()

    def _write_to_stream(
        self,
        stream_type: StreamType,
        line: str,
    ):
        stream = sys.stdout if stream_type == StreamType.STDOUT else sys.stderr

        stream.write(line + "\n")
        stream.flush()

    def _close_logfile(self):
        if self._logfile is not None and self._logfile.closed is False:
            self._logfile.close()

        self._logfile = None

    def _find_caller(self):
        """
        Find the stack frame of the caller so that we can note the source
        file name, line number and function name.
        """
        frame = sys._getframe(3)
        code = frame.f_code

        return (
            code.co_filename,
            frame.f_lineno,
            code.co_name,
        )

    async def close(self):
        if self.closed:
            return

        async with self._file_lock:
            await self._loop.run_in_executor(
                None,
                self._close_logfile,
            )
