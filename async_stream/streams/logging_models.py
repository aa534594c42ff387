"""
Logging models for stream drivers.

Each model identifies the stream (name and id), how many items it has
delivered so far and the driver status at the time of the log.
"""

from async_stream.logging.models import Entry, LogLevel

from .models import StreamStatusName


class StreamTrace(Entry, kw_only=True):
    """Trace-level logging for stream lifecycle transitions."""
    stream_name: str
    stream_id: int
    items_emitted: int
    status: StreamStatusName
    level: LogLevel = LogLevel.TRACE


class StreamDebug(Entry, kw_only=True):
    """Debug-level logging for stream lifecycle transitions."""
    stream_name: str
    stream_id: int
    items_emitted: int
    status: StreamStatusName
    level: LogLevel = LogLevel.DEBUG


class StreamInfo(Entry, kw_only=True):
    """Info-level logging for stream lifecycle transitions."""
    stream_name: str
    stream_id: int
    items_emitted: int
    status: StreamStatusName
    level: LogLevel = LogLevel.INFO


class StreamError(Entry, kw_only=True):
    """Error-level logging for producer misuse of the emit protocol."""
    stream_name: str
    stream_id: int
    items_emitted: int
    status: StreamStatusName
    error: str
    level: LogLevel = LogLevel.ERROR
