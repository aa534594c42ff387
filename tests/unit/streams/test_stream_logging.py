"""
Tests for the log files written by streams and their release once a
stream is finished or closed.
"""

import asyncio

import msgspec
import pytest

from async_stream.exceptions import EmitProtocolError
from async_stream.streams import AsyncStream, AsyncTryStream


class NotFound(Exception):
    pass


def read_messages(path):
    return [
        msgspec.json.decode(line)["entry"]["message"]
        for line in path.read_bytes().splitlines()
        if line
    ]


class TestStreamLogging:
    @pytest.mark.asyncio
    async def test_failed_stream_releases_log_file(self, tmp_path, logging_config):
        logging_config.update(log_directory=str(tmp_path))

        async def body(emitter):
            await emitter.emit("a")
            raise NotFound("missing")

        stream = AsyncTryStream(body, error_types=NotFound)

        with pytest.raises(NotFound):
            async for _ in stream:
                pass

        assert stream._logger.closed is True

        with pytest.raises(StopAsyncIteration):
            await stream.__anext__()

        assert stream._logger.closed is True
        assert read_messages(tmp_path / "async_stream.json") == [
            "Stream failed after 1 items - NotFound('missing')",
        ]

    @pytest.mark.asyncio
    async def test_protocol_error_releases_log_file(self, tmp_path, logging_config):
        logging_config.update(log_directory=str(tmp_path))

        async def body(emitter):
            emitter.emit(1)
            await asyncio.sleep(0)

        stream = AsyncStream(body)

        with pytest.raises(EmitProtocolError):
            await stream.__anext__()

        assert stream._logger.closed is True
        assert read_messages(tmp_path / "async_stream.json") == [
            "Producer broke the emit protocol",
        ]

    @pytest.mark.asyncio
    async def test_aclose_releases_log_file(self, tmp_path, logging_config):
        logging_config.update(
            log_directory=str(tmp_path),
            log_level="trace",
        )

        async def body(emitter):
            await emitter.emit(1)
            await emitter.emit(2)

        async with AsyncStream(body) as stream:
            assert await stream.__anext__() == 1

        assert stream._logger.closed is True
        assert read_messages(tmp_path / "async_stream.json") == [
            "Closed stream after 1 items",
        ]

    @pytest.mark.asyncio
    async def test_exhausted_stream_releases_log_file(self, tmp_path, logging_config):
        logging_config.update(
            log_directory=str(tmp_path),
            log_level="debug",
        )

        async def body(emitter):
            await emitter.emit(1)

        stream = AsyncStream(body)

        assert [item async for item in stream] == [1]
        assert stream._logger.closed is True
        assert read_messages(tmp_path / "async_stream.json") == [
            "Stream exhausted after 1 items",
        ]
