"""
Tests for AsyncTryStream, the stream whose producer may end with an error.
"""

import asyncio

import pytest

from async_stream.exceptions import EmitProtocolError
from async_stream.streams import (
    AsyncTryStream,
    StepStatus,
    StreamStatus,
)


class NotFound(Exception):
    pass


async def one_then_not_found(emitter):
    await emitter.emit("a")
    raise NotFound("missing")


class TestAsyncTryStream:
    def test_error_step_after_items(self):
        stream = AsyncTryStream(one_then_not_found, error_types=NotFound)

        assert stream.advance().item == "a"

        step = stream.advance()

        assert step.status == StepStatus.ERROR
        assert isinstance(step.error, NotFound)
        assert step.is_terminal is True
        assert stream.failed is True
        assert stream.status == StreamStatus.EXHAUSTED

    def test_error_step_is_repeated(self):
        stream = AsyncTryStream(one_then_not_found, error_types=NotFound)
        stream.advance()

        first = stream.advance()
        second = stream.advance()

        assert second.status == StepStatus.ERROR
        assert second.error is first.error
        assert stream.error is first.error

    def test_take_error_returns_error_once(self):
        stream = AsyncTryStream(one_then_not_found, error_types=NotFound)
        stream.advance()
        stream.advance()

        assert isinstance(stream.take_error(), NotFound)
        assert stream.take_error() is None
        assert stream.failed is True

    def test_success_has_no_error(self):
        async def body(emitter):
            await emitter.emit(1)

        stream = AsyncTryStream(body)

        assert stream.advance().item == 1
        assert stream.advance().status == StepStatus.DONE
        assert stream.error is None
        assert stream.take_error() is None

    def test_undeclared_errors_propagate(self):
        async def body(emitter):
            raise ValueError("not a lookup failure")

        stream = AsyncTryStream(body, error_types=NotFound)

        with pytest.raises(ValueError):
            stream.advance()

        assert stream.advance().status == StepStatus.DONE
        assert stream.failed is False

    def test_error_types_tuple(self):
        async def body(emitter):
            raise KeyError("key")

        stream = AsyncTryStream(body, error_types=(NotFound, KeyError))

        assert stream.error_types == (NotFound, KeyError)
        assert isinstance(stream.advance().error, KeyError)

    def test_protocol_errors_are_not_stream_errors(self):
        async def body(emitter):
            emitter.emit(1)
            emitter.emit(2)

        stream = AsyncTryStream(body)

        with pytest.raises(EmitProtocolError):
            stream.advance()

        assert stream.failed is False

    @pytest.mark.asyncio
    async def test_async_for_raises_error_once(self):
        stream = AsyncTryStream(one_then_not_found, error_types=NotFound)
        items = []

        with pytest.raises(NotFound):
            async for item in stream:
                items.append(item)

        assert items == ["a"]
        assert [item async for item in stream] == []

    @pytest.mark.asyncio
    async def test_error_after_await(self):
        async def body(emitter):
            await emitter.emit(1)
            await asyncio.sleep(0.001)
            raise NotFound("late")

        stream = AsyncTryStream(body, error_types=NotFound)

        assert await stream.__anext__() == 1

        with pytest.raises(NotFound):
            await stream.__anext__()

        with pytest.raises(StopAsyncIteration):
            await stream.__anext__()
