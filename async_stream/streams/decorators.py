import functools
from typing import (
    Any,
    Callable,
    Coroutine,
    TypeVar,
)

from .stream import AsyncStream
from .try_stream import AsyncTryStream

T = TypeVar('T')
E = TypeVar('E', bound=BaseException)


def async_stream(
    item_type: Any | None = None,
    name: str | None = None,
):
    """
    Turn ``async def body(emitter, *args, **kwargs)`` into a factory that
    returns an AsyncStream each time it is called with ``*args, **kwargs``.
    """

    def wrap(
        body: Callable[..., Coroutine[Any, Any, None]],
    ) -> Callable[..., AsyncStream[T]]:

        @functools.wraps(body)
        def make_stream(*args: Any, **kwargs: Any) -> AsyncStream[T]:
            return AsyncStream(
                lambda emitter: body(emitter, *args, **kwargs),
                item_type=item_type,
                name=name or body.__qualname__,
            )

        return make_stream

    return wrap


def async_try_stream(
    item_type: Any | None = None,
    error_types: type[E] | tuple[type[E], ...] = Exception,
    name: str | None = None,
):
    """
    Same as ``async_stream`` but the factory returns an AsyncTryStream
    that ends with any ``error_types`` error the body raises.
    """

    def wrap(
        body: Callable[..., Coroutine[Any, Any, None]],
    ) -> Callable[..., AsyncTryStream[T, E]]:

        @functools.wraps(body)
        def make_stream(*args: Any, **kwargs: Any) -> AsyncTryStream[T, E]:
            return AsyncTryStream(
                lambda emitter: body(emitter, *args, **kwargs),
                item_type=item_type,
                error_types=error_types,
                name=name or body.__qualname__,
            )

        return make_stream

    return wrap
