import threading
from typing import Generic, TypeVar

from async_stream.exceptions import SlotEmpty

T = TypeVar('T')


class Slot(Generic[T]):
    """
    Single-item mailbox shared by one Emitter (writer) and one
    stream driver (reader).

    Access strictly alternates: the producer deposits while the driver
    is suspended in send(), and the driver takes once send() returns.
    The lock keeps that honest when a producer is resumed from a
    different thread than the one that last drove it.
    """

    __slots__ = (
        "_item",
        "_filled",
        "_lock",
    )

    def __init__(self) -> None:
        self._item: T | None = None
        self._filled = False
        self._lock = threading.Lock()

    @property
    def filled(self) -> bool:
        with self._lock:
            return self._filled

    def deposit(self, item: T) -> None:
        # Last write wins.
        with self._lock:
            self._item = item
            self._filled = True

    def take(self) -> T:
        with self._lock:
            if self._filled is False:
                raise SlotEmpty("Err. - slot holds no item.")

            item = self._item
            self._item = None
            self._filled = False

            return item

    def clear(self) -> None:
        with self._lock:
            self._item = None
            self._filled = False
