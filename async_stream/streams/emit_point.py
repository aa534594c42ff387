from typing import Generator

from .models import EmitPointStatus


class EmitPoint:
    """
    One-shot suspension returned by ``Emitter.emit()``. Must be awaited.

    The first poll reports "still suspended" even though the emitted
    value is already in the slot, which hands control back to the
    driver so it can drain exactly that value. Every later poll reports
    complete, letting the producer continue past the emit on the next
    resume.
    """

    __slots__ = ("status",)

    def __init__(self) -> None:
        self.status = EmitPointStatus.CREATED

    @property
    def awaited(self):
        return self.status != EmitPointStatus.CREATED

    @property
    def resumed(self):
        return self.status == EmitPointStatus.RESUMED

    def poll(self) -> bool:
        if self.status == EmitPointStatus.CREATED:
            self.status = EmitPointStatus.SUSPENDED
            return False

        self.status = EmitPointStatus.RESUMED
        return True

    def __await__(self) -> Generator['EmitPoint', None, None]:
        while not self.poll():
            yield self

    def __repr__(self) -> str:
        return f"<EmitPoint status={self.status.value}>"
