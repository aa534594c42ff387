import contextvars


_global_strict_conversion = contextvars.ContextVar("_global_strict_conversion", default=False)


class StreamConfig:
    def __init__(self) -> None:
        self._strict_conversion: contextvars.ContextVar[bool] = _global_strict_conversion

    def update(
        self,
        strict_conversion: bool | None = None,
    ):
        if strict_conversion is not None:
            self._strict_conversion.set(strict_conversion)

    @property
    def strict_conversion(self):
        return self._strict_conversion.get()
