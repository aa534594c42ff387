from __future__ import annotations

from typing import Callable, Dict, Literal, Union

from pydantic import BaseModel, StrictBool, StrictStr

PrimaryType = Union[str, int, float, bytes, bool]


def _to_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Env(BaseModel):
    ASYNC_STREAM_LOG_LEVEL: Literal[
        "trace",
        "debug",
        "info",
        "warn",
        "error",
        "critical",
        "fatal",
    ] = "info"
    ASYNC_STREAM_LOG_OUTPUT: Literal["stdout", "stderr"] = "stderr"
    ASYNC_STREAM_LOGS_DIRECTORY: StrictStr | None = None
    ASYNC_STREAM_STRICT_CONVERSION: StrictBool = False

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "ASYNC_STREAM_LOG_LEVEL": lambda value: value.strip().lower(),
            "ASYNC_STREAM_LOG_OUTPUT": lambda value: value.strip().lower(),
            "ASYNC_STREAM_LOGS_DIRECTORY": str,
            "ASYNC_STREAM_STRICT_CONVERSION": _to_bool,
        }
