from enum import Enum
from typing import Literal


class StreamStatus(Enum):
    READY = "READY"
    RUNNING = "RUNNING"
    EXHAUSTED = "EXHAUSTED"
    CLOSED = "CLOSED"


StreamStatusName = Literal[
    'READY',
    'RUNNING',
    'EXHAUSTED',
    'CLOSED',
]
