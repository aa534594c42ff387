from enum import Enum


class PollStatus(Enum):
    READY = "READY"
    NOT_READY = "NOT_READY"
    ERROR = "ERROR"
    DONE = "DONE"
