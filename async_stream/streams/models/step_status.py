from enum import Enum


class StepStatus(Enum):
    ITEM = "ITEM"
    PENDING = "PENDING"
    DONE = "DONE"
    ERROR = "ERROR"
