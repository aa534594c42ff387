from enum import Enum


class EmitPointStatus(Enum):
    CREATED = "CREATED"
    SUSPENDED = "SUSPENDED"
    RESUMED = "RESUMED"
