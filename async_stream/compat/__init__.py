from .legacy_stream import LegacyStreamAdapter as LegacyStreamAdapter
from .models import (
    PollResult as PollResult,
    PollStatus as PollStatus,
)
