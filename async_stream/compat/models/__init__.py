from .poll_result import PollResult as PollResult
from .poll_status import PollStatus as PollStatus
