from .compat import (
    LegacyStreamAdapter as LegacyStreamAdapter,
    PollResult as PollResult,
    PollStatus as PollStatus,
)
from .env import (
    Env as Env,
    configure as configure,
    load_env as load_env,
)
from .exceptions import (
    AsyncStreamError as AsyncStreamError,
    EmitProtocolError as EmitProtocolError,
    SlotEmpty as SlotEmpty,
    StreamBusyError as StreamBusyError,
)
from .streams import (
    AsyncStream as AsyncStream,
    AsyncTryStream as AsyncTryStream,
    EmitPoint as EmitPoint,
    Emitter as Emitter,
    Step as Step,
    StepStatus as StepStatus,
    StreamStatus as StreamStatus,
    async_stream as async_stream,
    async_try_stream as async_try_stream,
)
