from .stream import (
    AsyncStream as AsyncStream,
    ProducerBody as ProducerBody,
)
from .try_stream import AsyncTryStream as AsyncTryStream
from .decorators import (
    async_stream as async_stream,
    async_try_stream as async_try_stream,
)
from .emit_point import EmitPoint as EmitPoint
from .emitter import Emitter as Emitter
from .models import (
    EmitPointStatus as EmitPointStatus,
    Step as Step,
    StepStatus as StepStatus,
    StreamStatus as StreamStatus,
)
from .slot import Slot as Slot
from .stream_config import StreamConfig as StreamConfig
