from .emit_point_status import EmitPointStatus as EmitPointStatus
from .step import Step as Step
from .step_status import StepStatus as StepStatus
from .stream_status import (
    StreamStatus as StreamStatus,
    StreamStatusName as StreamStatusName,
)
