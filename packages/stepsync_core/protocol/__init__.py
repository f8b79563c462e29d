"""Wire protocol: inbound commands, outbound messages and the frame codec."""

from stepsync_core.protocol.codec import DEFAULT_MAX_FRAME_BYTES, MessageCodec
from stepsync_core.protocol.commands import (
    COMMAND_MODELS,
    ClearPatternCommand,
    Command,
    StepUpdateCommand,
    ToggleStepCommand,
    TransportControlCommand,
    UpdateParamsCommand,
)
from stepsync_core.protocol.messages import (
    OutboundMessage,
    params_update,
    pattern_update,
    state_update,
    step_position,
    transport_update,
)

__all__ = [
    "COMMAND_MODELS",
    "DEFAULT_MAX_FRAME_BYTES",
    # Codec
    "MessageCodec",
    # Inbound
    "ClearPatternCommand",
    "Command",
    "StepUpdateCommand",
    "ToggleStepCommand",
    "TransportControlCommand",
    "UpdateParamsCommand",
    # Outbound
    "OutboundMessage",
    "params_update",
    "pattern_update",
    "state_update",
    "step_position",
    "transport_update",
]
