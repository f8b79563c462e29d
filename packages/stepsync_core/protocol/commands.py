"""
Pydantic models for inbound command frames.

Each command type has a model that validates the frame's fields.
Fields the model does not declare are ignored, matching clients that
send extra keys alongside the documented ones.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

# JSON booleans and numeric strings are rejected, not coerced
ParamValue = StrictInt | StrictFloat | StrictStr


class Command(BaseModel):
    """Base for all inbound commands"""

    model_config = ConfigDict(extra="ignore", frozen=True)

    type: str


class ToggleStepCommand(Command):
    """
    Flip one step of a track.

    Fields:
        track: Track identifier
        step: Step index (range is enforced by the state store)
    """

    type: Literal["toggle_step"] = "toggle_step"
    track: str
    step: StrictInt


class UpdateParamsCommand(Command):
    """
    Merge parameter fields into a track.

    Fields:
        track: Track identifier
        params: Partial parameter map (number or string values)
    """

    type: Literal["update_params"] = "update_params"
    track: str
    params: dict[str, ParamValue]


class TransportControlCommand(Command):
    """
    Transport action.

    Fields:
        action: "play", "stop" or "set_bpm"
        bpm: New tempo, required for "set_bpm" (clamped by the store)
    """

    type: Literal["transport_control"] = "transport_control"
    action: Literal["play", "stop", "set_bpm"]
    bpm: StrictInt | StrictFloat | None = None


class StepUpdateCommand(Command):
    """
    Playhead advance pushed by the client acting as timing authority.

    Fields:
        step: Non-negative step counter (wrapped into the pattern)
    """

    type: Literal["step_update"] = "step_update"
    step: StrictInt = Field(ge=0)


class ClearPatternCommand(Command):
    """Clear every pattern (empty payload)."""

    type: Literal["clear_pattern"] = "clear_pattern"


COMMAND_MODELS: dict[str, type[Command]] = {
    "toggle_step": ToggleStepCommand,
    "update_params": UpdateParamsCommand,
    "transport_control": TransportControlCommand,
    "step_update": StepUpdateCommand,
    "clear_pattern": ClearPatternCommand,
}
