"""Message codec for StepSync WebSocket frames.

Turns inbound text frames into validated command models and outbound
messages into JSON text frames.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from stepsync_core.errors import InvalidCommand, MalformedFrame, UnknownCommandType
from stepsync_core.protocol.commands import COMMAND_MODELS, Command
from stepsync_core.protocol.messages import OutboundMessage

# Default frame size cap in bytes
DEFAULT_MAX_FRAME_BYTES = 64 * 1024


class MessageCodec:
    """Frame codec.

    Usage:
        codec = MessageCodec()
        command = codec.decode('{"type": "toggle_step", "track": "kick", "step": 3}')
        frame = codec.encode(pattern_update("kick", 3, True))
    """

    def __init__(self, max_frame_bytes: int = DEFAULT_MAX_FRAME_BYTES):
        """Initialize codec.

        Args:
            max_frame_bytes: Frames larger than this are rejected as malformed
        """
        self._max_frame_bytes = max_frame_bytes

    @property
    def max_frame_bytes(self) -> int:
        return self._max_frame_bytes

    def parse(self, frame: str | bytes) -> dict[str, Any]:
        """Parse a frame into its JSON object.

        Raises:
            MalformedFrame: oversize, undecodable, or not a JSON object
        """
        size = len(frame.encode("utf-8")) if isinstance(frame, str) else len(frame)
        if size > self._max_frame_bytes:
            raise MalformedFrame(
                f"Frame of {size} bytes exceeds limit of {self._max_frame_bytes}"
            )
        try:
            result = json.loads(frame, parse_constant=_reject_constant)
        except ValueError as e:
            raise MalformedFrame(f"Invalid JSON: {e}") from e

        if not isinstance(result, dict):
            raise MalformedFrame(f"Expected JSON object, got {type(result).__name__}")
        return result

    def decode(self, frame: str | bytes) -> Command:
        """Decode a frame into a typed command.

        Raises:
            MalformedFrame: frame is not a JSON object
            UnknownCommandType: ``type`` is missing or unrecognised
            InvalidCommand: fields failed validation
        """
        data = self.parse(frame)
        command_type = data.get("type")
        model = COMMAND_MODELS.get(command_type) if isinstance(command_type, str) else None
        if model is None:
            raise UnknownCommandType(command_type)

        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise InvalidCommand(command_type, _summarize(e)) from e

    def encode(self, message: OutboundMessage) -> str:
        """Encode an outbound message as a text frame."""
        return message.to_frame()


def _summarize(error: ValidationError) -> str:
    """One-line summary of a pydantic validation error"""
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item["loc"]) or "<frame>"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def _reject_constant(name: str) -> None:
    """NaN and Infinity are not JSON and would break browser clients"""
    raise ValueError(f"Non-standard JSON constant {name}")
