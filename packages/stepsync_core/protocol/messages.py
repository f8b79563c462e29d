"""
Outbound messages.

Every server frame is a {"type", "data"} envelope. Builders below are the
only way the server constructs one, so the five shapes stay in one place.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class OutboundMessage:
    """Server-to-client message"""
    type: str
    data: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "data": self.data}

    def to_frame(self) -> str:
        """Serialize to a JSON text frame"""
        return json.dumps(self.to_dict())


def state_update(snapshot: dict[str, Any]) -> OutboundMessage:
    """Full state snapshot"""
    return OutboundMessage("state_update", snapshot)


def pattern_update(track: str, step: int, active: bool) -> OutboundMessage:
    """Single step delta"""
    return OutboundMessage("pattern_update", {"track": track, "step": step, "active": active})


def params_update(track: str, params: dict[str, Any]) -> OutboundMessage:
    """Full params of one track after a merge"""
    return OutboundMessage("params_update", {"track": track, "params": params})


def transport_update(transport: dict[str, Any]) -> OutboundMessage:
    """Transport snapshot {"playing", "current_step", "bpm"}"""
    return OutboundMessage(
        "transport_update",
        {
            "playing": transport["playing"],
            "current_step": transport["current_step"],
            "bpm": transport["bpm"],
        },
    )


def step_position(current_step: int) -> OutboundMessage:
    """Playhead position only"""
    return OutboundMessage("step_position", {"current_step": current_step})
