"""
Exception hierarchy for StepSync.

Protocol errors describe frames that could not be turned into a command;
state errors describe commands the store refused to apply. Neither kind
is ever sent back to a client: the session layer logs and drops them.
"""


class StepSyncError(Exception):
    """Base exception for all StepSync errors"""
    pass


# ----------------------------------------------------------
# Protocol errors
# ----------------------------------------------------------

class ProtocolError(StepSyncError):
    """Inbound frame could not be decoded into a command"""
    pass


class MalformedFrame(ProtocolError):
    """Frame is not a JSON object (or exceeds the size limit)"""
    pass


class UnknownCommandType(ProtocolError):
    """Frame carries a missing or unrecognised ``type``"""

    def __init__(self, command_type: object) -> None:
        super().__init__(f"Unknown command type: {command_type!r}")
        self.command_type = command_type


class InvalidCommand(ProtocolError):
    """Known command type whose fields failed validation"""

    def __init__(self, command_type: str, detail: str) -> None:
        super().__init__(f"Invalid '{command_type}' command: {detail}")
        self.command_type = command_type


# ----------------------------------------------------------
# State errors
# ----------------------------------------------------------

class StateError(StepSyncError):
    """State store refused a mutation"""
    pass


class UnknownTrack(StateError):
    """Track identifier is not part of the sequencer"""

    def __init__(self, track: str) -> None:
        super().__init__(f"Track '{track}' not found")
        self.track = track


class StepOutOfRange(StateError):
    """Step index outside the pattern"""

    def __init__(self, step: int) -> None:
        super().__init__(f"Step {step} out of range")
        self.step = step


class InvalidTransportAction(StateError):
    """Transport action is not play, stop or set_bpm"""

    def __init__(self, action: str) -> None:
        super().__init__(f"Invalid transport action: {action!r}")
        self.action = action


class InvalidBpm(StateError):
    """BPM value missing or not a finite number"""
    pass
