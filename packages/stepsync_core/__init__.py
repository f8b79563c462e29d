"""
StepSync Core

Shared sequencer state, parameter conventions and wire protocol.
"""

__version__ = "0.1.0"

from .errors import StepSyncError
from .result import CommandResult
from .state import SequencerState, StateStore, Track

__all__ = [
    "CommandResult",
    "SequencerState",
    "StateStore",
    "StepSyncError",
    "Track",
]
