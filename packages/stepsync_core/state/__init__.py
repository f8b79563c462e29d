"""Sequencer state model and store."""

from stepsync_core.state.params import normalize_params
from stepsync_core.state.sequencer_state import SequencerState, Track
from stepsync_core.state.store import StateStore, clamp_bpm

__all__ = [
    "SequencerState",
    "StateStore",
    "Track",
    "clamp_bpm",
    "normalize_params",
]
