"""Constants for StepSync."""

from stepsync_core.constants.steps import BPM_DEFAULT, BPM_MAX, BPM_MIN, PATTERN_STEPS
from stepsync_core.constants.tracks import (
    BASE_TRACK_IDS,
    EXTENDED_TRACK_IDS,
    TRACK_DEFAULTS,
    TrackKind,
)

__all__ = [
    "BASE_TRACK_IDS",
    "BPM_DEFAULT",
    "BPM_MAX",
    "BPM_MIN",
    "EXTENDED_TRACK_IDS",
    "PATTERN_STEPS",
    "TRACK_DEFAULTS",
    "TrackKind",
]
