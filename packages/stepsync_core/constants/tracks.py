"""Track identifiers, kinds and default parameters.

Base tracks are the four drum voices. The extended variant adds a
melodic arpeggio and a bassline, whose patterns start fully enabled.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Final


class TrackKind(Enum):
    """Parameter schema family of a track"""
    DRUM = "drum"
    MELODIC = "melodic"
    BASS = "bass"


BASE_TRACK_IDS: Final[tuple[str, ...]] = ("kick", "snare", "hihat", "openhat")
EXTENDED_TRACK_IDS: Final[tuple[str, ...]] = BASE_TRACK_IDS + ("arp", "bass")

# track_id -> (kind, default params, default step value)
TRACK_DEFAULTS: Final[dict[str, tuple[TrackKind, dict[str, Any], bool]]] = {
    "kick": (TrackKind.DRUM, {"pitch": 60, "decay": 0.3, "volume": 0.8}, False),
    "snare": (TrackKind.DRUM, {"pitch": 200, "decay": 0.2, "volume": 0.7}, False),
    "hihat": (TrackKind.DRUM, {"pitch": 800, "decay": 0.1, "volume": 0.6}, False),
    "openhat": (TrackKind.DRUM, {"pitch": 1000, "decay": 0.4, "volume": 0.5}, False),
    "arp": (
        TrackKind.MELODIC,
        {"volume": 0.3, "distortion": 0, "delay": 0, "chorus": 0, "waveform": "triangle"},
        True,
    ),
    "bass": (TrackKind.BASS, {"volume": 0.4}, True),
}
