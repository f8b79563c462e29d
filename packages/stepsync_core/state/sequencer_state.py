"""
StepSync Sequencer State

The shared document every client views: tempo, transport flags and the
per-track step patterns and parameters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from stepsync_core.constants.steps import BPM_DEFAULT, PATTERN_STEPS
from stepsync_core.constants.tracks import BASE_TRACK_IDS, TRACK_DEFAULTS, TrackKind

ParamValue = float | int | str


@dataclass
class Track:
    """One sequenced sound source"""
    kind: TrackKind
    pattern: list[bool] = field(default_factory=lambda: [False] * PATTERN_STEPS)
    params: dict[str, ParamValue] = field(default_factory=dict)

    def clear(self) -> None:
        """Turn every step off (params are untouched)"""
        self.pattern = [False] * PATTERN_STEPS

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire dict (copies pattern and params)"""
        return {
            "pattern": list(self.pattern),
            "params": dict(self.params),
        }


@dataclass
class SequencerState:
    """
    Authoritative sequencer document.

    Mutated only through StateStore; never shared by reference with
    clients, which receive to_dict() copies.
    """

    bpm: int = BPM_DEFAULT
    playing: bool = False
    current_step: int = 0
    tracks: dict[str, Track] = field(default_factory=dict)

    @classmethod
    def create_default(cls, track_ids: tuple[str, ...] = BASE_TRACK_IDS) -> SequencerState:
        """Build the start-of-process state for the given tracks."""
        tracks: dict[str, Track] = {}
        for track_id in track_ids:
            kind, params, step_on = TRACK_DEFAULTS[track_id]
            tracks[track_id] = Track(
                kind=kind,
                pattern=[step_on] * PATTERN_STEPS,
                params=dict(params),
            )
        return cls(tracks=tracks)

    def transport_dict(self) -> dict[str, Any]:
        """Transport fields in transport_update shape"""
        return {
            "playing": self.playing,
            "current_step": self.current_step,
            "bpm": self.bpm,
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert to the full-state wire dict"""
        return {
            "bpm": self.bpm,
            "playing": self.playing,
            "current_step": self.current_step,
            "tracks": {track_id: track.to_dict() for track_id, track in self.tracks.items()},
        }
