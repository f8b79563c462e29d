"""
StepSync State Store

Owns the SequencerState and applies every mutation as one indivisible
step under a single lock. Snapshots are taken under the same lock, so a
reader never observes a half-applied mutation.
"""

from __future__ import annotations

import logging
import math
import threading
from typing import Any

from stepsync_core.constants.steps import BPM_MAX, BPM_MIN, PATTERN_STEPS
from stepsync_core.constants.tracks import BASE_TRACK_IDS, TrackKind
from stepsync_core.errors import (
    InvalidBpm,
    InvalidTransportAction,
    StepOutOfRange,
    UnknownTrack,
)
from stepsync_core.state.sequencer_state import SequencerState, Track

logger = logging.getLogger(__name__)

TRANSPORT_ACTIONS = ("play", "stop", "set_bpm")


def clamp_bpm(value: float) -> int:
    """
    Clamp a tempo into the supported range.

    Raises:
        InvalidBpm: value is not a finite number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise InvalidBpm(f"BPM must be a finite number, got {value!r}")
    return int(round(max(BPM_MIN, min(BPM_MAX, value))))


class StateStore:
    """
    Single owner of the shared sequencer document.

    Operations either apply completely and return the new value, or raise
    a StateError without touching the state.
    """

    def __init__(
        self,
        track_ids: tuple[str, ...] = BASE_TRACK_IDS,
        state: SequencerState | None = None,
    ) -> None:
        self._state = state if state is not None else SequencerState.create_default(track_ids)
        self._lock = threading.Lock()

    @property
    def track_ids(self) -> tuple[str, ...]:
        return tuple(self._state.tracks)

    def track_kind(self, track: str) -> TrackKind:
        with self._lock:
            return self._get_track(track).kind

    # ----------------------------------------------------------
    # Mutations
    # ----------------------------------------------------------

    def toggle_step(self, track: str, step: int) -> bool:
        """
        Flip one step of a track's pattern.

        Returns:
            The new value of the step

        Raises:
            UnknownTrack: track is not part of the sequencer
            StepOutOfRange: step is not in [0, 15]
        """
        with self._lock:
            target = self._get_track(track)
            if isinstance(step, bool) or not 0 <= step < PATTERN_STEPS:
                raise StepOutOfRange(step)
            target.pattern[step] = not target.pattern[step]
            return target.pattern[step]

    def merge_params(self, track: str, params: dict[str, Any]) -> dict[str, Any]:
        """
        Shallow-merge fields into a track's params.

        Fields absent from ``params`` keep their current value.

        Returns:
            Copy of the track's full params after the merge
        """
        with self._lock:
            target = self._get_track(track)
            target.params.update(params)
            return dict(target.params)

    def set_transport(self, action: str, bpm: float | None = None) -> dict[str, Any]:
        """
        Apply a transport action.

        Args:
            action: "play", "stop" (also rewinds to step 0) or "set_bpm"
            bpm: New tempo for "set_bpm", clamped into [60, 180]

        Returns:
            Transport snapshot {"playing", "current_step", "bpm"}
        """
        if action not in TRANSPORT_ACTIONS:
            raise InvalidTransportAction(action)
        new_bpm: int | None = None
        if action == "set_bpm":
            if bpm is None:
                raise InvalidBpm("set_bpm requires a bpm value")
            new_bpm = clamp_bpm(bpm)
            if new_bpm != bpm:
                logger.debug(f"Clamped BPM {bpm!r} to {new_bpm}")

        with self._lock:
            if action == "play":
                self._state.playing = True
            elif action == "stop":
                self._state.playing = False
                self._state.current_step = 0
            elif new_bpm is not None:
                self._state.bpm = new_bpm
            return self._state.transport_dict()

    def set_current_step(self, step: int) -> int:
        """
        Move the shared playhead.

        The timing client computes steps cyclically, so any non-negative
        value is accepted and wrapped into the pattern.
        """
        if isinstance(step, bool) or step < 0:
            raise StepOutOfRange(step)
        with self._lock:
            self._state.current_step = step % PATTERN_STEPS
            return self._state.current_step

    def clear_all_patterns(self) -> dict[str, Any]:
        """
        Turn off every step of every track, keeping params.

        Returns:
            Full state snapshot after the clear
        """
        with self._lock:
            for track in self._state.tracks.values():
                track.clear()
            return self._state.to_dict()

    # ----------------------------------------------------------
    # Reads
    # ----------------------------------------------------------

    def snapshot(self) -> dict[str, Any]:
        """Point-in-time deep copy of the whole state in wire shape"""
        with self._lock:
            return self._state.to_dict()

    def _get_track(self, track: str) -> Track:
        try:
            return self._state.tracks[track]
        except (KeyError, TypeError):
            raise UnknownTrack(track) from None
