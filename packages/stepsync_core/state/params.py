"""
Per-track parameter conventions.

Clients share one parameter map per track. Known keys for the track's
kind are coerced into their documented range; values of the wrong type
are dropped. Unknown keys pass through unless strict mode is on.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Final

from stepsync_core.constants.tracks import TrackKind

logger = logging.getLogger(__name__)

WAVEFORMS: Final[frozenset[str]] = frozenset({"sine", "triangle", "square", "sawtooth"})


@dataclass(frozen=True)
class NumericRange:
    """Inclusive numeric range for a parameter"""
    minimum: float
    maximum: float

    def clamp(self, value: float) -> float:
        return max(self.minimum, min(self.maximum, value))


_UNIT = NumericRange(0.0, 1.0)
_EFFECTS = {"distortion": _UNIT, "delay": _UNIT, "chorus": _UNIT}

NUMERIC_PARAMS: Final[dict[TrackKind, dict[str, NumericRange]]] = {
    TrackKind.DRUM: {
        "pitch": NumericRange(40.0, 2000.0),
        "decay": NumericRange(0.1, 2.0),
        "volume": _UNIT,
        **_EFFECTS,
    },
    TrackKind.MELODIC: {"volume": _UNIT, **_EFFECTS},
    TrackKind.BASS: {"volume": _UNIT},
}

CHOICE_PARAMS: Final[dict[TrackKind, dict[str, frozenset[str]]]] = {
    TrackKind.DRUM: {},
    TrackKind.MELODIC: {"waveform": WAVEFORMS},
    TrackKind.BASS: {},
}


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def normalize_params(
    kind: TrackKind,
    params: dict[str, Any],
    strict: bool = False,
) -> dict[str, Any]:
    """
    Validate a partial parameter update against a track kind.

    Args:
        kind: Kind of the target track
        params: Partial update as received from a client
        strict: Drop keys the kind does not define

    Returns:
        New dict holding only the accepted (and clamped) fields
    """
    numeric = NUMERIC_PARAMS[kind]
    choices = CHOICE_PARAMS[kind]
    accepted: dict[str, Any] = {}

    for key, value in params.items():
        if key in numeric:
            if not _is_number(value):
                logger.warning(f"Dropping {kind.value} param '{key}': not a number ({value!r})")
                continue
            clamped = numeric[key].clamp(value)
            # keep ints as ints when no clamping happened
            accepted[key] = value if clamped == value else clamped
        elif key in choices:
            if not isinstance(value, str) or value not in choices[key]:
                logger.warning(f"Dropping {kind.value} param '{key}': invalid choice {value!r}")
                continue
            accepted[key] = value
        elif strict:
            logger.debug(f"Dropping unknown {kind.value} param '{key}'")
        else:
            accepted[key] = value

    return accepted
