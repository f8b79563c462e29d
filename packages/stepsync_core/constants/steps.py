"""Step and tempo constants for StepSync.

The 16-step pattern is a core product concept and is fixed.
"""

from typing import Final

# Pattern length - fixed at 16 steps (one bar of 16th notes)
PATTERN_STEPS: Final[int] = 16

# Tempo range shared with every client's BPM control
BPM_MIN: Final[int] = 60
BPM_MAX: Final[int] = 180
BPM_DEFAULT: Final[int] = 120
