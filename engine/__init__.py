"""
engine/
-------
Playback & recording layer.

    from engine import Stepper, Recorder, compare
"""

from engine.stepper  import Stepper, StepperState, SPEED_PRESETS
from engine.recorder import Recorder, RunMetrics, ComparisonResult, compare, step_to_dict

__all__ = [
    "Stepper",
    "StepperState",
    "SPEED_PRESETS",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
    "step_to_dict",
]
