"""
stepper.py — Step-by-Step Playback Engine
==========================================
The Stepper is the ONLY object a UI drives during playback.  It holds one
complete, already computed trace and an index into it, and exposes a
play/pause/next/prev/goto API.  It never recomputes anything per frame.

State machine:
    IDLE     →  load()   →  PAUSED
    PAUSED   →  play()   →  PLAYING
    PLAYING  →  pause()  →  PAUSED
    PLAYING  →  (last step reached) → FINISHED
    any      →  reset()  →  IDLE

Loading a new trace swaps the whole list in one assignment, so a reader
never sees half of an old trace and half of a new one.

Thread safety:
  This class is NOT thread-safe.  Drive it from one thread (the Flask
  request handler, a UI timer callback, …).
"""

import time
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed presets (seconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   1.0,
    "medium": 0.4,
    "fast":   0.15,
    "turbo":  0.05,
}

MIN_SPEED = 0.02


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        steps       : The loaded trace.
        current_idx : Index into `steps` that is currently displayed (-1 when idle).
        speed       : Seconds between auto-advance ticks.
        on_step     : Optional callback(step) fired every time the current step changes.
    """

    def __init__(self, on_step: Optional[Callable[[Any], None]] = None):
        self.steps:       List[Any]    = []
        self.current_idx: int          = -1
        self.state:       StepperState = StepperState.IDLE
        self.speed:       float        = SPEED_PRESETS["medium"]
        self.on_step:     Optional[Callable[[Any], None]] = on_step

        self._last_tick:  float = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, steps: Sequence[Any]) -> None:
        """Replace the trace and show its first step, paused."""
        trace = list(steps)
        if not trace:
            raise ValueError("cannot load an empty trace")
        self.steps = trace
        self.state = StepperState.PAUSED
        self._goto(0)

    def reset(self) -> None:
        """Back to IDLE — caller must load() again."""
        self.steps       = []
        self.current_idx = -1
        self.state       = StepperState.IDLE

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step forward.  Returns False if already at the end."""
        self._require_trace()
        if self.current_idx >= len(self.steps) - 1:
            self.state = StepperState.FINISHED
            return False
        self._goto(self.current_idx + 1)
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at the start."""
        self._require_trace()
        if self.current_idx <= 0:
            return False
        if self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED
        self._goto(self.current_idx - 1)
        return True

    def goto_step(self, idx: int) -> int:
        """Jump to `idx`, clamped to [0, len - 1].  Returns the index landed on."""
        self._require_trace()
        idx = max(0, min(idx, len(self.steps) - 1))
        if self.state == StepperState.FINISHED and idx < len(self.steps) - 1:
            self.state = StepperState.PAUSED
        self._goto(idx)
        return idx

    def rewind(self) -> None:
        """Jump back to step 0."""
        self.goto_step(0)
        self.state = StepperState.PAUSED

    def jump_to_end(self) -> None:
        self._require_trace()
        self._goto(len(self.steps) - 1)
        self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self, now: Optional[float] = None) -> None:
        self._require_trace()
        if self.current_idx >= len(self.steps) - 1:
            self.state = StepperState.FINISHED
            return
        self.state      = StepperState.PLAYING
        self._last_tick = time.monotonic() if now is None else now

    def pause(self) -> None:
        if self.is_playing:
            self.state = StepperState.PAUSED

    def toggle_play(self, now: Optional[float] = None) -> None:
        if self.is_playing:
            self.pause()
        else:
            self.play(now)

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> bool:
        """
        Call periodically.  If playing and at least `speed` seconds have
        passed since the last advance, moves one step forward.  Returns True
        if a step was taken.
        """
        if not self.is_playing:
            return False
        now = time.monotonic() if now is None else now
        if now - self._last_tick < self.speed:
            return False
        self._last_tick = now
        if not self.next_step():
            return False
        if self.current_idx == len(self.steps) - 1:
            self.state = StepperState.FINISHED
        return True

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        if preset not in SPEED_PRESETS:
            raise ValueError(f"Unknown speed preset: {preset}")
        self.speed = SPEED_PRESETS[preset]

    def set_speed_value(self, seconds: float) -> None:
        self.speed = max(MIN_SPEED, seconds)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Any]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.PLAYING

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _require_trace(self) -> None:
        if not self.steps:
            raise RuntimeError("No trace loaded. Call load() first.")

    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        if self.on_step is not None:
            self.on_step(self.steps[idx])
