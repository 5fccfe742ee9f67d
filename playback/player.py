"""
player.py — Step-by-Step Trace Playback
=========================================
The TracePlayer is the only object the UI touches while a trace is on
screen.  The trace itself is immutable and fully computed up front; the
player just owns a step index and a play/pause state.

State machine:
    IDLE     →  load()         →  PAUSED
    PAUSED   →  play()         →  PLAYING
    PLAYING  →  pause()        →  PAUSED
    PLAYING  →  (last step)    →  FINISHED
    any      →  next/prev/goto →  PAUSED   (manual stepping cancels playback)
    any      →  reset()        →  IDLE

Thread safety:
  Not thread-safe, and doesn't need to be: tick() is called from the
  UI's own timer on the UI thread.
"""

import time
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple

from algorithms.step import AlgorithmStep


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class PlayerState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed presets (seconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   1.0,    # teaching mode
    "medium": 0.4,
    "fast":   0.15,   # demo mode
    "turbo":  0.05,
}

MIN_SPEED = 0.02


# ---------------------------------------------------------------------------
# TracePlayer
# ---------------------------------------------------------------------------
class TracePlayer:
    """
    Attributes:
        state       : Current PlayerState.
        steps       : The trace being played (tuple — never mutated).
        current_idx : Index into `steps` currently displayed (-1 when idle).
        speed       : Seconds between auto-advance ticks.
        on_step     : Optional callback(step) fired whenever the shown step changes.
    """

    def __init__(
        self,
        steps: Optional[Sequence[AlgorithmStep]] = None,
        speed: str = "medium",
        on_step: Optional[Callable[[AlgorithmStep], None]] = None,
    ):
        self.steps:       Tuple[AlgorithmStep, ...] = ()
        self.current_idx: int         = -1
        self.state:       PlayerState = PlayerState.IDLE
        self.speed:       float       = SPEED_PRESETS["medium"]
        self.on_step = on_step

        self._last_tick: float = 0.0

        self.set_speed(speed)
        if steps is not None:
            self.load(steps)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, steps: Sequence[AlgorithmStep], index: int = 0) -> None:
        """Attach a freshly computed trace and show step `index`."""
        self.steps       = tuple(steps)
        self.current_idx = -1
        if not self.steps:
            self.state = PlayerState.IDLE
            return
        self.state = PlayerState.PAUSED
        self._goto(min(max(index, 0), len(self.steps) - 1))

    def reset(self) -> None:
        """Back to IDLE — the old trace is dropped."""
        self.steps       = ()
        self.current_idx = -1
        self.state       = PlayerState.IDLE

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step.  Returns False if already at the end."""
        if not self._has_next():
            if self.steps:
                self.state = PlayerState.FINISHED
            return False
        self.pause()
        self._goto(self.current_idx + 1)
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at the start."""
        if self.current_idx <= 0:
            return False
        self.pause()
        self._goto(self.current_idx - 1)
        return True

    def goto_step(self, idx: int) -> bool:
        if not 0 <= idx < len(self.steps):
            return False
        self.pause()
        self._goto(idx)
        return True

    def rewind(self) -> None:
        if self.steps:
            self.pause()
            self._goto(0)

    def jump_to_end(self) -> None:
        if self.steps:
            self._goto(len(self.steps) - 1)
            self.state = PlayerState.FINISHED

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self, now: Optional[float] = None) -> None:
        if self.state in (PlayerState.IDLE, PlayerState.FINISHED):
            return
        if not self._has_next():
            self.state = PlayerState.FINISHED
            return
        self.state      = PlayerState.PLAYING
        self._last_tick = time.monotonic() if now is None else now

    def pause(self) -> None:
        if self.state == PlayerState.PLAYING:
            self.state = PlayerState.PAUSED

    def toggle_play(self) -> None:
        if self.state == PlayerState.PLAYING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> bool:
        """
        Call periodically (e.g. every 50 ms).  If playing and enough
        time has elapsed, advances one step.  Returns True if a step
        was taken.
        """
        if self.state != PlayerState.PLAYING:
            return False
        now = time.monotonic() if now is None else now
        if now - self._last_tick < self.speed:
            return False
        self._last_tick = now
        self._goto(self.current_idx + 1)
        if not self._has_next():
            self.state = PlayerState.FINISHED
        return True

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        self.speed = SPEED_PRESETS.get(preset, SPEED_PRESETS["medium"])

    def set_speed_value(self, seconds: float) -> None:
        self.speed = max(MIN_SPEED, seconds)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[AlgorithmStep]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def final_step(self) -> Optional[AlgorithmStep]:
        return self.steps[-1] if self.steps else None

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def position(self) -> int:
        """1-based position for "Step 3 of 12" labels (0 when idle)."""
        return self.current_idx + 1

    @property
    def is_finished(self) -> bool:
        return self.state == PlayerState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state == PlayerState.PLAYING

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _has_next(self) -> bool:
        return self.current_idx + 1 < len(self.steps)

    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        if self.on_step is not None:
            self.on_step(self.steps[idx])
