"""
playback/
---------
Playback & result layer over an already computed trace.

    from playback import TracePlayer, ResultTree
"""

from playback.player import TracePlayer, PlayerState, SPEED_PRESETS
from playback.result import ResultTree

__all__ = [
    "TracePlayer",
    "PlayerState",
    "SPEED_PRESETS",
    "ResultTree",
]
