from __future__ import annotations

from .lowpass import Lowpass
from ..motion import MotionSample

class MotionTracker:
    """
    Builds MotionSamples from absolute positions: displacement relative to
    the first position, velocity in units per millisecond (t in seconds)
    """
    def __init__(self, x: float, y: float, t: float, lp_inertia: float=0.) -> None:
        self._initial_x = x
        self._initial_y = y

        self._last_x = x
        self._last_y = y
        self._last_t = t

        self._lp_vx = Lowpass(lp_inertia)
        self._lp_vy = Lowpass(lp_inertia)
        self._vx = 0.
        self._vy = 0.

    def update(self, x: float, y: float, t: float) -> MotionSample:
        dt = (t - self._last_t) * 1000.

        # repeated or out-of-order timestamps keep the last velocity
        if dt > 0:
            self._vx = self._lp_vx.next((x - self._last_x) / dt)
            self._vy = self._lp_vy.next((y - self._last_y) / dt)
            self._last_t = t

        self._last_x = x
        self._last_y = y

        return MotionSample(
            x - self._initial_x,
            y - self._initial_y,
            self._vx,
            self._vy
        )
