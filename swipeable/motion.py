from __future__ import annotations

AXES = ('dx', 'dy', 'vx', 'vy')

class MotionSample:
    def __init__(self, dx: float, dy: float, vx: float, vy: float) -> None:
        """
        dx, dy: displacement since the gesture started
        vx, vy: current velocity, same axes
        """
        self.dx = dx
        self.dy = dy
        self.vx = vx
        self.vy = vy

    def get(self, axis: str) -> float:
        if axis not in AXES:
            raise KeyError(axis)
        return getattr(self, axis)

    def __str__(self) -> str:
        return "MotionSample(dx=%.2f, dy=%.2f, vx=%.3f, vy=%.3f)" % (self.dx, self.dy, self.vx, self.vy)
