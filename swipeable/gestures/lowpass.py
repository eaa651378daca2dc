from __future__ import annotations

from typing import Optional

class Lowpass:
    """
    Exponential smoothing: value = inertia * value + (1 - inertia) * new
    """
    def __init__(self, inertia: float) -> None:
        self.inertia = min(max(inertia, 0.), 1.)
        self.value: Optional[float] = None

    def next(self, val: float) -> float:
        if self.value is None:
            self.value = val
        else:
            self.value += (1. - self.inertia) * (val - self.value)
        return self.value

    def reset(self) -> None:
        self.value = None
