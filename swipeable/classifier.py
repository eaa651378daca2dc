from __future__ import annotations
from typing import Optional

from .direction import SWIPE_UP, SWIPE_DOWN, SWIPE_LEFT, SWIPE_RIGHT
from .motion import MotionSample
from .swipe_config import SwipeConfig


class Lock:
    def __init__(self, direction: str, distance_axis: str, velocity_axis: str) -> None:
        self.direction = direction
        self.distance_axis = distance_axis
        self.velocity_axis = velocity_axis

    def __str__(self) -> str:
        return "Lock(%s, %s/%s)" % (self.direction, self.distance_axis, self.velocity_axis)


def is_eligible(primary_velocity: float, orthogonal_displacement: float,
                velocity_threshold: float, displacement_threshold: float) -> bool:
    """
    Fast enough along the primary axis and straight enough along the other one.
    NaN compares false on both sides, so it never qualifies
    """
    return abs(primary_velocity) >= velocity_threshold and \
        abs(orthogonal_displacement) <= displacement_threshold


def is_horizontal_candidate(sample: MotionSample, config: SwipeConfig) -> bool:
    return config.check_horizontal and is_eligible(
        sample.vx, sample.dy, config.initial_velocity_threshold, config.vertical_threshold)


def is_vertical_candidate(sample: MotionSample, config: SwipeConfig) -> bool:
    return config.check_vertical and is_eligible(
        sample.vy, sample.dx, config.initial_velocity_threshold, config.horizontal_threshold)


def resolve_lock(sample: MotionSample, config: SwipeConfig) -> Optional[Lock]:
    """
    Horizontal takes precedence: if it qualifies, vertical is not considered
    even when the sign of dx does not match an enabled direction
    """
    if is_horizontal_candidate(sample, config):
        if config.allows_left and sample.dx < 0:
            return Lock(SWIPE_LEFT, 'dx', 'vx')
        elif config.allows_right and sample.dx > 0:
            return Lock(SWIPE_RIGHT, 'dx', 'vx')

    elif is_vertical_candidate(sample, config):
        if config.allows_up and sample.dy < 0:
            return Lock(SWIPE_UP, 'dy', 'vy')
        elif config.allows_down and sample.dy > 0:
            return Lock(SWIPE_DOWN, 'dy', 'vy')

    return None


def classify_eligibility(sample: MotionSample, config: SwipeConfig) -> bool:
    return resolve_lock(sample, config) is not None
