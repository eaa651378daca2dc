from __future__ import annotations
from typing import NamedTuple, Any

import logging

from .config import configured_value

logger = logging.getLogger(__name__)

conf_horizontal = configured_value('swipe.horizontal', False)
conf_vertical = configured_value('swipe.vertical', False)
conf_left = configured_value('swipe.left', False)
conf_right = configured_value('swipe.right', False)
conf_up = configured_value('swipe.up', False)
conf_down = configured_value('swipe.down', False)
conf_continuous = configured_value('swipe.continuous', True)
conf_initial_velocity_threshold = configured_value('swipe.initial_velocity_threshold', 0.7)
conf_vertical_threshold = configured_value('swipe.vertical_threshold', 10.)
conf_horizontal_threshold = configured_value('swipe.horizontal_threshold', 10.)
conf_report_gesture_state = configured_value('swipe.report_gesture_state', True)

_configured = {
    'horizontal': conf_horizontal,
    'vertical': conf_vertical,
    'left': conf_left,
    'right': conf_right,
    'up': conf_up,
    'down': conf_down,
    'continuous': conf_continuous,
    'initial_velocity_threshold': conf_initial_velocity_threshold,
    'vertical_threshold': conf_vertical_threshold,
    'horizontal_threshold': conf_horizontal_threshold,
    'report_gesture_state': conf_report_gesture_state,
}


def _check_options(options: dict[str, Any]) -> None:
    unknown = [k for k in options if k not in _configured]
    if len(unknown) > 0:
        raise TypeError("Unknown swipe option(s): %s" % ", ".join(unknown))


class SwipeConfig(NamedTuple):
    """
    vertical_threshold bounds the vertical drift of a horizontal swipe,
    horizontal_threshold the horizontal drift of a vertical one
    """
    horizontal: bool = False
    vertical: bool = False
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    continuous: bool = True
    initial_velocity_threshold: float = 0.7
    vertical_threshold: float = 10.
    horizontal_threshold: float = 10.
    report_gesture_state: bool = True

    @classmethod
    def resolve(cls, **overrides: Any) -> SwipeConfig:
        """
        Explicit overrides win over the loaded config module, which wins
        over the defaults
        """
        _check_options(overrides)

        values = {k: overrides[k] if overrides.get(k) is not None else conf()
                  for k, conf in _configured.items()}
        config = cls(**values)

        if not config.check_horizontal and not config.check_vertical:
            logger.warning("No swipe direction enabled - %s will never lock in", config)

        return config

    def with_options(self, **overrides: Any) -> SwipeConfig:
        _check_options(overrides)
        return self._replace(**overrides)

    @property
    def check_horizontal(self) -> bool:
        return self.horizontal or self.left or self.right

    @property
    def check_vertical(self) -> bool:
        return self.vertical or self.up or self.down

    @property
    def allows_left(self) -> bool:
        return self.horizontal or self.left

    @property
    def allows_right(self) -> bool:
        return self.horizontal or self.right

    @property
    def allows_up(self) -> bool:
        return self.vertical or self.up

    @property
    def allows_down(self) -> bool:
        return self.vertical or self.down
