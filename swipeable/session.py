from __future__ import annotations
from typing import Optional, Union, Any

import logging

from .classifier import Lock, resolve_lock, classify_eligibility
from .motion import MotionSample
from .swipe_config import SwipeConfig
from .swipe_listener import SwipeListener

logger = logging.getLogger(__name__)


class Idle:
    name = 'idle'

class Armed:
    name = 'armed'

class Locked:
    name = 'locked'

    def __init__(self, lock: Lock) -> None:
        self.lock = lock

SessionState = Union[Idle, Armed, Locked]


class SwipeSession:
    """
    Turns the motion samples of one interaction at a time into
    begin -> swipe* -> end notifications.

    The host drives it through should_claim (before capture is granted),
    on_sample (once per motion event while captured) and on_terminate
    (release or forced takeover).

    A new session is armed; after on_terminate it is idle until the next
    sample (or arm()) starts another interaction.
    """
    def __init__(self, config: Optional[SwipeConfig]=None, listener: Optional[SwipeListener]=None, **options: Any) -> None:
        if config is None:
            config = SwipeConfig.resolve(**options)
        elif len(options) > 0:
            config = config.with_options(**options)

        self.config = config
        self._listeners: list[SwipeListener] = []
        if listener is not None:
            self._listeners += [listener]

        self._state: SessionState = Armed()

        self.gesture_state: Optional[dict[str, Any]] = None
        if self.config.report_gesture_state:
            self.gesture_state = {
                'direction': None,
                'distance': 0,
                'velocity': 0
            }

    def listener(self, l: SwipeListener) -> None:
        self._listeners += [l]

    @property
    def state(self) -> str:
        return self._state.name

    @property
    def locked(self) -> bool:
        return isinstance(self._state, Locked)

    @property
    def direction(self) -> Optional[str]:
        if isinstance(self._state, Locked):
            return self._state.lock.direction
        return None

    def should_claim(self, sample: MotionSample) -> bool:
        return classify_eligibility(sample, self.config)

    def arm(self) -> None:
        if isinstance(self._state, Idle):
            self._state = Armed()

    def on_sample(self, sample: MotionSample) -> None:
        self.arm()

        if isinstance(self._state, Armed):
            lock = resolve_lock(sample, self.config)
            if lock is None:
                return

            self._state = Locked(lock)
            logger.debug("Locked %s on %s", lock, sample)
            self._emit_begin(self._values(lock, sample))

        elif isinstance(self._state, Locked):
            if not self.config.continuous:
                return

            self._emit_swipe(self._values(self._state.lock, sample))

    def on_terminate(self) -> None:
        state, self._state = self._state, Idle()

        if isinstance(state, Locked):
            logger.debug("Terminated %s", state.lock)
            for l in self._listeners:
                l.end({'direction': state.lock.direction})

    def _values(self, lock: Lock, sample: MotionSample) -> dict[str, Any]:
        return {
            'direction': lock.direction,
            'distance': sample.get(lock.distance_axis),
            'velocity': sample.get(lock.velocity_axis)
        }

    def _report(self, values: dict[str, Any]) -> None:
        if self.gesture_state is not None:
            self.gesture_state = dict(values)

    def _emit_begin(self, values: dict[str, Any]) -> None:
        self._report(values)
        for l in self._listeners:
            l.begin(dict(values))

    def _emit_swipe(self, values: dict[str, Any]) -> None:
        self._report(values)
        for l in self._listeners:
            l.swipe(dict(values))

    def __str__(self) -> str:
        return "SwipeSession(%s%s)" % (self.state, (", %s" % self.direction) if self.locked else "")
