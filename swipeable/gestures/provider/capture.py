from __future__ import annotations
from typing import Optional

import time
import logging
from threading import Lock

from ..motion_tracker import MotionTracker
from ...session import SwipeSession

logger = logging.getLogger(__name__)


class TouchUpdate:
    def __init__(self, n_touches: int, touches: list[tuple[int, float, float, float]], t: Optional[float]=None) -> None:
        """
        touches is an array of tuples (id, x, y, z), coordinates normalized to [0, 1]
        """
        self.t = t if t is not None else time.time()
        self.n_touches = n_touches

        self.touches = touches

    def __str__(self) -> str:
        return "TouchUpdate(%d: %s)" % (self.n_touches, ", ".join(["%d: (%.3f, %.3f)" % (i, x, y) for i, x, y, _ in self.touches]))


class TouchCapture:
    """
    Single finger capture for one device: asks the session whether to claim
    until it does, then feeds it every sample until the finger is lifted or
    another one joins.

    reset() may come from any thread (or from a session callback); while an
    update is being processed it is deferred until that update is done, so
    the session never sees a sample after its end
    """
    def __init__(self, session: SwipeSession, scale: float=1000., lp_inertia: float=0.) -> None:
        self.session = session
        self._scale = scale
        self._lp_inertia = lp_inertia

        self._tracker: Optional[MotionTracker] = None
        self._tracking_id: Optional[int] = None
        self.captured = False

        self._lock = Lock()
        self._reset_pending = False

    def reset(self) -> None:
        self._reset_pending = True
        if not self._lock.acquire(blocking=False):
            return

        try:
            self._consume_reset()
        finally:
            self._lock.release()

    def on_update(self, update: TouchUpdate) -> None:
        with self._lock:
            self._consume_reset()
            self._process(update)

        # reset requested while the update was running
        if self._reset_pending:
            self.reset()

    def _consume_reset(self) -> None:
        if self._reset_pending:
            self._reset_pending = False
            self._terminate()

    def _terminate(self) -> None:
        if self.captured:
            self.session.on_terminate()

        self._tracker = None
        self._tracking_id = None
        self.captured = False

    def _process(self, update: TouchUpdate) -> None:
        if update.n_touches != 1:
            if self._tracker is not None:
                logger.debug("Interaction finished (%d touches)", update.n_touches)
            self._terminate()
            return

        # frames without position, e.g. BTN_TOOL_FINGER before the first ABS event
        if len(update.touches) != 1:
            return

        i, x, y, _ = update.touches[0]
        x *= self._scale
        y *= self._scale

        if self._tracker is None or self._tracking_id != i:
            self._terminate()
            self._tracker = MotionTracker(x, y, update.t, self._lp_inertia)
            self._tracking_id = i
            return

        sample = self._tracker.update(x, y, update.t)

        if not self.captured:
            if not self.session.should_claim(sample):
                return

            logger.debug("Claiming interaction on %s", sample)
            self.captured = True

        self.session.on_sample(sample)
