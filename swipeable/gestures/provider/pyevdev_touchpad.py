from __future__ import annotations

from select import select
import evdev # type: ignore
import logging
from threading import Thread
from typing import Callable, Generator

from .capture import TouchUpdate

logger = logging.getLogger(__name__)

_tool_touches = {
    evdev.ecodes.BTN_TOOL_FINGER: 1,
    evdev.ecodes.BTN_TOOL_DOUBLETAP: 2,
    evdev.ecodes.BTN_TOOL_TRIPLETAP: 3,
    evdev.ecodes.BTN_TOOL_QUADTAP: 4,
    evdev.ecodes.BTN_TOOL_QUINTTAP: 5,
}


class Slot:
    def __init__(self, n: int) -> None:
        self.n = n

        self.tracking_id = -1
        self.x = -1
        self.y = -1
        self.z = -1

    def set_tracking_id(self, i: int) -> None:
        self.tracking_id = i
        if self.tracking_id < 0:
            self.x = -1
            self.y = -1
            self.z = -1

    def __str__(self) -> str:
        return "%d: (%d, %d, %d)" % (self.tracking_id, self.x, self.y, self.z)


class TouchDevice(Thread):
    """
    Reads a multitouch device (touchscreen or touchpad) and emits one
    TouchUpdate per EV_SYN
    """
    def __init__(self, path: str) -> None:
        super().__init__()
        self.path = path
        self._device = evdev.InputDevice(path)
        self._running = True

        self._n_touches = 0
        self._slots: list[Slot] = []

        self._listeners: list[Callable[[TouchUpdate], None]] = []

        self.min_x: int = 0
        self.max_x: int = 1
        self.min_y: int = 0
        self.max_y: int = 1
        self.min_z: int = 0
        self.max_z: int = 1
        for code, info in self._device.capabilities().get(evdev.ecodes.EV_ABS, []):
            if code == evdev.ecodes.ABS_MT_POSITION_X:
                self.min_x, self.max_x = info.min, info.max
            elif code == evdev.ecodes.ABS_MT_POSITION_Y:
                self.min_y, self.max_y = info.min, info.max
            elif code == evdev.ecodes.ABS_MT_PRESSURE:
                self.min_z, self.max_z = info.min, info.max

    def listener(self, l: Callable[[TouchUpdate], None]) -> None:
        self._listeners += [l]

    def _get_slot(self, n: int) -> Slot:
        if n < 0:
            raise ValueError("Invalid slot %d" % n)

        while n >= len(self._slots):
            self._slots += [Slot(len(self._slots))]

        return self._slots[n]

    def _normalize(self, v: int, lo: int, hi: int) -> float:
        return (v - lo) / (hi - lo) if hi > lo else 0.

    def synchronize(self) -> None:
        active = [s for s in self._slots if s.tracking_id >= 0]

        # touchscreens often send no BTN_TOOL_* events, count the slots instead
        n_touches = max(self._n_touches, len(active))
        if len(active) == 0:
            self._n_touches = 0
            n_touches = 0

        update = TouchUpdate(
            n_touches,
            [(s.tracking_id,
              self._normalize(s.x, self.min_x, self.max_x),
              self._normalize(s.y, self.min_y, self.max_y),
              self._normalize(s.z, self.min_z, self.max_z) if s.z >= 0 else 1.0
              ) for s in active if s.x >= 0 and s.y >= 0]
        )

        for l in self._listeners:
            l(update)

    def run(self) -> None:
        try:
            slot = 0
            while self._running:
                r, w, x = select([self._device], [], [], 0.1)
                if not r:
                    continue

                for event in self._device.read():
                    if event.type == evdev.ecodes.EV_SYN:
                        self.synchronize()

                    elif event.type == evdev.ecodes.EV_KEY:
                        if event.code in _tool_touches:
                            if event.value == 1:
                                self._n_touches = _tool_touches[event.code]
                            elif self._n_touches == _tool_touches[event.code]:
                                self._n_touches = 0

                    elif event.type == evdev.ecodes.EV_ABS:
                        if event.code == evdev.ecodes.ABS_MT_SLOT:
                            slot = event.value
                        elif event.code == evdev.ecodes.ABS_MT_TRACKING_ID:
                            self._get_slot(slot).set_tracking_id(event.value)
                        elif event.code == evdev.ecodes.ABS_MT_POSITION_X:
                            self._get_slot(slot).x = event.value
                        elif event.code == evdev.ecodes.ABS_MT_POSITION_Y:
                            self._get_slot(slot).y = event.value
                        elif event.code == evdev.ecodes.ABS_MT_PRESSURE:
                            self._get_slot(slot).z = event.value

        except Exception:
            logger.exception("TouchDevice %s", self.path)
        finally:
            self._device.close()

    def stop(self) -> None:
        self._running = False


def find_all_touch_devices() -> Generator[tuple[str, str], None, None]:
    for path in evdev.list_devices():
        try:
            device = evdev.InputDevice(path)
        except OSError:
            logger.debug("Could not open %s", path)
            continue

        try:
            abs_codes = [code for code, _ in device.capabilities().get(evdev.ecodes.EV_ABS, [])]
            if evdev.ecodes.ABS_MT_POSITION_X in abs_codes:
                yield (device.name, device.path)
        finally:
            device.close()
