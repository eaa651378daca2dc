from __future__ import annotations
from typing import Callable

import logging
import time
from threading import Thread, Lock

from ...config import configured_value
from ...session import SwipeSession
from .provider import SwipeProvider
from .capture import TouchCapture
from .pyevdev_touchpad import find_all_touch_devices, TouchDevice

logger = logging.getLogger(__name__)

conf_scale = configured_value('provider.pyevdev.scale', 1000.)
conf_rescan_interval = configured_value('provider.pyevdev.rescan_interval', .5)
conf_lp_inertia = configured_value('tracker.lp_inertia', 0.)


class PyEvdevSwipeProvider(SwipeProvider, Thread):
    def __init__(self, session_factory: Callable[[], SwipeSession]) -> None:
        Thread.__init__(self)
        SwipeProvider.__init__(self, session_factory)

        self._devices: list[tuple[TouchDevice, TouchCapture]] = []
        self._devices_lock = Lock()
        self._running = True

    def _start_device(self, name: str, path: str) -> None:
        device = TouchDevice(path)
        capture = TouchCapture(self.new_session(), conf_scale(), conf_lp_inertia())
        device.listener(capture.on_update)

        with self._devices_lock:
            self._devices += [
                (device, capture)
            ]
        device.start()
        logger.info("Started %s at %s", name, path)

    def _stop_device(self, idx: int) -> None:
        device, capture = self._devices[idx]
        device.stop()
        logger.info("Stopping device at %s...", device.path)
        device.join()
        capture.reset()
        logger.info("...stopped")
        with self._devices_lock:
            del self._devices[idx]

    def update(self) -> None:
        validated = [False for _ in self._devices]
        for name, path in find_all_touch_devices():
            try:
                i = [d.path for d, _ in self._devices].index(path)
                validated[i] = True
            except ValueError:
                logger.info("Found new touch device: %s at %s", name, path)
                self._start_device(name, path)

        for i, v in reversed(list(enumerate(validated))):
            if not v or not self._devices[i][0].is_alive():
                logger.info("Touch device at %s disappeared", self._devices[i][0].path)
                self._stop_device(i)

    def reset_gesture(self) -> None:
        with self._devices_lock:
            captures = [c for _, c in self._devices]

        for c in captures:
            c.reset()

    def stop(self) -> None:
        self._running = False

    def run(self) -> None:
        try:
            while self._running:
                self.update()
                time.sleep(conf_rescan_interval())
        finally:
            for i, _ in reversed(list(enumerate(self._devices))):
                self._stop_device(i)

    def start(self) -> None:
        Thread.start(self)
