from __future__ import annotations
from typing import Optional, Any

import time
import logging

from .config import load_config, print_config
from .session import SwipeSession
from .swipe_listener import SwipeListener

logger = logging.getLogger(__name__)

def _setup_logging(debug: bool) -> None:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('[%(levelname)s] %(filename)s:%(lineno)s %(asctime)s: %(message)s', datefmt='%Y-%m-%d %H:%M:%S')

    handler.setLevel(logging.DEBUG if debug else logging.INFO)
    handler.setFormatter(formatter)

    log = logging.getLogger("swipeable")
    log.setLevel(logging.DEBUG)
    log.addHandler(handler)


def _log_listener() -> SwipeListener:
    def on_swipe_begin(values: dict[str, Any]) -> None:
        logger.info("Swipe begin: %s (distance=%.1f, velocity=%.3f)", values['direction'], values['distance'], values['velocity'])

    def on_swipe(values: dict[str, Any]) -> None:
        logger.debug("Swipe: %s (distance=%.1f, velocity=%.3f)", values['direction'], values['distance'], values['velocity'])

    def on_swipe_end(values: dict[str, Any]) -> None:
        logger.info("Swipe end: %s", values['direction'])

    return SwipeListener(on_swipe_begin, on_swipe, on_swipe_end)


def run(debug: bool=False, config_file: Optional[str]=None, show_config: bool=False) -> None:
    _setup_logging(debug)
    load_config(config_file)

    from .gestures.provider.pyevdev_provider import PyEvdevSwipeProvider

    if show_config:
        print(print_config())
        return

    listener = _log_listener()
    provider = PyEvdevSwipeProvider(lambda: SwipeSession(listener=listener))

    try:
        provider.start()
        while provider.is_alive():
            time.sleep(.5)
    except KeyboardInterrupt:
        logger.info("Stopping...")
    except Exception:
        logger.exception("Unexpected")
    finally:
        provider.stop()
        if provider.is_alive():
            provider.join()
