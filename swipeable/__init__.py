from __future__ import annotations

from .direction import (  # noqa F401
    SWIPE_UP,
    SWIPE_DOWN,
    SWIPE_LEFT,
    SWIPE_RIGHT,
    directions
)
from .motion import MotionSample  # noqa F401
from .swipe_config import SwipeConfig  # noqa F401
from .classifier import is_eligible, classify_eligibility, resolve_lock  # noqa F401
from .swipe_listener import SwipeListener  # noqa F401
from .session import SwipeSession  # noqa F401
from .config import load_config, print_config  # noqa F401

from .run import run  # noqa F401
