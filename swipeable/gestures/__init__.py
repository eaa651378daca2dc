from .lowpass import Lowpass  # noqa F401
from .motion_tracker import MotionTracker  # noqa F401
