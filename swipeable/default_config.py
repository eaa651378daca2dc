"""
Default configuration, used by swipeable-monitor if neither
~/.config/swipeable/config.py nor /etc/swipeable/config.py exist
"""

swipe = {
    'horizontal': True,
    'vertical': True,
    'continuous': True,
    'initial_velocity_threshold': 0.7,
    'vertical_threshold': 10,
    'horizontal_threshold': 10,
    'report_gesture_state': True,
}

tracker = {
    'lp_inertia': .3,
}

provider = {
    'pyevdev': {
        'scale': 1000.,
        'rescan_interval': .5,
    }
}
