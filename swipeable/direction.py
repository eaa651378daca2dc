from __future__ import annotations

SWIPE_UP = 'SWIPE_UP'
SWIPE_DOWN = 'SWIPE_DOWN'
SWIPE_LEFT = 'SWIPE_LEFT'
SWIPE_RIGHT = 'SWIPE_RIGHT'

directions = (SWIPE_UP, SWIPE_DOWN, SWIPE_LEFT, SWIPE_RIGHT)
