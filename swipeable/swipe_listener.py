from __future__ import annotations
from typing import Optional, Callable, Any

SwipeCallback = Callable[[dict[str, Any]], None]

class SwipeListener:
    def __init__(self,
                 on_swipe_begin: Optional[SwipeCallback]=None,
                 on_swipe: Optional[SwipeCallback]=None,
                 on_swipe_end: Optional[SwipeCallback]=None) -> None:
        self._on_swipe_begin = on_swipe_begin
        self._on_swipe = on_swipe
        self._on_swipe_end = on_swipe_end

    def begin(self, values: dict[str, Any]) -> None:
        if self._on_swipe_begin is not None:
            self._on_swipe_begin(values)

    def swipe(self, values: dict[str, Any]) -> None:
        if self._on_swipe is not None:
            self._on_swipe(values)

    def end(self, values: dict[str, Any]) -> None:
        if self._on_swipe_end is not None:
            self._on_swipe_end(values)
