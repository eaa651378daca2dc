from __future__ import annotations
from typing import Callable

from ...session import SwipeSession

class SwipeProvider:
    def __init__(self, session_factory: Callable[[], SwipeSession]) -> None:
        self._session_factory = session_factory

    def new_session(self) -> SwipeSession:
        return self._session_factory()

    """
    Forced takeover: terminate any running interaction, the next touch starts
    a new one
    """
    def reset_gesture(self) -> None:
        pass

    def start(self) -> None:
        pass

    def stop(self) -> None:
        pass
