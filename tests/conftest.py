from __future__ import annotations
from typing import Any

import pytest

from swipeable.config import reset_config
from swipeable.swipe_listener import SwipeListener


class Recorder:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def listener(self) -> SwipeListener:
        return SwipeListener(
            lambda v: self.events.append(('begin', v)),
            lambda v: self.events.append(('swipe', v)),
            lambda v: self.events.append(('end', v))
        )

    def kinds(self) -> list[str]:
        return [k for k, _ in self.events]

    def of(self, kind: str) -> list[dict[str, Any]]:
        return [v for k, v in self.events if k == kind]


@pytest.fixture(autouse=True)
def clean_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
