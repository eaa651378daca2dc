from __future__ import annotations

import threading

import pytest

from swipeable import SwipeSession, SwipeListener, SWIPE_RIGHT, SWIPE_UP
from swipeable.gestures.provider import SwipeProvider, TouchCapture, TouchUpdate


def touch(x: float, y: float, t: float, i: int=0) -> TouchUpdate:
    return TouchUpdate(1, [(i, x, y, 1.)], t)


def release(t: float) -> TouchUpdate:
    return TouchUpdate(0, [], t)


def test_claims_and_reports_swipe(recorder):
    session = SwipeSession(horizontal=True, listener=recorder.listener())
    capture = TouchCapture(session, scale=1000.)

    capture.on_update(touch(.1, .5, 0.))
    assert not capture.captured

    capture.on_update(touch(.15, .5, .05))
    assert capture.captured

    capture.on_update(touch(.2, .5, .1))
    capture.on_update(release(.15))

    assert recorder.kinds() == ['begin', 'swipe', 'end']
    begin = recorder.of('begin')[0]
    assert begin['direction'] == SWIPE_RIGHT
    assert begin['distance'] == pytest.approx(50.)
    assert begin['velocity'] == pytest.approx(1.)
    assert recorder.of('swipe')[0]['distance'] == pytest.approx(100.)
    assert recorder.of('end') == [{'direction': SWIPE_RIGHT}]
    assert not capture.captured


def test_slow_drag_is_not_claimed(recorder):
    session = SwipeSession(horizontal=True, listener=recorder.listener())
    capture = TouchCapture(session, scale=1000.)

    capture.on_update(touch(.1, .5, 0.))
    capture.on_update(touch(.11, .5, 1.))
    capture.on_update(touch(.12, .5, 2.))
    capture.on_update(release(3.))

    assert recorder.events == []
    assert not session.locked


def test_second_finger_ends_interaction(recorder):
    session = SwipeSession(vertical=True, listener=recorder.listener())
    capture = TouchCapture(session, scale=1000.)

    capture.on_update(touch(.5, .5, 0.))
    capture.on_update(touch(.5, .44, .05))
    capture.on_update(TouchUpdate(2, [(0, .5, .4, 1.), (1, .2, .2, 1.)], .1))

    assert recorder.kinds() == ['begin', 'end']
    assert recorder.of('begin')[0]['direction'] == SWIPE_UP


def test_frame_without_position_is_skipped(recorder):
    session = SwipeSession(horizontal=True, listener=recorder.listener())
    capture = TouchCapture(session, scale=1000.)

    capture.on_update(TouchUpdate(1, [], 0.))
    capture.on_update(touch(.1, .5, .01))
    capture.on_update(TouchUpdate(1, [], .02))
    capture.on_update(touch(.15, .5, .06))

    assert recorder.kinds() == ['begin']


def test_new_tracking_id_restarts_interaction(recorder):
    session = SwipeSession(horizontal=True, listener=recorder.listener())
    capture = TouchCapture(session, scale=1000.)

    capture.on_update(touch(.1, .5, 0.))
    capture.on_update(touch(.15, .5, .05))
    capture.on_update(touch(.8, .5, .1, i=1))
    capture.on_update(touch(.8, .5, .15, i=1))

    assert recorder.kinds() == ['begin', 'end']


def test_reset_is_forced_takeover(recorder):
    session = SwipeSession(horizontal=True, listener=recorder.listener())
    capture = TouchCapture(session, scale=1000.)

    capture.on_update(touch(.1, .5, 0.))
    capture.on_update(touch(.15, .5, .05))
    capture.reset()
    capture.reset()

    assert recorder.kinds() == ['begin', 'end']

    # same finger keeps moving: tracking starts over
    capture.on_update(touch(.2, .5, .1))
    assert recorder.kinds() == ['begin', 'end']


def test_provider_builds_sessions():
    provider = SwipeProvider(lambda: SwipeSession(horizontal=True))
    a, b = provider.new_session(), provider.new_session()

    assert a is not b
    assert a.config.horizontal


def test_takeover_from_other_thread_during_update(recorder):
    session = SwipeSession(horizontal=True)
    capture = TouchCapture(session, scale=1000.)

    def take_over(values):
        t = threading.Thread(target=capture.reset)
        t.start()
        t.join()

    session.listener(SwipeListener(on_swipe=take_over))
    session.listener(recorder.listener())

    capture.on_update(touch(.1, .5, 0.))
    capture.on_update(touch(.15, .5, .05))
    capture.on_update(touch(.2, .5, .1))

    assert recorder.kinds() == ['begin', 'swipe', 'end']
    assert not capture.captured

    capture.on_update(touch(.25, .5, .15))
    assert recorder.kinds() == ['begin', 'swipe', 'end']


def test_takeover_from_callback_on_same_thread(recorder):
    session = SwipeSession(horizontal=True)
    capture = TouchCapture(session, scale=1000.)

    session.listener(SwipeListener(on_swipe_begin=lambda v: capture.reset()))
    session.listener(recorder.listener())

    capture.on_update(touch(.1, .5, 0.))
    capture.on_update(touch(.15, .5, .05))

    assert recorder.kinds() == ['begin', 'end']


def test_takeover_from_other_thread_while_idle(recorder):
    session = SwipeSession(horizontal=True, listener=recorder.listener())
    capture = TouchCapture(session, scale=1000.)

    capture.on_update(touch(.1, .5, 0.))
    capture.on_update(touch(.15, .5, .05))

    t = threading.Thread(target=capture.reset)
    t.start()
    t.join()

    assert recorder.kinds() == ['begin', 'end']


def test_provider_reset_gesture_terminates_every_device(recorder):
    pytest.importorskip('evdev')
    from swipeable.gestures.provider.pyevdev_provider import PyEvdevSwipeProvider

    provider = PyEvdevSwipeProvider(lambda: SwipeSession(horizontal=True, listener=recorder.listener()))
    captures = [TouchCapture(provider.new_session(), scale=1000.) for _ in range(2)]
    provider._devices = [(None, c) for c in captures]

    for c in captures:
        c.on_update(touch(.1, .5, 0.))
        c.on_update(touch(.15, .5, .05))

    t = threading.Thread(target=provider.reset_gesture)
    t.start()
    t.join()

    assert recorder.kinds() == ['begin', 'begin', 'end', 'end']
    assert not any(c.captured for c in captures)
