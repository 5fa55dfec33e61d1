import pytest

from core.countdown import Countdown


def test_fires_once_per_interval():
    calls = []
    countdown = Countdown(0.2, lambda: calls.append(1))
    assert countdown.update(0.1) == 0
    assert countdown.update(0.1) == 1
    assert len(calls) == 1


def test_catches_up_on_long_frames():
    calls = []
    countdown = Countdown(0.2, lambda: calls.append(1))
    assert countdown.update(1.0) == 5
    assert len(calls) == 5


def test_small_frames_accumulate():
    calls = []
    countdown = Countdown(0.2, lambda: calls.append(1))
    # 60 frames of 1/60s is one second
    for _ in range(60):
        countdown.update(1 / 60)
    assert len(calls) == 5


def test_cancel_stops_firing():
    calls = []
    countdown = Countdown(0.2, lambda: calls.append(1))
    countdown.cancel()
    assert countdown.is_active() is False
    assert countdown.update(5.0) == 0
    assert calls == []


def test_cancel_from_callback_drops_pending_firings():
    calls = []

    def on_fire():
        calls.append(1)
        countdown.cancel()

    countdown = Countdown(0.2, on_fire)
    assert countdown.update(1.0) == 1
    assert calls == [1]


def test_negative_dt_is_ignored():
    countdown = Countdown(0.2, lambda: None)
    assert countdown.update(-3.0) == 0
    assert countdown.update(0.2) == 1


def test_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        Countdown(0, lambda: None)
