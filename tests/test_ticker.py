import pytest

from ticker import FixedIntervalTicker


def test_ten_fps_interval():
    ticker = FixedIntervalTicker(10)
    assert ticker.interval_ms == 100


def test_counts_due_ticks_and_keeps_remainder():
    ticker = FixedIntervalTicker(10)
    assert ticker.elapsed(40) == 0
    assert ticker.elapsed(70) == 1
    assert ticker.accumulated_ms == pytest.approx(10)
    assert ticker.elapsed(50) == 0


def test_stall_yields_one_tick_per_frame():
    """A long pause runs a single tick instead of catching up unseen."""
    ticker = FixedIntervalTicker(10)
    assert ticker.elapsed(5030) == 1
    assert ticker.accumulated_ms == pytest.approx(30)
    assert ticker.elapsed(0) == 0


def test_catch_up_limit_is_configurable():
    ticker = FixedIntervalTicker(10, max_due=3)
    assert ticker.elapsed(250) == 2
    assert ticker.elapsed(1000) == 3


def test_reset_discards_accumulated_time():
    ticker = FixedIntervalTicker(10)
    ticker.elapsed(90)
    ticker.reset()
    assert ticker.elapsed(20) == 0


def test_negative_time_is_ignored():
    ticker = FixedIntervalTicker(10)
    assert ticker.elapsed(-50) == 0
    assert ticker.accumulated_ms == 0


@pytest.mark.parametrize("fps", [0, -1])
def test_rejects_non_positive_fps(fps):
    with pytest.raises(ValueError):
        FixedIntervalTicker(fps)


def test_rejects_zero_catch_up_limit():
    with pytest.raises(ValueError):
        FixedIntervalTicker(10, max_due=0)
