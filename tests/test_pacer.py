import pytest

from metaterm.pacer import POLL_INTERVAL, FramePacer


def test_frames_are_never_released_early(clock):
    pacer = FramePacer(24, clock=clock, sleep=clock.sleep)
    pacer.start()
    released = [pacer.wait() for _ in range(11)]

    for n, t in enumerate(released):
        assert t >= n * (1.0 / 24)
    assert released == sorted(released)
    assert pacer.frame == 11


def test_overshoot_is_bounded_by_poll_interval(clock):
    pacer = FramePacer(24, poll_interval=0.01, clock=clock, sleep=clock.sleep)
    pacer.start()
    for n in range(11):
        assert pacer.wait() < n / 24 + 0.01 + 1e-9


def test_first_frame_does_not_sleep(clock):
    pacer = FramePacer(24, clock=clock, sleep=clock.sleep)
    pacer.start()
    assert pacer.wait() == 0.0
    assert clock.sleeps == []


def test_late_frame_is_released_immediately(clock):
    pacer = FramePacer(10, clock=clock, sleep=clock.sleep)
    pacer.start()
    pacer.wait()
    clock.now += 0.5  # a slow render
    assert pacer.wait() == pytest.approx(0.5)
    assert clock.sleeps == []


def test_sleeps_in_poll_increments(clock):
    pacer = FramePacer(2, poll_interval=0.1, clock=clock, sleep=clock.sleep)
    pacer.start()
    pacer.wait()
    pacer.wait()
    assert clock.sleeps
    assert set(clock.sleeps) == {0.1}


def test_start_resets_counter(clock):
    pacer = FramePacer(24, clock=clock, sleep=clock.sleep)
    pacer.start()
    pacer.wait()
    pacer.wait()
    pacer.start()
    assert pacer.frame == 0


def test_wait_before_start_fails(clock):
    pacer = FramePacer(24, clock=clock, sleep=clock.sleep)
    with pytest.raises(RuntimeError):
        pacer.wait()


def test_rejects_non_positive_fps():
    with pytest.raises(ValueError):
        FramePacer(0)


def test_default_poll_interval():
    assert FramePacer(30).poll_interval == POLL_INTERVAL
