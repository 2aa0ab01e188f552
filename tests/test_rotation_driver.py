import pytest

from busy_indicator.rotation_driver import (
    RampRotationDriver,
    TickRotationDriver,
    DEFAULT_TICK_INTERVAL_MS,
    ROTATION_PERIOD_MS,
)


def collect(driver):
    values = []
    driver.rotationChanged.connect(values.append)
    return values


def test_tick_advances_by_elapsed_time(app, fake_elapsed):
    driver = TickRotationDriver(elapsed_timer=fake_elapsed([100]))
    values = collect(driver)
    driver.start(40.0)
    driver.tick()
    driver.stop()
    assert values == [pytest.approx(58.0)]


def test_tick_wraps_by_subtracting_full_turn(app, fake_elapsed):
    driver = TickRotationDriver(elapsed_timer=fake_elapsed([100]))
    driver.start(350.0)
    driver.tick()
    driver.stop()
    assert driver.rotation == pytest.approx(8.0)


def test_tick_longer_than_full_turn_stays_in_range(app, fake_elapsed):
    driver = TickRotationDriver(elapsed_timer=fake_elapsed([5000, 3000]))
    driver.set_freeze_duration(5000)
    assert driver.timer.interval() == 5000
    driver.start(0.0)
    driver.tick()
    assert driver.rotation == pytest.approx(180.0)
    driver.tick()
    driver.stop()
    assert driver.rotation == pytest.approx(0.0, abs=1e-9)
    assert 0 <= driver.rotation < 360


def test_tick_rotation_stays_in_range_and_monotonic(app, fake_elapsed):
    steps = [16, 17, 33, 250, 16, 900, 17, 16, 500, 16] * 10
    driver = TickRotationDriver(elapsed_timer=fake_elapsed(steps))
    values = collect(driver)
    driver.start(0.0)
    for _ in steps:
        driver.tick()
    driver.stop()

    previous = 0.0
    for step, value in zip(steps, values):
        assert 0 <= value < 360
        advance = step * 360 / ROTATION_PERIOD_MS
        if value < previous:
            assert value == pytest.approx(previous + advance - 360)
        else:
            assert value == pytest.approx(previous + advance)
        previous = value


def test_tick_interval_follows_freeze_duration(app):
    driver = TickRotationDriver()
    assert driver.interval() == DEFAULT_TICK_INTERVAL_MS == 16
    driver.set_freeze_duration(500)
    assert driver.timer.interval() == 500
    driver.set_freeze_duration(0)
    assert driver.timer.interval() == DEFAULT_TICK_INTERVAL_MS


def test_tick_interval_updates_while_running(app, fake_elapsed):
    driver = TickRotationDriver(elapsed_timer=fake_elapsed([]))
    driver.start()
    assert driver.is_running()
    driver.set_freeze_duration(120)
    assert driver.timer.interval() == 120
    assert driver.is_running()
    driver.stop()
    assert not driver.is_running()


def test_negative_freeze_is_clamped(app):
    for driver in (RampRotationDriver(), TickRotationDriver()):
        driver.set_freeze_duration(-5)
        assert driver.freeze_duration() == 0


def test_ramp_emits_angles_modulo_full_turn(app):
    driver = RampRotationDriver()
    values = collect(driver)
    driver.start(300.0)
    assert driver.is_running()
    driver.animation.setCurrentTime(ROTATION_PERIOD_MS // 2)
    driver.stop()
    assert not driver.is_running()
    assert values[-1] == pytest.approx(120.0)
    assert all(0 <= v < 360 for v in values)


def test_ramp_stalls_only_when_freeze_is_set(app):
    stalls = []
    driver = RampRotationDriver(stall=stalls.append)
    driver.start(0.0)
    driver.animation.setCurrentTime(100)
    assert stalls == []

    driver.set_freeze_duration(250)
    driver.animation.setCurrentTime(200)
    driver.stop()
    assert stalls and set(stalls) == {250}
