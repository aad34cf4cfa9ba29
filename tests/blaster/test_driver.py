"""Unit tests for the frame driver."""

from __future__ import annotations

import pytest

from game.blaster.driver import FrameDriver

pytestmark = pytest.mark.unit


class FakeClock:
    def __init__(self, *times: float) -> None:
        self.times = list(times)

    def __call__(self) -> float:
        return self.times.pop(0)


def make_driver(clock, max_dt=None):
    calls = []
    driver = FrameDriver(
        update=lambda dt: calls.append(("update", dt)),
        render=lambda: calls.append(("render",)),
        clock=clock,
        max_dt=max_dt,
    )
    return driver, calls


class TestFrameDriver:
    def test_update_then_render_with_wall_delta(self):
        driver, calls = make_driver(FakeClock(10.0, 10.016, 10.05))
        driver.start()
        driver.tick()
        driver.tick()
        assert [c[0] for c in calls] == ["update", "render", "update", "render"]
        assert calls[0][1] == pytest.approx(0.016)
        assert calls[2][1] == pytest.approx(0.034)
        assert driver.frames == 2

    def test_large_gap_passes_through_unclamped(self):
        driver, calls = make_driver(FakeClock(0.0, 30.0))
        driver.start()
        assert driver.tick() == pytest.approx(30.0)

    def test_large_gap_clamped_when_configured(self):
        driver, calls = make_driver(FakeClock(0.0, 30.0, 30.01), max_dt=0.25)
        driver.start()
        assert driver.tick() == 0.25
        assert driver.tick() == pytest.approx(0.01)

    def test_tick_without_start_uses_zero_delta(self):
        driver, calls = make_driver(FakeClock(5.0))
        assert driver.tick() == 0.0
        assert calls[0] == ("update", 0.0)
