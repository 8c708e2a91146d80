"""Tests for TickDriver scheduling."""

from __future__ import annotations

from courttime.game.engine import GameClockEngine
from courttime.game.interfaces import GameConfig
from courttime.ui.tick_driver import TickDriver


def _engine(fake_time) -> GameClockEngine:
    return GameClockEngine(GameConfig(num_players=4, on_court=2), time_source=fake_time)


class TestTickDriver:
    def test_sync_follows_clock_state(self, qapp, fake_time) -> None:
        engine = _engine(fake_time)
        driver = TickDriver(engine, 250)
        driver.sync()
        assert not driver.is_active
        engine.start()
        driver.sync()
        assert driver.is_active
        engine.pause()
        driver.sync()
        assert not driver.is_active

    def test_timeout_polls_and_rearms(self, qapp, fake_time) -> None:
        engine = _engine(fake_time)
        driver = TickDriver(engine, 250)
        applied: list[int] = []
        driver.ticked.connect(applied.append)
        engine.start()
        driver.sync()
        fake_time.advance(250)
        driver._on_timeout()
        assert applied == [250]
        assert driver.is_active
        driver.stop()

    def test_stops_at_period_end(self, qapp, fake_time) -> None:
        engine = _engine(fake_time)
        driver = TickDriver(engine, 250)
        stopped: list[bool] = []
        driver.stopped.connect(lambda: stopped.append(True))
        engine.start()
        driver.sync()
        fake_time.advance(10 * 60_000)
        driver._on_timeout()
        assert stopped == [True]
        assert not driver.is_active
        assert engine.snapshot().ledger[0] == 8 * 60_000

    def test_late_timer_gives_one_larger_delta(self, qapp, fake_time) -> None:
        engine = _engine(fake_time)
        driver = TickDriver(engine, 250)
        applied: list[int] = []
        driver.ticked.connect(applied.append)
        engine.start()
        fake_time.advance(1_750)
        driver._on_timeout()
        assert applied == [1_750]
        driver.stop()
