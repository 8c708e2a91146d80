"""Tests for the minutes chart widget."""

from __future__ import annotations

from courttime.game.engine import GameClockEngine
from courttime.game.interfaces import GameConfig
from courttime.game.metrics import chart_minutes, compute_metrics, standings
from courttime.ui.panels.minutes_chart import MinutesChart

CONFIG = GameConfig(num_players=6, on_court=2)


def _feed(chart: MinutesChart, engine: GameClockEngine) -> None:
    snap = engine.snapshot()
    chart.set_data(standings(snap, compute_metrics(snap, CONFIG)))


class TestMinutesChart:
    def test_bars_in_roster_order(self, qapp, fake_time) -> None:
        engine = GameClockEngine(CONFIG, time_source=fake_time)
        engine.start()
        engine.tick(90_000)
        engine.table.toggle_active(0)
        engine.table.toggle_active(5)
        engine.tick(30_000)
        chart = MinutesChart()
        _feed(chart, engine)
        bars = chart.bars
        assert [name for name, _m in bars][:2] == ["Stella", "Lizzy"]
        assert [minutes for _n, minutes in bars] == [1.5, 2.0, 0.0, 0.0, 0.0, 0.5]

    def test_minutes_rounded_to_tenths(self, qapp, fake_time) -> None:
        engine = GameClockEngine(CONFIG, time_source=fake_time)
        engine.start()
        engine.tick(45_500)
        chart = MinutesChart()
        _feed(chart, engine)
        assert chart.bars[0][1] == 0.8
        assert chart.bars[0][1] == chart_minutes(45_500)

    def test_bar_at(self, qapp, fake_time) -> None:
        chart = MinutesChart()
        _feed(chart, GameClockEngine(CONFIG, time_source=fake_time))
        chart.resize(330, 200)
        assert chart.bar_at(31) == 0
        assert chart.bar_at(320) == 5
        assert chart.bar_at(10) is None
        assert chart.bar_at(326) is None

    def test_paints_with_and_without_data(self, qapp, fake_time) -> None:
        chart = MinutesChart()
        chart.resize(330, 200)
        assert not chart.grab().isNull()
        engine = GameClockEngine(CONFIG, time_source=fake_time)
        engine.start()
        engine.tick(60_000)
        _feed(chart, engine)
        assert not chart.grab().isNull()

    def test_clear(self, qapp, fake_time) -> None:
        chart = MinutesChart()
        _feed(chart, GameClockEngine(CONFIG, time_source=fake_time))
        chart.clear()
        assert chart.bars == []
        assert chart.bar_at(50) is None
