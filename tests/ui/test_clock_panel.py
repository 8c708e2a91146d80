"""Tests for the clock panel display."""

from __future__ import annotations

from courttime.game.engine import GameClockEngine
from courttime.game.interfaces import GameConfig
from courttime.game.metrics import compute_metrics
from courttime.ui.i18n import set_language, t
from courttime.ui.panels.clock_widget import ClockPanel

CONFIG = GameConfig(num_players=10, on_court=5)
LABELS = ["Q1", "Q2", "Q3", "Q4"]


def _show(panel: ClockPanel, engine: GameClockEngine) -> None:
    snap = engine.snapshot()
    panel.update_display(snap, compute_metrics(snap, CONFIG), LABELS, CONFIG.on_court)


class TestClockPanel:
    def test_shows_elapsed_period_time(self, qapp, fake_time) -> None:
        engine = GameClockEngine(CONFIG, time_source=fake_time)
        panel = ClockPanel()
        engine.start()
        engine.tick(95_400)
        _show(panel, engine)
        assert panel.clock_text == "01:35"
        assert panel.toggle_text == t().btn_pause

    def test_toggle_disabled_when_period_complete(self, qapp, fake_time) -> None:
        engine = GameClockEngine(CONFIG, time_source=fake_time)
        panel = ClockPanel()
        engine.start()
        engine.tick(8 * 60_000)
        _show(panel, engine)
        assert panel.clock_text == "08:00"
        assert panel.toggle_text == t().btn_start
        assert not panel._btn_toggle.isEnabled()
        assert "#8b2020" in panel._clock.styleSheet()

    def test_needs_subs_hint(self, qapp, fake_time) -> None:
        engine = GameClockEngine(CONFIG, time_source=fake_time)
        engine.table.toggle_active(0)
        panel = ClockPanel()
        _show(panel, engine)
        assert t().needs_subs in panel._court_label.text()

    def test_retranslate(self, qapp) -> None:
        panel = ClockPanel()
        set_language("Russian")
        panel.retranslate_ui()
        assert panel.toggle_text == t().btn_start
        assert panel.toggle_text != "Start"
