"""Tests for the timeout and overtime panel."""

from __future__ import annotations

from courttime.game.overtime import OvertimeClock
from courttime.game.timeouts import TimeoutLedger
from courttime.ui.panels.timeout_panel import TimeoutPanel


class TestTimeoutPanel:
    def test_timeouts_text(self, qapp) -> None:
        panel = TimeoutPanel()
        ledger = TimeoutLedger()
        ledger.use()
        ledger.add_overtime()
        panel.update_timeouts(ledger)
        assert panel.timeouts_text == "5 of 6 left"
        assert panel._undo_btn.isEnabled()

    def test_use_disabled_when_exhausted(self, qapp) -> None:
        panel = TimeoutPanel()
        ledger = TimeoutLedger(used=5)
        panel.update_timeouts(ledger)
        assert not panel._use_btn.isEnabled()

    def test_overtime_display(self, qapp, fake_time) -> None:
        panel = TimeoutPanel()
        clock = OvertimeClock(time_source=fake_time)
        clock.start()
        clock.tick(200_000)
        panel.update_overtime(clock)
        assert panel.overtime_text == "03:00"
        assert "#8b2020" in panel._ot_clock.styleSheet()
