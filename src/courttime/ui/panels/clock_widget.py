"""ClockPanel — period clock, game totals and fairness KPIs."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from courttime.core.timefmt import format_clock
from courttime.game.engine import EngineSnapshot
from courttime.game.metrics import FairnessReport
from courttime.ui.i18n import t
from courttime.ui.styles.theme import (
    CLOCK_DONE_STYLE,
    CLOCK_IDLE_STYLE,
    CLOCK_RUNNING_STYLE,
)


class _BigClock(QLabel):
    """Elapsed time in the current period."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setFont(QFont("Adwaita Mono", 34, QFont.Weight.Bold))
        self.setMinimumWidth(180)
        self.setSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Fixed)
        self.update_time(0, running=False, complete=False)

    def update_time(self, ms: int, *, running: bool, complete: bool) -> None:
        self.setText(format_clock(ms))
        if complete:
            self.setStyleSheet(CLOCK_DONE_STYLE)
        elif running:
            self.setStyleSheet(CLOCK_RUNNING_STYLE)
        else:
            self.setStyleSheet(CLOCK_IDLE_STYLE)


class ClockPanel(QWidget):
    """Main game clock with start/pause, next period and reset buttons."""

    toggle_clicked = pyqtSignal()
    next_period_clicked = pyqtSignal()
    reset_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._running = False
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        self._period_label = QLabel()
        self._period_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._period_label.setFont(QFont("Adwaita Sans", 12, QFont.Weight.Bold))
        layout.addWidget(self._period_label)

        self._clock = _BigClock()
        layout.addWidget(self._clock)

        grid = QGridLayout()
        grid.setSpacing(4)
        self._remaining_caption = QLabel()
        self._remaining_value = QLabel("00:00")
        self._game_caption = QLabel()
        self._game_value = QLabel("00:00")
        self._ideal_caption = QLabel()
        self._ideal_value = QLabel("00:00")
        self._goal_caption = QLabel()
        self._goal_value = QLabel("00:00")
        rows = (
            (self._remaining_caption, self._remaining_value),
            (self._game_caption, self._game_value),
            (self._ideal_caption, self._ideal_value),
            (self._goal_caption, self._goal_value),
        )
        for row, (caption, value) in enumerate(rows):
            value.setAlignment(Qt.AlignmentFlag.AlignRight)
            grid.addWidget(caption, row, 0)
            grid.addWidget(value, row, 1)
        layout.addLayout(grid)

        self._court_label = QLabel()
        self._court_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._court_label)

        buttons = QHBoxLayout()
        self._btn_toggle = QPushButton()
        self._btn_toggle.setMinimumHeight(36)
        self._btn_toggle.clicked.connect(self.toggle_clicked)
        buttons.addWidget(self._btn_toggle)

        self._btn_next = QPushButton()
        self._btn_next.setMinimumHeight(36)
        self._btn_next.clicked.connect(self.next_period_clicked)
        buttons.addWidget(self._btn_next)

        self._btn_reset = QPushButton()
        self._btn_reset.setMinimumHeight(36)
        self._btn_reset.setStyleSheet(
            "QPushButton { background-color: #6b2020; }"
            "QPushButton:hover { background-color: #8b2020; }"
        )
        self._btn_reset.clicked.connect(self.reset_clicked)
        buttons.addWidget(self._btn_reset)
        layout.addLayout(buttons)

    def retranslate_ui(self) -> None:
        s = t()
        self._remaining_caption.setText(s.clock_remaining)
        self._game_caption.setText(s.clock_game)
        self._ideal_caption.setText(s.kpi_ideal)
        self._goal_caption.setText(s.kpi_goal)
        self._btn_toggle.setText(s.btn_pause if self._running else s.btn_start)
        self._btn_next.setText(s.btn_next_period)
        self._btn_reset.setText(s.btn_reset)

    @property
    def clock_text(self) -> str:
        return self._clock.text()

    @property
    def toggle_text(self) -> str:
        return self._btn_toggle.text()

    def update_display(
        self,
        snapshot: EngineSnapshot,
        report: FairnessReport,
        labels: Sequence[str],
        on_court: int,
    ) -> None:
        s = t()
        period = snapshot.current_period
        elapsed = snapshot.ledger[period]
        complete = elapsed >= snapshot.period_length_ms
        self._running = snapshot.is_running

        self._period_label.setText(f"{s.clock_period} {labels[period]}")
        self._clock.update_time(elapsed, running=self._running, complete=complete)
        self._remaining_value.setText(
            format_clock(snapshot.period_length_ms - elapsed)
        )
        self._game_value.setText(format_clock(report.game_elapsed_ms))
        self._ideal_value.setText(format_clock(report.ideal_ms_so_far))
        self._goal_value.setText(format_clock(report.goal_per_player_full_game_ms))

        active = sum(1 for p in snapshot.players if p.active)
        text = s.kpi_on_court.format(active=active, limit=on_court)
        if active != on_court:
            text = f"{text} · {s.needs_subs}"
        self._court_label.setText(text)

        self._btn_toggle.setText(s.btn_pause if self._running else s.btn_start)
        self._btn_toggle.setEnabled(self._running or not complete)
