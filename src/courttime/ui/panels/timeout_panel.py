"""TimeoutPanel — team timeouts and the standalone overtime clock."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from courttime.core.timefmt import format_clock
from courttime.game.overtime import OvertimeClock
from courttime.game.timeouts import TimeoutLedger
from courttime.ui.i18n import t
from courttime.ui.styles.theme import (
    CLOCK_DONE_STYLE,
    CLOCK_IDLE_STYLE,
    CLOCK_RUNNING_STYLE,
)


class TimeoutPanel(QWidget):
    use_clicked = pyqtSignal()
    undo_clicked = pyqtSignal()
    add_overtime_clicked = pyqtSignal()
    ot_toggle_clicked = pyqtSignal()
    ot_reset_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._ot_running = False
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        self._timeouts_title = QLabel()
        self._timeouts_title.setFont(QFont("Adwaita Sans", 11, QFont.Weight.Bold))
        layout.addWidget(self._timeouts_title)

        self._timeouts_label = QLabel()
        layout.addWidget(self._timeouts_label)

        row = QHBoxLayout()
        self._use_btn = QPushButton()
        self._use_btn.clicked.connect(self.use_clicked)
        self._undo_btn = QPushButton()
        self._undo_btn.clicked.connect(self.undo_clicked)
        self._add_ot_btn = QPushButton()
        self._add_ot_btn.clicked.connect(self.add_overtime_clicked)
        for btn in (self._use_btn, self._undo_btn, self._add_ot_btn):
            row.addWidget(btn)
        layout.addLayout(row)

        self._ot_title = QLabel()
        self._ot_title.setFont(QFont("Adwaita Sans", 11, QFont.Weight.Bold))
        layout.addWidget(self._ot_title)

        self._ot_count_label = QLabel()
        layout.addWidget(self._ot_count_label)

        self._ot_clock = QLabel("00:00")
        self._ot_clock.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._ot_clock.setFont(QFont("Adwaita Mono", 20, QFont.Weight.Bold))
        self._ot_clock.setStyleSheet(CLOCK_IDLE_STYLE)
        layout.addWidget(self._ot_clock)

        ot_row = QHBoxLayout()
        self._ot_toggle_btn = QPushButton()
        self._ot_toggle_btn.clicked.connect(self.ot_toggle_clicked)
        self._ot_reset_btn = QPushButton()
        self._ot_reset_btn.clicked.connect(self.ot_reset_clicked)
        ot_row.addWidget(self._ot_toggle_btn)
        ot_row.addWidget(self._ot_reset_btn)
        layout.addLayout(ot_row)
        layout.addStretch()

    def retranslate_ui(self) -> None:
        s = t()
        self._timeouts_title.setText(s.timeouts_title)
        self._use_btn.setText(s.btn_use_timeout)
        self._undo_btn.setText(s.btn_undo_timeout)
        self._add_ot_btn.setText(s.btn_add_overtime)
        self._ot_title.setText(s.overtime_title)
        self._ot_toggle_btn.setText(s.btn_pause if self._ot_running else s.btn_start)
        self._ot_reset_btn.setText(s.btn_reset)

    @property
    def timeouts_text(self) -> str:
        return self._timeouts_label.text()

    @property
    def overtime_text(self) -> str:
        return self._ot_clock.text()

    def update_timeouts(self, timeouts: TimeoutLedger) -> None:
        s = t()
        self._timeouts_label.setText(
            s.timeouts_left.format(remaining=timeouts.remaining, cap=timeouts.cap)
        )
        self._ot_count_label.setText(s.overtime_count.format(count=timeouts.overtimes))
        self._use_btn.setEnabled(timeouts.remaining > 0)
        self._undo_btn.setEnabled(timeouts.used > 0)

    def update_overtime(self, overtime: OvertimeClock) -> None:
        s = t()
        self._ot_running = overtime.is_running
        self._ot_clock.setText(format_clock(overtime.elapsed_ms))
        if overtime.is_expired:
            self._ot_clock.setStyleSheet(CLOCK_DONE_STYLE)
        elif self._ot_running:
            self._ot_clock.setStyleSheet(CLOCK_RUNNING_STYLE)
        else:
            self._ot_clock.setStyleSheet(CLOCK_IDLE_STYLE)
        self._ot_toggle_btn.setText(s.btn_pause if self._ot_running else s.btn_start)
