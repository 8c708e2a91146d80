"""Visual theme constants and QSS styles for Courttime."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class DeltaColors:
    """Colours used to flag over/under-played players."""

    under: QColor
    even: QColor
    over: QColor

    @classmethod
    def default(cls) -> DeltaColors:
        return cls(
            under=QColor(224, 108, 117),  # red, needs minutes
            even=QColor(170, 170, 170),
            over=QColor(97, 175, 239),  # blue, ahead of share
        )

    def for_delta(self, delta_ms: float) -> QColor:
        if delta_ms < 0:
            return self.under
        if delta_ms > 0:
            return self.over
        return self.even


CLOCK_IDLE_STYLE = (
    "background-color: #2b2b2b; color: #aaa; padding: 6px 12px; border-radius: 4px;"
)
CLOCK_RUNNING_STYLE = (
    "background-color: #3a7d44; color: white; padding: 6px 12px; border-radius: 4px;"
)
CLOCK_DONE_STYLE = (
    "background-color: #8b2020; color: white; padding: 6px 12px; border-radius: 4px;"
)

APP_STYLE = """
QMainWindow, QWidget {
    background: #1c1f22;
    color: #e0e0e0;
}

QLabel {
    color: #e0e0e0;
}

QTableWidget {
    background: #23272b;
    alternate-background-color: #2b2b2b;
    gridline-color: #3a3f44;
    selection-background-color: #2e6b4f;
}
QHeaderView::section {
    background: #2b2b2b;
    color: #e0e0e0;
    border: none;
    padding: 4px;
}

QSpinBox, QComboBox, QLineEdit {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 3px 6px;
}

QPushButton {
    background: #3a3f44;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #4b5157;
}
QPushButton:pressed {
    background: #2e6b4f;
}
QPushButton:disabled {
    color: #666;
    background: #2b2b2b;
}

QProgressBar {
    background: #2b2b2b;
    border: none;
    border-radius: 3px;
    max-height: 8px;
}
QProgressBar::chunk {
    background: #3d7bd9;
    border-radius: 3px;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3a3f44;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3a3f44;
}
QMenu::item:selected {
    background: #2e6b4f;
}
"""
