"""MinutesChart — bar chart of total minutes played per player."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import (
    QBrush,
    QColor,
    QFont,
    QMouseEvent,
    QPainter,
    QPaintEvent,
    QPen,
)
from PyQt6.QtWidgets import QSizePolicy, QToolTip, QWidget

from courttime.game.metrics import PlayerStanding
from courttime.ui.i18n import t


class MinutesChart(QWidget):
    """Vertical bars, one per player in roster order, scaled to the leader."""

    _BG = QColor(35, 39, 43)
    _GRID_LINE = QColor(58, 63, 68)
    _BAR = QColor(46, 107, 79)
    _BAR_ACTIVE = QColor(82, 160, 118)
    _TEXT = QColor(170, 170, 170)
    _MARGIN_LEFT = 30
    _MARGIN_RIGHT = 8
    _MARGIN_TOP = 22
    _MARGIN_BOTTOM = 36
    _MIN_SCALE = 1.0  # minutes

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._bars: list[tuple[str, float, bool]] = []  # name, minutes, on court
        self.setMinimumHeight(160)
        self.setMaximumHeight(240)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.setMouseTracking(True)

    # ── Public API ───────────────────────────────────────────────────────

    def set_data(self, rows: Sequence[PlayerStanding]) -> None:
        ordered = sorted(rows, key=lambda r: r.index)
        self._bars = [(r.name, r.minutes, r.active) for r in ordered]
        self.update()

    def clear(self) -> None:
        self._bars.clear()
        self.update()

    @property
    def bars(self) -> list[tuple[str, float]]:
        return [(name, minutes) for name, minutes, _active in self._bars]

    def bar_at(self, x: float) -> int | None:
        """Index of the bar under horizontal position *x*, if any."""
        rect = self._chart_rect()
        if not self._bars or rect.width() <= 0:
            return None
        slot = rect.width() / len(self._bars)
        index = int((x - rect.left()) // slot)
        if 0 <= index < len(self._bars):
            return index
        return None

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _chart_rect(self) -> QRectF:
        return QRectF(
            self._MARGIN_LEFT,
            self._MARGIN_TOP,
            self.width() - self._MARGIN_LEFT - self._MARGIN_RIGHT,
            self.height() - self._MARGIN_TOP - self._MARGIN_BOTTOM,
        )

    def _scale(self) -> float:
        peak = max((minutes for _n, minutes, _a in self._bars), default=0.0)
        return max(self._MIN_SCALE, peak)

    # ── Painting ─────────────────────────────────────────────────────────

    def paintEvent(self, event: QPaintEvent | None) -> None:  # noqa: N802
        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)
        p.fillRect(0, 0, self.width(), self.height(), self._BG)

        p.setFont(QFont("Adwaita Sans", 9, QFont.Weight.Bold))
        p.setPen(self._TEXT)
        p.drawText(
            QRectF(self._MARGIN_LEFT, 2, self.width(), self._MARGIN_TOP - 4),
            Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter,
            t().chart_title,
        )

        rect = self._chart_rect()
        if not self._bars or rect.height() <= 0:
            p.end()
            return

        scale = self._scale()
        small = QFont("Adwaita Sans", 7)
        p.setFont(small)

        # Grid lines at quarter steps of the scale
        for step in range(5):
            value = scale * step / 4
            gy = rect.bottom() - rect.height() * step / 4
            p.setPen(QPen(self._GRID_LINE, 0.5, Qt.PenStyle.DotLine))
            p.drawLine(QPointF(rect.left(), gy), QPointF(rect.right(), gy))
            p.setPen(self._TEXT)
            p.drawText(
                QRectF(0, gy - 6, self._MARGIN_LEFT - 4, 12),
                Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter,
                f"{value:.0f}" if scale >= 4 else f"{value:.1f}",
            )

        slot = rect.width() / len(self._bars)
        bar_width = max(2.0, slot * 0.7)
        for i, (name, minutes, active) in enumerate(self._bars):
            height = rect.height() * minutes / scale
            left = rect.left() + slot * i + (slot - bar_width) / 2
            p.setPen(Qt.PenStyle.NoPen)
            p.setBrush(QBrush(self._BAR_ACTIVE if active else self._BAR))
            p.drawRect(QRectF(left, rect.bottom() - height, bar_width, height))

            p.setPen(self._TEXT)
            p.drawText(
                QRectF(rect.left() + slot * i, rect.bottom() + 2, slot, 14),
                Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop,
                p.fontMetrics().elidedText(
                    name, Qt.TextElideMode.ElideRight, int(slot)
                ),
            )

        p.end()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mouseMoveEvent(self, event: QMouseEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        index = self.bar_at(event.position().x())
        if index is None:
            QToolTip.hideText()
            return
        name, minutes, _active = self._bars[index]
        QToolTip.showText(
            event.globalPosition().toPoint(),
            t().chart_tooltip.format(name=name, minutes=minutes),
            self,
        )
