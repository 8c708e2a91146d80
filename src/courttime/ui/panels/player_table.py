"""PlayerTable — per-player playing time, sorted on-court first."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QHeaderView,
    QProgressBar,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from courttime.core.enums import Baseline
from courttime.core.timefmt import format_clock, format_signed_delta
from courttime.game.metrics import PlayerStanding
from courttime.ui.i18n import t
from courttime.ui.styles.theme import DeltaColors

_COL_ON, _COL_NAME, _COL_TOTAL, _COL_DELTA, _COL_PROGRESS = range(5)
_FIXED_COLUMNS = 5
_INDEX_ROLE = Qt.ItemDataRole.UserRole


class PlayerTable(QWidget):
    """Table of players with an on-court checkbox and editable names.

    Row order follows the standings passed to :meth:`refresh`; each row
    remembers its roster index so edits map back to the right player.
    """

    toggle_requested = pyqtSignal(int)  # roster index
    rename_requested = pyqtSignal(int, str)  # roster index, new name

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._colors = DeltaColors.default()
        self._baseline = Baseline.GOAL
        self._period_labels: list[str] = []
        self._populating = False

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self._table = QTableWidget(0, _FIXED_COLUMNS)
        self._table.setAlternatingRowColors(True)
        self._table.verticalHeader().setVisible(False)
        self._table.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self._table.setEditTriggers(
            QAbstractItemView.EditTrigger.DoubleClicked
            | QAbstractItemView.EditTrigger.EditKeyPressed
        )
        header = self._table.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.ResizeMode.ResizeToContents)
        header.setSectionResizeMode(_COL_NAME, QHeaderView.ResizeMode.Stretch)
        self._table.itemChanged.connect(self._on_item_changed)
        layout.addWidget(self._table)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        if self._baseline is Baseline.GOAL:
            delta = s.col_delta_goal
        else:
            delta = s.col_delta_ideal
        self._table.setHorizontalHeaderLabels(
            [s.col_on_court, s.col_player, s.col_total, delta, s.col_progress]
            + self._period_labels
        )

    @property
    def row_count(self) -> int:
        return self._table.rowCount()

    def row_index(self, row: int) -> int:
        """Roster index of the player shown in *row*."""
        item = self._table.item(row, _COL_NAME)
        assert item is not None
        return int(item.data(_INDEX_ROLE))

    def cell_text(self, row: int, column: int) -> str:
        item = self._table.item(row, column)
        return item.text() if item is not None else ""

    def is_editing(self) -> bool:
        return self._table.state() == QAbstractItemView.State.EditingState

    def refresh(
        self,
        rows: Sequence[PlayerStanding],
        period_columns: Sequence[int],
        labels: Sequence[str],
        baseline: Baseline,
    ) -> None:
        """Rebuild the table. Skipped while a name is being edited."""
        if self.is_editing():
            return
        self._baseline = baseline
        self._period_labels = [labels[i] for i in period_columns]

        self._populating = True
        try:
            self._table.setColumnCount(_FIXED_COLUMNS + len(period_columns))
            self._table.setRowCount(len(rows))
            self.retranslate_ui()
            for r, standing in enumerate(rows):
                self._fill_row(r, standing, period_columns)
        finally:
            self._populating = False

    def _fill_row(
        self, row: int, standing: PlayerStanding, period_columns: Sequence[int]
    ) -> None:
        on = QTableWidgetItem()
        on.setFlags(Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsUserCheckable)
        on.setCheckState(
            Qt.CheckState.Checked if standing.active else Qt.CheckState.Unchecked
        )
        on.setData(_INDEX_ROLE, standing.index)
        self._table.setItem(row, _COL_ON, on)

        name = QTableWidgetItem(standing.name)
        name.setFlags(Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsEditable)
        name.setData(_INDEX_ROLE, standing.index)
        self._table.setItem(row, _COL_NAME, name)

        self._table.setItem(row, _COL_TOTAL, _readonly(format_clock(standing.total_ms)))

        delta = _readonly(format_signed_delta(standing.delta_ms))
        delta.setForeground(self._colors.for_delta(standing.delta_ms))
        self._table.setItem(row, _COL_DELTA, delta)

        bar = QProgressBar()
        bar.setRange(0, 100)
        bar.setTextVisible(False)
        bar.setValue(round(standing.progress * 100))
        self._table.setCellWidget(row, _COL_PROGRESS, bar)

        for offset, period in enumerate(period_columns):
            self._table.setItem(
                row,
                _FIXED_COLUMNS + offset,
                _readonly(format_clock(standing.period_ms[period])),
            )

    def _on_item_changed(self, item: QTableWidgetItem) -> None:
        if self._populating:
            return
        index = item.data(_INDEX_ROLE)
        if index is None:
            return
        if item.column() == _COL_ON:
            self.toggle_requested.emit(int(index))
        elif item.column() == _COL_NAME:
            self.rename_requested.emit(int(index), item.text())


def _readonly(text: str) -> QTableWidgetItem:
    item = QTableWidgetItem(text)
    item.setFlags(Qt.ItemFlag.ItemIsEnabled)
    item.setTextAlignment(
        Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
    )
    return item
