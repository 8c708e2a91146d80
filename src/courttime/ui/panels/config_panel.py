"""ConfigPanel — game configuration, display options and the roster library."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QComboBox,
    QFormLayout,
    QHBoxLayout,
    QLineEdit,
    QPushButton,
    QSpinBox,
    QWidget,
)

from courttime.core.enums import Baseline, PeriodFormat, PeriodView
from courttime.core.limits import (
    MAX_PERIOD_MINUTES,
    MAX_PLAYERS,
    MIN_PERIOD_MINUTES,
    MIN_PLAYERS,
)
from courttime.game.interfaces import GameConfig
from courttime.ui.i18n import t


def _select_data(combo: QComboBox, value: object) -> None:
    idx = combo.findData(value)
    if idx >= 0:
        combo.setCurrentIndex(idx)


class ConfigPanel(QWidget):
    """Inputs for roster size, format and period length, plus roster storage."""

    num_players_changed = pyqtSignal(int)
    on_court_changed = pyqtSignal(int)
    format_changed = pyqtSignal(object)  # PeriodFormat
    period_minutes_changed = pyqtSignal(int)
    baseline_changed = pyqtSignal(object)  # Baseline
    view_changed = pyqtSignal(object)  # PeriodView
    roster_name_edited = pyqtSignal(str)
    save_roster_clicked = pyqtSignal()
    load_roster_requested = pyqtSignal(str)
    delete_roster_requested = pyqtSignal(str)
    auto_fill_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        self._form = QFormLayout(self)
        self._form.setSpacing(8)
        self._form.setContentsMargins(4, 4, 4, 4)

        self._players_spin = QSpinBox()
        self._players_spin.setRange(MIN_PLAYERS, MAX_PLAYERS)
        self._players_spin.valueChanged.connect(self.num_players_changed)
        self._form.addRow("", self._players_spin)

        self._on_court_spin = QSpinBox()
        self._on_court_spin.setRange(1, MAX_PLAYERS)
        self._on_court_spin.valueChanged.connect(self.on_court_changed)
        self._form.addRow("", self._on_court_spin)

        self._format_combo = QComboBox()
        for fmt in PeriodFormat:
            self._format_combo.addItem(fmt.value, fmt)
        self._format_combo.currentIndexChanged.connect(
            lambda _i: self.format_changed.emit(self._format_combo.currentData())
        )
        self._form.addRow("", self._format_combo)

        self._minutes_spin = QSpinBox()
        self._minutes_spin.setRange(MIN_PERIOD_MINUTES, MAX_PERIOD_MINUTES)
        self._minutes_spin.setSuffix(" min")
        self._minutes_spin.valueChanged.connect(self.period_minutes_changed)
        self._form.addRow("", self._minutes_spin)

        self._baseline_combo = QComboBox()
        for baseline in Baseline:
            self._baseline_combo.addItem(baseline.value, baseline)
        self._baseline_combo.currentIndexChanged.connect(
            lambda _i: self.baseline_changed.emit(self._baseline_combo.currentData())
        )
        self._form.addRow("", self._baseline_combo)

        self._view_combo = QComboBox()
        for view in PeriodView:
            self._view_combo.addItem(view.value, view)
        self._view_combo.currentIndexChanged.connect(
            lambda _i: self.view_changed.emit(self._view_combo.currentData())
        )
        self._form.addRow("", self._view_combo)

        self._auto_fill_btn = QPushButton()
        self._auto_fill_btn.clicked.connect(self.auto_fill_clicked)
        self._form.addRow(self._auto_fill_btn)

        self._roster_name_edit = QLineEdit()
        self._roster_name_edit.editingFinished.connect(
            lambda: self.roster_name_edited.emit(self._roster_name_edit.text())
        )
        self._form.addRow("", self._roster_name_edit)

        self._rosters_combo = QComboBox()
        self._form.addRow("", self._rosters_combo)

        row = QWidget()
        buttons = QHBoxLayout(row)
        buttons.setContentsMargins(0, 0, 0, 0)
        self._save_btn = QPushButton()
        self._save_btn.clicked.connect(self.save_roster_clicked)
        self._load_btn = QPushButton()
        self._load_btn.clicked.connect(
            lambda: self._emit_selected(self.load_roster_requested)
        )
        self._delete_btn = QPushButton()
        self._delete_btn.clicked.connect(
            lambda: self._emit_selected(self.delete_roster_requested)
        )
        for btn in (self._save_btn, self._load_btn, self._delete_btn):
            buttons.addWidget(btn)
        self._form.addRow(row)

    def retranslate_ui(self) -> None:
        s = t()
        labels = (
            (self._players_spin, s.cfg_players),
            (self._on_court_spin, s.cfg_on_court),
            (self._format_combo, s.cfg_format),
            (self._minutes_spin, s.cfg_period_minutes),
            (self._baseline_combo, s.cfg_baseline),
            (self._view_combo, s.cfg_view),
            (self._roster_name_edit, s.cfg_roster_name),
            (self._rosters_combo, s.cfg_saved_rosters),
        )
        for field, text in labels:
            label = self._form.labelForField(field)
            if label is not None:
                label.setText(text)  # type: ignore[attr-defined]

        names = {
            PeriodFormat.QUARTERS: s.format_quarters,
            PeriodFormat.HALVES: s.format_halves,
            Baseline.GOAL: s.baseline_goal,
            Baseline.IDEAL: s.baseline_ideal,
            PeriodView.CURRENT: s.view_current,
            PeriodView.COMPLETED: s.view_completed,
        }
        for combo in (self._format_combo, self._baseline_combo, self._view_combo):
            for i in range(combo.count()):
                combo.setItemText(i, names[combo.itemData(i)])

        self._auto_fill_btn.setText(s.btn_auto_fill)
        self._save_btn.setText(s.btn_save_roster)
        self._load_btn.setText(s.btn_load_roster)
        self._delete_btn.setText(s.btn_delete_roster)

    # ── Setters (no signals) ─────────────────────────────────────────────

    def set_config(self, config: GameConfig) -> None:
        widgets = (
            self._players_spin,
            self._on_court_spin,
            self._format_combo,
            self._minutes_spin,
        )
        for w in widgets:
            w.blockSignals(True)
        try:
            self._players_spin.setValue(config.num_players)
            self._on_court_spin.setMaximum(config.num_players)
            self._on_court_spin.setValue(config.on_court)
            _select_data(self._format_combo, config.format)
            self._minutes_spin.setValue(config.period_minutes)
        finally:
            for w in widgets:
                w.blockSignals(False)

    def set_display_options(self, baseline: Baseline, view: PeriodView) -> None:
        pairs = ((self._baseline_combo, baseline), (self._view_combo, view))
        for combo, value in pairs:
            combo.blockSignals(True)
            _select_data(combo, value)
            combo.blockSignals(False)

    def set_roster_name(self, name: str) -> None:
        self._roster_name_edit.setText(name)

    def roster_name(self) -> str:
        return self._roster_name_edit.text()

    def set_saved_rosters(
        self, names: Sequence[str], current: str | None = None
    ) -> None:
        self._rosters_combo.clear()
        self._rosters_combo.addItems(list(names))
        if current is not None:
            idx = self._rosters_combo.findText(current)
            if idx >= 0:
                self._rosters_combo.setCurrentIndex(idx)
        has_any = bool(names)
        self._load_btn.setEnabled(has_any)
        self._delete_btn.setEnabled(has_any)

    def _emit_selected(self, signal: pyqtSignal) -> None:
        name = self._rosters_combo.currentText()
        if name:
            signal.emit(name)  # type: ignore[attr-defined]
