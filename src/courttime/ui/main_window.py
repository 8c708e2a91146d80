"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QActionGroup, QCloseEvent
from PyQt6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from courttime.core.enums import Baseline, PeriodFormat, PeriodView
from courttime.core.limits import GAME_TICK_INTERVAL_MS, OVERTIME_TICK_INTERVAL_MS
from courttime.export.csv_export import DEFAULT_FILE_NAME, write_csv
from courttime.game.metrics import compute_metrics, displayed_periods, standings
from courttime.game.session import GameSession
from courttime.storage.roster_library import RosterLibrary
from courttime.storage.state_store import StateStore
from courttime.ui.i18n import LANGUAGES, set_language, t
from courttime.ui.panels.clock_widget import ClockPanel
from courttime.ui.panels.config_panel import ConfigPanel
from courttime.ui.panels.minutes_chart import MinutesChart
from courttime.ui.panels.player_table import PlayerTable
from courttime.ui.panels.timeout_panel import TimeoutPanel
from courttime.ui.settings import CAPACITY_NOTICE_MS, AppSettings
from courttime.ui.tick_driver import TickDriver

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for Courttime."""

    def __init__(
        self,
        session: GameSession | None = None,
        *,
        state_store: StateStore | None = None,
        roster_library: RosterLibrary | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self.setMinimumSize(960, 600)
        self.resize(1200, 760)

        self._settings = settings or AppSettings()
        set_language(self._settings.language)
        self._session = session or GameSession(
            capacity_policy=self._settings.capacity_policy
        )
        self._state_store = state_store
        self._roster_library = roster_library

        if self._state_store is not None:
            self._session.restore(self._state_store.load())
            self._session.events.on_snapshot.append(self._state_store.save)

        self._game_driver = TickDriver(
            self._session.engine, GAME_TICK_INTERVAL_MS, self
        )
        self._ot_driver = TickDriver(
            self._session.overtime, OVERTIME_TICK_INTERVAL_MS, self
        )

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_session_events()

        self._sync_config_panel()
        self._refresh_rosters()
        self._refresh_all()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._config_panel = ConfigPanel()
        self._config_panel.setFixedWidth(300)
        root.addWidget(self._config_panel)

        center = QVBoxLayout()
        center.setSpacing(6)
        self._player_table = PlayerTable()
        center.addWidget(self._player_table, stretch=1)
        self._minutes_chart = MinutesChart()
        center.addWidget(self._minutes_chart)
        root.addLayout(center, stretch=3)

        right = QVBoxLayout()
        right.setSpacing(6)
        self._clock_panel = ClockPanel()
        right.addWidget(self._clock_panel)
        self._timeout_panel = TimeoutPanel()
        right.addWidget(self._timeout_panel, stretch=1)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(300)
        root.addWidget(right_widget)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel(t().status_ready)
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        s = t()

        self._menu_game = menu_bar.addMenu(s.menu_game)
        assert self._menu_game is not None

        self._act_export = QAction(s.menu_export_csv, self)
        self._act_export.setShortcut("Ctrl+E")
        self._act_export.triggered.connect(self._on_export_csv)
        self._menu_game.addAction(self._act_export)

        self._menu_game.addSeparator()

        self._act_quit = QAction(s.menu_quit, self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

        self._menu_language = menu_bar.addMenu(s.menu_language)
        assert self._menu_language is not None
        group = QActionGroup(self)
        for language in LANGUAGES:
            act = QAction(language, self, checkable=True)
            act.setChecked(language == self._settings.language)
            act.triggered.connect(partial(self._on_language, language))
            group.addAction(act)
            self._menu_language.addAction(act)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        clock = self._clock_panel
        clock.toggle_clicked.connect(self._on_toggle_clock)
        clock.next_period_clicked.connect(self._on_next_period)
        clock.reset_clicked.connect(self._on_reset)

        cfg = self._config_panel
        cfg.num_players_changed.connect(self._on_num_players)
        cfg.on_court_changed.connect(self._on_on_court)
        cfg.format_changed.connect(self._on_format)
        cfg.period_minutes_changed.connect(self._on_period_minutes)
        cfg.baseline_changed.connect(self._on_baseline)
        cfg.view_changed.connect(self._on_view)
        cfg.roster_name_edited.connect(self._session.set_roster_name)
        cfg.save_roster_clicked.connect(self._on_save_roster)
        cfg.load_roster_requested.connect(self._on_load_roster)
        cfg.delete_roster_requested.connect(self._on_delete_roster)
        cfg.auto_fill_clicked.connect(self._on_auto_fill)

        # Queued: both slots rebuild the table that emitted the signal.
        table = self._player_table
        queued = Qt.ConnectionType.QueuedConnection
        table.toggle_requested.connect(self._on_toggle_player, queued)
        table.rename_requested.connect(self._on_rename_player, queued)

        tp = self._timeout_panel
        tp.use_clicked.connect(self._on_use_timeout)
        tp.undo_clicked.connect(self._on_undo_timeout)
        tp.add_overtime_clicked.connect(self._on_add_overtime)
        tp.ot_toggle_clicked.connect(self._on_ot_toggle)
        tp.ot_reset_clicked.connect(self._on_ot_reset)

        self._game_driver.ticked.connect(lambda _applied: self._refresh_game())
        self._game_driver.stopped.connect(self._refresh_game)
        self._ot_driver.ticked.connect(lambda _applied: self._refresh_overtime())

    def _connect_session_events(self) -> None:
        events = self._session.events
        events.on_capacity_notice.append(self._on_capacity_notice)
        events.on_roster_changed.append(self._refresh_game)
        self._session.engine.events.on_period_complete.append(self._on_period_complete)

    # ── Refresh ──────────────────────────────────────────────────────────

    def _refresh_all(self) -> None:
        self.setWindowTitle(f"{t().window_title} - {self._session.roster_name}")
        self._config_panel.set_display_options(
            self._settings.baseline, self._settings.period_view
        )
        self._config_panel.set_roster_name(self._session.roster_name)
        self._refresh_game()
        self._refresh_timeouts()
        self._refresh_overtime()

    def _refresh_game(self) -> None:
        session = self._session
        baseline = self._settings.baseline
        config = session.config
        snapshot = session.state()
        report = compute_metrics(snapshot, config, baseline)
        labels = session.period_labels
        self._clock_panel.update_display(snapshot, report, labels, config.on_court)
        rows = standings(snapshot, report)
        self._player_table.refresh(
            rows,
            displayed_periods(snapshot, self._settings.period_view),
            labels,
            baseline,
        )
        self._minutes_chart.set_data(rows)

    def _refresh_timeouts(self) -> None:
        self._timeout_panel.update_timeouts(self._session.timeouts)

    def _refresh_overtime(self) -> None:
        self._timeout_panel.update_overtime(self._session.overtime)

    def _sync_config_panel(self) -> None:
        self._config_panel.set_config(self._session.config)

    def _refresh_rosters(self, current: str | None = None) -> None:
        names = self._roster_library.names() if self._roster_library else []
        self._config_panel.set_saved_rosters(names, current)

    def _show_status(self, text: str, timeout_ms: int = 0) -> None:
        if timeout_ms:
            self._status.showMessage(text, timeout_ms)
        else:
            self._status_label.setText(text)

    # ── Clock slots ──────────────────────────────────────────────────────

    def _on_toggle_clock(self) -> None:
        self._session.toggle_clock()
        self._game_driver.sync()
        self._refresh_game()

    def _on_next_period(self) -> None:
        self._session.next_period()
        self._game_driver.sync()
        self._refresh_game()

    def _on_reset(self) -> None:
        self._session.reset_all()
        self._game_driver.sync()
        self._ot_driver.sync()
        self._refresh_all()

    def _on_period_complete(self, index: int) -> None:
        label = self._session.period_labels[index]
        self._show_status(t().status_period_complete.format(label=label))

    # ── Config slots ─────────────────────────────────────────────────────

    def _apply_config(self) -> None:
        self._sync_config_panel()
        self._game_driver.sync()
        self._refresh_game()

    def _on_num_players(self, value: int) -> None:
        self._session.set_num_players(value)
        self._apply_config()

    def _on_on_court(self, value: int) -> None:
        self._session.set_on_court(value)
        self._apply_config()

    def _on_format(self, value: PeriodFormat) -> None:
        self._session.set_format(value)
        self._apply_config()

    def _on_period_minutes(self, value: int) -> None:
        self._session.set_period_minutes(value)
        self._apply_config()

    def _on_baseline(self, value: Baseline) -> None:
        self._settings.baseline = value
        self._refresh_game()

    def _on_view(self, value: PeriodView) -> None:
        self._settings.period_view = value
        self._refresh_game()

    # ── Roster slots ─────────────────────────────────────────────────────

    def _on_toggle_player(self, index: int) -> None:
        self._session.toggle_active(index)
        self._refresh_game()

    def _on_rename_player(self, index: int, name: str) -> None:
        self._session.rename_player(index, name)

    def _on_capacity_notice(self, limit: int) -> None:
        self._show_status(t().capacity_notice.format(limit=limit), CAPACITY_NOTICE_MS)

    def _on_auto_fill(self) -> None:
        self._session.auto_fill()

    def _on_save_roster(self) -> None:
        if self._roster_library is None:
            return
        key = self._roster_library.save(
            self._config_panel.roster_name(), self._session.roster_entry()
        )
        self._session.set_roster_name(key)
        self._refresh_rosters(key)
        self._refresh_all()
        self._show_status(t().status_roster_saved.format(name=key))

    def _on_load_roster(self, name: str) -> None:
        if self._roster_library is None:
            return
        entry = self._roster_library.get(name)
        if entry is None:
            return
        self._session.load_roster(name, entry)
        self._game_driver.sync()
        self._sync_config_panel()
        self._refresh_all()
        self._show_status(t().status_roster_loaded.format(name=name))

    def _on_delete_roster(self, name: str) -> None:
        if self._roster_library is None:
            return
        self._roster_library.delete(name)
        self._refresh_rosters()

    # ── Timeout slots ────────────────────────────────────────────────────

    def _on_use_timeout(self) -> None:
        self._session.use_timeout()
        self._refresh_timeouts()

    def _on_undo_timeout(self) -> None:
        self._session.undo_timeout()
        self._refresh_timeouts()

    def _on_add_overtime(self) -> None:
        self._session.add_overtime()
        self._refresh_timeouts()

    def _on_ot_toggle(self) -> None:
        self._session.toggle_overtime()
        self._ot_driver.sync()
        self._refresh_overtime()

    def _on_ot_reset(self) -> None:
        self._session.reset_overtime()
        self._ot_driver.sync()
        self._refresh_overtime()

    # ── Export / language ────────────────────────────────────────────────

    def export_csv(self, path: Path) -> Path:
        """Write the playing-time CSV for the current table to *path*."""
        snapshot = self._session.state()
        return write_csv(path, snapshot.players, self._session.period_labels)

    def _on_export_csv(self) -> None:
        s = t()
        path, _ = QFileDialog.getSaveFileName(
            self, s.export_title, DEFAULT_FILE_NAME, s.csv_filter
        )
        if not path:
            return
        try:
            written = self.export_csv(Path(path))
        except OSError as exc:
            _LOGGER.warning("CSV export failed: %s", exc)
            self._show_status(s.status_export_failed.format(msg=exc))
            return
        self._show_status(s.status_exported.format(name=written.name))

    def _on_language(self, language: str) -> None:
        self._settings.language = language
        set_language(language)
        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self._menu_game.setTitle(s.menu_game)
        self._act_export.setText(s.menu_export_csv)
        self._act_quit.setText(s.menu_quit)
        self._menu_language.setTitle(s.menu_language)
        self._status_label.setText(s.status_ready)
        for panel in (
            self._config_panel,
            self._player_table,
            self._clock_panel,
            self._timeout_panel,
        ):
            panel.retranslate_ui()
        self._refresh_all()

    # ── Lifecycle ────────────────────────────────────────────────────────

    def closeEvent(self, event: QCloseEvent | None) -> None:  # noqa: N802
        self._game_driver.stop()
        self._ot_driver.stop()
        self._session.pause()
        self._session.pause_overtime()
        super().closeEvent(event)
