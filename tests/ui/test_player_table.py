"""Tests for the player table widget."""

from __future__ import annotations

from PyQt6.QtCore import Qt

from courttime.core.enums import Baseline
from courttime.game.engine import GameClockEngine
from courttime.game.interfaces import GameConfig
from courttime.game.metrics import compute_metrics, standings
from courttime.ui.panels.player_table import PlayerTable

CONFIG = GameConfig(num_players=6, on_court=2)
LABELS = ["Q1", "Q2", "Q3", "Q4"]


def _refresh(table: PlayerTable, engine: GameClockEngine, periods: list[int]) -> None:
    snap = engine.snapshot()
    rows = standings(snap, compute_metrics(snap, CONFIG))
    table.refresh(rows, periods, LABELS, Baseline.GOAL)


class TestPlayerTable:
    def test_rows_follow_standings(self, qapp, fake_time) -> None:
        engine = GameClockEngine(CONFIG, time_source=fake_time)
        engine.start()
        engine.tick(30_000)
        engine.table.toggle_active(0)
        engine.table.toggle_active(5)
        table = PlayerTable()
        _refresh(table, engine, [0])
        assert table.row_count == 6
        assert [table.row_index(r) for r in range(6)] == [1, 5, 0, 2, 3, 4]
        assert table.cell_text(0, 1) == "Lizzy"
        assert table.cell_text(0, 2) == "00:30"
        assert table.cell_text(0, 3).startswith("-")

    def test_period_columns(self, qapp, fake_time) -> None:
        engine = GameClockEngine(CONFIG, time_source=fake_time)
        table = PlayerTable()
        _refresh(table, engine, [0, 1])
        header = table._table.horizontalHeaderItem(5)
        assert header is not None and header.text() == "Q1"
        assert table._table.columnCount() == 7

    def test_refresh_does_not_emit(self, qapp, fake_time) -> None:
        engine = GameClockEngine(CONFIG, time_source=fake_time)
        table = PlayerTable()
        seen: list[int] = []
        table.toggle_requested.connect(seen.append)
        _refresh(table, engine, [0])
        _refresh(table, engine, [0])
        assert seen == []

    def test_checkbox_requests_toggle(self, qapp, fake_time) -> None:
        engine = GameClockEngine(CONFIG, time_source=fake_time)
        table = PlayerTable()
        _refresh(table, engine, [0])
        seen: list[int] = []
        table.toggle_requested.connect(seen.append)
        item = table._table.item(3, 0)
        assert item is not None
        item.setCheckState(Qt.CheckState.Checked)
        assert seen == [table.row_index(3)]

    def test_name_edit_requests_rename(self, qapp, fake_time) -> None:
        engine = GameClockEngine(CONFIG, time_source=fake_time)
        table = PlayerTable()
        _refresh(table, engine, [0])
        seen: list[tuple[int, str]] = []
        table.rename_requested.connect(lambda i, name: seen.append((i, name)))
        item = table._table.item(0, 1)
        assert item is not None
        item.setText("Zoe")
        assert seen == [(table.row_index(0), "Zoe")]
