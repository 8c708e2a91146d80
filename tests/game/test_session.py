"""Tests for GameSession."""

from pathlib import Path

import pytest

from courttime.core.enums import Baseline, CapacityPolicy, PeriodFormat
from courttime.game.interfaces import GameConfig
from courttime.game.session import GameSession
from courttime.storage.snapshot import RosterEntry, SessionSnapshot
from courttime.storage.state_store import StateStore


@pytest.fixture
def session(fake_time) -> GameSession:
    return GameSession(GameConfig(num_players=10, on_court=5), time_source=fake_time)


class TestConfiguration:
    def test_configure_clamps(self, session: GameSession) -> None:
        config = session.set_num_players(500)
        assert config.num_players == 100
        config = session.set_on_court(0)
        assert config.on_court == 1
        config = session.set_period_minutes("abc")
        assert config.period_minutes == 8

    def test_unparseable_input_keeps_current_value(self, session: GameSession) -> None:
        session.set_on_court(3)
        assert session.set_on_court("x").on_court == 3
        session.set_period_minutes(12)
        assert session.set_period_minutes(None).period_minutes == 12
        session.set_num_players(14)
        assert session.set_num_players(float("nan")).num_players == 14
        session.set_format(PeriodFormat.HALVES)
        assert session.set_format("Thirds").format is PeriodFormat.HALVES

    def test_with_changes_falls_back_to_self(self) -> None:
        config = GameConfig(num_players=12, on_court=4, period_minutes=10)
        assert config.with_changes(on_court="abc") == config
        assert GameConfig.clamped(on_court="abc").on_court == 5

    def test_on_court_limited_to_players(self, session: GameSession) -> None:
        session.set_num_players(3)
        assert session.config.on_court == 3

    def test_format_changes_labels(self, session: GameSession) -> None:
        session.set_format("Halves")
        assert session.config.format is PeriodFormat.HALVES
        assert session.period_labels == ["H1", "H2"]
        assert session.state().num_periods == 2

    def test_config_event_only_on_change(self, session: GameSession) -> None:
        seen: list[GameConfig] = []
        session.events.on_config_changed.append(seen.append)
        session.set_num_players(10)
        session.set_num_players(12)
        assert [c.num_players for c in seen] == [12]

    def test_shrinking_on_court_keeps_seating(self, session: GameSession) -> None:
        session.set_on_court(3)
        assert session.state().players[4].active
        assert session.needs_subs


class TestClock:
    def test_toggle(self, session: GameSession, fake_time) -> None:
        assert session.toggle_clock()
        fake_time.advance(2_000)
        assert not session.toggle_clock()
        assert session.state().ledger[0] == 2_000

    def test_next_period(self, session: GameSession) -> None:
        assert session.next_period() == 1

    def test_reset_all(self, session: GameSession) -> None:
        session.start()
        session.engine.tick(5_000)
        session.toggle_active(0)
        session.use_timeout()
        session.add_overtime()
        session.overtime.start()
        session.overtime.tick(1_000)
        session.next_period()

        session.reset_all()

        snap = session.state()
        assert snap.game_elapsed_ms == 0
        assert snap.current_period == 0
        assert [p.active for p in snap.players] == [True] * 5 + [False] * 5
        assert session.timeouts.used == 0
        assert session.timeouts.overtimes == 0
        assert session.overtime.elapsed_ms == 0
        assert not session.overtime.is_running


class TestRoster:
    def test_capacity_notice(self, session: GameSession) -> None:
        notices: list[int] = []
        session.events.on_capacity_notice.append(notices.append)
        assert not session.toggle_active(7)
        assert notices == [5]
        assert not session.state().players[7].active

    def test_silent_policy(self, session: GameSession) -> None:
        notices: list[int] = []
        session.capacity_policy = CapacityPolicy.SILENT
        session.events.on_capacity_notice.append(notices.append)
        assert not session.toggle_active(7)
        assert notices == []

    def test_swap(self, session: GameSession) -> None:
        assert session.toggle_active(0)
        assert session.toggle_active(7)
        assert session.state().players[7].active

    def test_rename(self, session: GameSession) -> None:
        session.rename_player(2, "Zoe")
        assert session.state().players[2].name == "Zoe"
        assert session.snapshot().player_names[2] == "Zoe"

    def test_auto_fill_picks_least_played(self, session: GameSession) -> None:
        session.start()
        session.engine.tick(60_000)
        chosen = session.auto_fill()
        assert chosen == [5, 6, 7, 8, 9]
        assert session.engine.table.active_indices() == chosen

    def test_load_roster(self, session: GameSession) -> None:
        session.start()
        session.engine.tick(30_000)
        entry = RosterEntry(("Ann", "Bea", "Cat"), num_players=4, on_court=2)
        session.load_roster("Saturday", entry)
        snap = session.state()
        assert session.roster_name == "Saturday"
        assert session.config.num_players == 4
        assert session.config.on_court == 2
        assert [p.name for p in snap.players] == ["Ann", "Bea", "Cat", "Tory"]
        assert [p.active for p in snap.players] == [True, True, False, False]
        assert snap.game_elapsed_ms == 0
        assert not snap.is_running

    def test_roster_entry(self, session: GameSession) -> None:
        entry = session.roster_entry()
        assert entry.num_players == 10
        assert entry.on_court == 5
        assert entry.player_names[0] == "Stella"


class TestDerived:
    def test_metrics(self, session: GameSession) -> None:
        report = session.metrics()
        assert report.goal_per_player_full_game_ms == 960_000

    def test_standings_ideal(self, session: GameSession) -> None:
        session.start()
        session.engine.tick(10_000)
        rows = session.standings(Baseline.IDEAL)
        assert rows[0].delta_ms == 5_000


class TestPersistence:
    def test_snapshot_fields(self, session: GameSession) -> None:
        session.use_timeout()
        snap = session.snapshot()
        assert snap.num_players == 10
        assert snap.on_court == 5
        assert snap.timeouts_used == 1
        assert len(snap.player_names) == 10

    def test_emits_on_persisted_change_only(self, session: GameSession) -> None:
        seen: list[SessionSnapshot] = []
        session.events.on_snapshot.append(seen.append)
        session.use_timeout()
        session.toggle_active(0)
        session.set_num_players(10)
        session.set_roster_name("Team")
        assert [s.timeouts_used for s in seen] == [1, 1]
        assert seen[-1].roster_name == "Team"

    def test_restore(self, session: GameSession) -> None:
        stored = SessionSnapshot(
            num_players=6,
            on_court=3,
            format=PeriodFormat.HALVES,
            period_minutes=20,
            roster_name="Away",
            player_names=("Ann", "", "Cat"),
            timeouts_used=2,
            overtimes=1,
            ot_elapsed_ms=45_000,
        )
        session.restore(stored)
        snap = session.state()
        assert session.config == GameConfig(6, 3, PeriodFormat.HALVES, 20)
        assert session.roster_name == "Away"
        assert [p.name for p in snap.players] == [
            "Ann",
            "Lizzy",
            "Cat",
            "Tory",
            "Esther",
            "Kaitlin",
        ]
        assert [p.active for p in snap.players] == [True] * 3 + [False] * 3
        assert session.timeouts.used == 2
        assert session.timeouts.cap == 6
        assert session.overtime.elapsed_ms == 45_000
        assert snap.game_elapsed_ms == 0

    def test_restore_none_is_noop(self, session: GameSession) -> None:
        before = session.snapshot()
        session.restore(None)
        assert session.snapshot() == before



class TestOvertimePersistence:
    def test_ticks_do_not_publish(self, session: GameSession) -> None:
        seen: list[SessionSnapshot] = []
        session.events.on_snapshot.append(seen.append)
        assert session.toggle_overtime()
        for _ in range(50):
            session.overtime.tick(200)
        assert seen == []
        assert session.overtime.elapsed_ms == 10_000

    def test_ticks_do_not_write_state_file(
        self, session: GameSession, tmp_path: Path
    ) -> None:
        store = StateStore(tmp_path)
        session.events.on_snapshot.append(store.save)
        session.toggle_overtime()
        session.overtime.tick(200)
        session.overtime.tick(200)
        assert not store.path.exists()

    def test_pause_writes_elapsed(
        self, session: GameSession, fake_time, tmp_path: Path
    ) -> None:
        store = StateStore(tmp_path)
        session.events.on_snapshot.append(store.save)
        session.toggle_overtime()
        fake_time.advance(1_500)
        assert not session.toggle_overtime()
        assert StateStore(tmp_path).load().ot_elapsed_ms == 1_500

    def test_pause_overtime_publishes(self, session: GameSession) -> None:
        seen: list[SessionSnapshot] = []
        session.events.on_snapshot.append(seen.append)
        session.toggle_overtime()
        session.overtime.tick(400)
        session.pause_overtime()
        assert [s.ot_elapsed_ms for s in seen] == [400]

    def test_reset_overtime_publishes(self, session: GameSession) -> None:
        session.toggle_overtime()
        session.overtime.tick(400)
        session.pause_overtime()
        seen: list[SessionSnapshot] = []
        session.events.on_snapshot.append(seen.append)
        session.reset_overtime()
        assert [s.ot_elapsed_ms for s in seen] == [0]
        assert not session.overtime.is_running
