"""GameSession — owns one game's clocks, roster and counters.

The session is the single place configuration changes, seating changes
and counters flow through. Whenever a persisted field changes it emits a
:class:`SessionSnapshot`; the storage layer subscribes to that event and
never touches the engine directly.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from courttime.core.enums import Baseline, CapacityPolicy, PeriodFormat, PeriodView
from courttime.core.timefmt import period_labels
from courttime.game.engine import EngineSnapshot, GameClockEngine
from courttime.game.interfaces import GameConfig, TimeSource
from courttime.game.metrics import (
    FairnessReport,
    PlayerStanding,
    compute_metrics,
    displayed_periods,
    needs_subs,
    standings,
)
from courttime.game.overtime import OvertimeClock
from courttime.game.resizer import RosterResizer
from courttime.game.roster import default_name
from courttime.game.timeouts import TimeoutLedger
from courttime.storage.snapshot import (
    DEFAULT_ROSTER_NAME,
    RosterEntry,
    SessionSnapshot,
)

_LOGGER = logging.getLogger(__name__)

SnapshotCallback = Callable[[SessionSnapshot], None]
CapacityCallback = Callable[[int], None]  # on-court limit that was hit
ConfigCallback = Callable[[GameConfig], None]
RosterCallback = Callable[[], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_snapshot: list[SnapshotCallback] = field(default_factory=list)
    on_capacity_notice: list[CapacityCallback] = field(default_factory=list)
    on_config_changed: list[ConfigCallback] = field(default_factory=list)
    on_roster_changed: list[RosterCallback] = field(default_factory=list)


class GameSession:
    """Session-scoped owner of the game clock, overtime clock and timeouts."""

    __slots__ = (
        "_config",
        "_engine",
        "_resizer",
        "_overtime",
        "_timeouts",
        "_roster_name",
        "_last_snapshot",
        "capacity_policy",
        "events",
        "__weakref__",
    )

    def __init__(
        self,
        config: GameConfig | None = None,
        *,
        time_source: TimeSource | None = None,
        capacity_policy: CapacityPolicy = CapacityPolicy.WARN,
        roster_name: str = DEFAULT_ROSTER_NAME,
    ) -> None:
        self._config = config or GameConfig()
        self._engine = GameClockEngine(self._config, time_source=time_source)
        self._resizer = RosterResizer(self._engine)
        self._overtime = OvertimeClock(time_source=time_source)
        self._timeouts = TimeoutLedger()
        self._roster_name = roster_name
        self._last_snapshot: SessionSnapshot | None = None
        self.capacity_policy = capacity_policy
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def engine(self) -> GameClockEngine:
        return self._engine

    @property
    def overtime(self) -> OvertimeClock:
        return self._overtime

    @property
    def timeouts(self) -> TimeoutLedger:
        return self._timeouts

    @property
    def roster_name(self) -> str:
        return self._roster_name

    @property
    def period_labels(self) -> list[str]:
        return period_labels(self._config.format)

    # ── Configuration ────────────────────────────────────────────────────

    def configure(self, **changes: object) -> GameConfig:
        """Apply configuration *changes*, clamping and reshaping as needed."""
        requested = self._config.with_changes(**changes)
        settled = self._resizer.settle(requested)
        changed = settled != self._config
        self._config = settled
        if changed:
            _LOGGER.debug("Configuration now %r", settled)
            for cb in self.events.on_config_changed:
                cb(settled)
        self._publish()
        return settled

    def set_num_players(self, value: object) -> GameConfig:
        return self.configure(num_players=value)

    def set_on_court(self, value: object) -> GameConfig:
        return self.configure(on_court=value)

    def set_format(self, value: PeriodFormat | str) -> GameConfig:
        return self.configure(format=value)

    def set_period_minutes(self, value: object) -> GameConfig:
        return self.configure(period_minutes=value)

    def set_roster_name(self, name: str) -> None:
        self._roster_name = name
        self._publish()

    # ── Clock control ────────────────────────────────────────────────────

    def start(self) -> bool:
        return self._engine.start()

    def pause(self) -> None:
        self._engine.pause()

    def toggle_clock(self) -> bool:
        """Start when idle, pause when running. Returns the new running state."""
        if self._engine.is_running:
            self._engine.pause()
            return False
        return self._engine.start()

    def next_period(self) -> int:
        return self._engine.advance_period()

    def reset_all(self) -> None:
        """Zero the game, the overtime clock and the timeouts; re-seat starters."""
        self._engine.reset()
        with self._engine.locked():
            self._engine.table.seat_first()
        self._overtime.reset()
        self._timeouts.reset()
        _LOGGER.info("Session reset")
        self._notify_roster()
        self._publish()

    # ── Roster ───────────────────────────────────────────────────────────

    def toggle_active(self, index: int) -> bool:
        """Flip a player on/off court; False when the on-court limit blocks it."""
        with self._engine.locked():
            ok = self._engine.table.toggle_active(index)
        if not ok:
            _LOGGER.debug("Activation of player %d refused: court full", index)
            if self.capacity_policy is CapacityPolicy.WARN:
                for cb in self.events.on_capacity_notice:
                    cb(self._config.on_court)
            return False
        self._notify_roster()
        return True

    def rename_player(self, index: int, name: str) -> None:
        with self._engine.locked():
            self._engine.table.rename(index, name)
        self._notify_roster()
        self._publish()

    def auto_fill(self) -> list[int]:
        """Put the players with the least time on court; returns their indices."""
        with self._engine.locked():
            table = self._engine.table
            by_time = sorted(range(len(table)), key=lambda i: table[i].total_ms)
            chosen = sorted(by_time[: self._config.on_court])
            table.seat_exactly(chosen)
        self._notify_roster()
        return chosen

    def roster_entry(self) -> RosterEntry:
        snap = self._engine.snapshot()
        return RosterEntry(
            player_names=tuple(p.name for p in snap.players),
            num_players=self._config.num_players,
            on_court=self._config.on_court,
        )

    def load_roster(self, name: str, entry: RosterEntry) -> None:
        """Replace the roster with a saved one; all runtime accrual restarts."""
        self._engine.stop_silently()
        self._engine.reset()
        self._roster_name = name
        config = self._resizer.settle(
            self._config.with_changes(
                num_players=entry.num_players, on_court=entry.on_court
            )
        )
        self._config = config
        names = [
            entry.player_names[i] if i < len(entry.player_names) else default_name(i)
            for i in range(config.num_players)
        ]
        with self._engine.locked():
            self._engine.table.replace_roster(names, config.on_court)
        _LOGGER.info("Loaded roster %r (%d players)", name, config.num_players)
        for cb in self.events.on_config_changed:
            cb(config)
        self._notify_roster()
        self._publish()

    # ── Timeouts ─────────────────────────────────────────────────────────

    def use_timeout(self) -> int:
        used = self._timeouts.use()
        self._publish()
        return used

    def undo_timeout(self) -> int:
        used = self._timeouts.undo()
        self._publish()
        return used

    def add_overtime(self) -> int:
        count = self._timeouts.add_overtime()
        self._publish()
        return count

    # ── Overtime clock ───────────────────────────────────────────────────
    # Overtime ticks never publish; elapsed time is persisted on stop or reset.

    def toggle_overtime(self) -> bool:
        """Start or pause the overtime clock. Returns the new running state."""
        self._overtime.toggle()
        running = self._overtime.is_running
        if not running:
            self._publish()
        return running

    def pause_overtime(self) -> None:
        self._overtime.pause()
        self._publish()

    def reset_overtime(self) -> None:
        self._overtime.reset()
        self._publish()

    # ── Derived reads ────────────────────────────────────────────────────

    def state(self) -> EngineSnapshot:
        return self._engine.snapshot()

    def metrics(self, baseline: Baseline = Baseline.GOAL) -> FairnessReport:
        return compute_metrics(self._engine.snapshot(), self._config, baseline)

    def standings(self, baseline: Baseline = Baseline.GOAL) -> list[PlayerStanding]:
        snap = self._engine.snapshot()
        return standings(snap, compute_metrics(snap, self._config, baseline))

    def displayed_periods(self, view: PeriodView) -> list[int]:
        return displayed_periods(self._engine.snapshot(), view)

    @property
    def needs_subs(self) -> bool:
        return needs_subs(self._engine.snapshot(), self._config.on_court)

    # ── Persistence ──────────────────────────────────────────────────────

    def snapshot(self) -> SessionSnapshot:
        cfg = self._config
        return SessionSnapshot(
            num_players=cfg.num_players,
            on_court=cfg.on_court,
            format=cfg.format,
            period_minutes=cfg.period_minutes,
            roster_name=self._roster_name,
            player_names=tuple(p.name for p in self._engine.snapshot().players),
            timeouts_used=self._timeouts.used,
            overtimes=self._timeouts.overtimes,
            ot_elapsed_ms=self._overtime.elapsed_ms,
        )

    def restore(self, snapshot: SessionSnapshot | None) -> None:
        """Seed configuration, names and counters; game time restarts at zero."""
        if snapshot is None:
            return
        self._engine.stop_silently()
        self._engine.reset()
        self._roster_name = snapshot.roster_name
        self._config = self._resizer.settle(
            GameConfig.clamped(
                num_players=snapshot.num_players,
                on_court=snapshot.on_court,
                format=snapshot.format,
                period_minutes=snapshot.period_minutes,
            )
        )
        with self._engine.locked():
            table = self._engine.table
            for i in range(len(table)):
                stored = (
                    snapshot.player_names[i] if i < len(snapshot.player_names) else ""
                )
                table.rename(i, stored or default_name(i))
            table.seat_first()
        self._timeouts.restore(snapshot.timeouts_used, snapshot.overtimes)
        self._overtime.pause()
        self._overtime.restore(snapshot.ot_elapsed_ms)
        for cb in self.events.on_config_changed:
            cb(self._config)
        self._notify_roster()
        self._publish()

    # ── Internal ─────────────────────────────────────────────────────────

    def _notify_roster(self) -> None:
        for cb in self.events.on_roster_changed:
            cb()

    def _publish(self) -> None:
        snap = self.snapshot()
        if snap == self._last_snapshot:
            return
        self._last_snapshot = snap
        for cb in self.events.on_snapshot:
            cb(snap)
