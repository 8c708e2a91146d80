"""GameClockEngine — the game clock and playing-time accrual state machine.

Coordinates: ClockTicker, PeriodLedger, PlayerAccrualTable.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field

from courttime.core.enums import ClockPhase
from courttime.game.interfaces import GameConfig, IClock, TimeSource
from courttime.game.ledger import PeriodLedger
from courttime.game.roster import PlayerAccrualTable, PlayerSnapshot
from courttime.game.ticker import ClockTicker, sanitize_delta

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

PhaseCallback = Callable[[ClockPhase], None]
PeriodCallback = Callable[[int], None]  # period index
TickCallback = Callable[[int, int], None]  # period index, applied ms
ResetCallback = Callable[[], None]


@dataclass
class EngineEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_tick: list[TickCallback] = field(default_factory=list)
    on_period_complete: list[PeriodCallback] = field(default_factory=list)
    on_period_changed: list[PeriodCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class EngineSnapshot:
    """Point-in-time, internally consistent copy of the engine state."""

    phase: ClockPhase
    current_period: int
    period_length_ms: int
    ledger: tuple[int, ...]
    players: tuple[PlayerSnapshot, ...]

    @property
    def game_elapsed_ms(self) -> int:
        return sum(self.ledger)

    @property
    def num_periods(self) -> int:
        return len(self.ledger)

    @property
    def is_running(self) -> bool:
        return self.phase is ClockPhase.RUNNING

    def completed_periods(self) -> list[int]:
        return [i for i, ms in enumerate(self.ledger) if ms >= self.period_length_ms]


# ── Engine ───────────────────────────────────────────────────────────────────


class GameClockEngine(IClock):
    """Runs the game clock and credits elapsed time to on-court players.

    One tick is a single transition: the clamped delta lands in the current
    period's ledger slot and on every active player under the same lock, so
    :meth:`snapshot` never sees one without the other.

    Thread-safety: ticks, lifecycle calls and snapshots may come from
    different threads; a tick already in progress is never re-entered.
    """

    __slots__ = (
        "_ticker",
        "_ledger",
        "_table",
        "_phase",
        "_current_period",
        "_lock",
        "_in_tick",
        "events",
    )

    def __init__(
        self,
        config: GameConfig | None = None,
        *,
        time_source: TimeSource | None = None,
        names: Sequence[str] | None = None,
    ) -> None:
        cfg = config or GameConfig()
        self._ticker = ClockTicker(time_source)
        self._ledger = PeriodLedger(cfg.num_periods, cfg.period_length_ms)
        self._table = PlayerAccrualTable.create(
            cfg.num_players, cfg.num_periods, cfg.on_court, names
        )
        self._phase = ClockPhase.IDLE
        self._current_period = 0
        self._lock = threading.RLock()
        self._in_tick = False
        self.events = EngineEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def phase(self) -> ClockPhase:
        return self._phase

    @property
    def current_period(self) -> int:
        return self._current_period

    @property
    def ledger(self) -> PeriodLedger:
        return self._ledger

    @property
    def table(self) -> PlayerAccrualTable:
        return self._table

    @property
    def is_period_complete(self) -> bool:
        return self._ledger.is_complete(self._current_period)

    # ── Lifecycle ────────────────────────────────────────────────────────

    def start(self) -> bool:
        with self._lock:
            if self._phase is ClockPhase.RUNNING:
                return True
            if self._ledger.is_complete(self._current_period):
                return False
            self._ticker.arm()
            self._phase = ClockPhase.RUNNING
        self._emit_phase(ClockPhase.RUNNING)
        return True

    def pause(self) -> None:
        with self._lock:
            if self._phase is not ClockPhase.RUNNING:
                return
            # Credit time since the last tick before stopping.
            self._apply(self._ticker.sample())
            if self._phase is not ClockPhase.RUNNING:
                return
            self._stop_locked()
        self._emit_phase(ClockPhase.IDLE)

    def advance_period(self) -> int:
        """Stop the clock and move to the next period (clamped to the last)."""
        self.pause()
        with self._lock:
            previous = self._current_period
            self._current_period = min(previous + 1, self._ledger.num_periods - 1)
            current = self._current_period
        if current != previous:
            _LOGGER.debug("Advanced to period %d", current)
            self._emit_period_changed(current)
        return current

    def reset(self) -> None:
        with self._lock:
            was_running = self._phase is ClockPhase.RUNNING
            self._stop_locked()
            self._ledger.reset()
            self._table.reset_accrual()
            self._current_period = 0
        _LOGGER.info("Game clock reset")
        if was_running:
            self._emit_phase(ClockPhase.IDLE)
        self._dispatch(self.events.on_reset)

    # ── Ticking ──────────────────────────────────────────────────────────

    def poll(self) -> int:
        with self._lock:
            if self._phase is not ClockPhase.RUNNING:
                return 0
            return self._apply(self._ticker.sample())

    def tick(self, delta_ms: float) -> int:
        with self._lock:
            if self._phase is not ClockPhase.RUNNING:
                return 0
            return self._apply(delta_ms)

    # ── Reading / reconfiguration ────────────────────────────────────────

    def snapshot(self) -> EngineSnapshot:
        with self._lock:
            return EngineSnapshot(
                phase=self._phase,
                current_period=self._current_period,
                period_length_ms=self._ledger.period_length_ms,
                ledger=self._ledger.elapsed,
                players=self._table.freeze(),
            )

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold the tick lock, e.g. while reshaping ledger and table together."""
        with self._lock:
            yield

    def clamp_current_period(self) -> None:
        """Pull the current period into range; stop if it is already full."""
        with self._lock:
            last = self._ledger.num_periods - 1
            self._current_period = max(0, min(self._current_period, last))
            stopped = self._phase is ClockPhase.RUNNING and self.is_period_complete
            if stopped:
                # Pending ticker time is dropped; the period has no room left.
                self._stop_locked()
        if stopped:
            _LOGGER.debug("Period %d already full; clock stopped", self._current_period)
            self._emit_phase(ClockPhase.IDLE)

    def stop_silently(self) -> None:
        """Stop scheduling ticks without crediting pending time (roster reload)."""
        with self._lock:
            was_running = self._phase is ClockPhase.RUNNING
            self._stop_locked()
        if was_running:
            self._emit_phase(ClockPhase.IDLE)

    # ── Internal ─────────────────────────────────────────────────────────

    def _apply(self, delta_ms: object) -> int:
        """Apply one tick. Caller holds the lock and the clock is running."""
        if self._in_tick:
            return 0
        self._in_tick = True
        try:
            period = self._current_period
            delta = sanitize_delta(delta_ms)
            applied = min(delta, self._ledger.remaining(period))
            if applied > 0:
                self._ledger.record_delta(period, applied)
                self._table.apply_delta(period, applied)
            completed = self._ledger.is_complete(period)
            if completed:
                self._stop_locked()

            # Handlers run after the commit; ticks they trigger are dropped.
            if applied > 0:
                self._dispatch(self.events.on_tick, period, applied)
            if completed:
                _LOGGER.debug("Period %d complete", period)
                self._dispatch(self.events.on_period_complete, period)
                self._emit_phase(ClockPhase.IDLE)
        finally:
            self._in_tick = False
        return applied

    def _stop_locked(self) -> None:
        self._phase = ClockPhase.IDLE
        self._ticker.disarm()

    def _emit_phase(self, phase: ClockPhase) -> None:
        self._dispatch(self.events.on_phase_changed, phase)

    def _emit_period_changed(self, index: int) -> None:
        self._dispatch(self.events.on_period_changed, index)

    @staticmethod
    def _dispatch(callbacks: Sequence[Callable[..., None]], *args: object) -> None:
        """Call every handler; a failing one is logged and the rest still run."""
        for cb in list(callbacks):
            try:
                cb(*args)
            except Exception:
                _LOGGER.exception("Engine event handler %r failed", cb)
