"""OvertimeClock — standalone overtime timer, independent of the game clock."""

from __future__ import annotations

import logging
import threading

from courttime.core.enums import ClockPhase
from courttime.core.limits import OVERTIME_LENGTH_MS
from courttime.game.interfaces import IClock, TimeSource
from courttime.game.ledger import PeriodLedger
from courttime.game.ticker import ClockTicker, sanitize_delta

_LOGGER = logging.getLogger(__name__)


class OvertimeClock(IClock):
    """A single capped period with no player accrual.

    Ticks follow the game clock's contract up to the ledger update: time is
    clamped to what remains of the cap. Reaching the cap does not pause the
    clock; :attr:`is_expired` reports it instead.
    """

    __slots__ = ("_ticker", "_ledger", "_phase", "_lock")

    def __init__(
        self,
        length_ms: int = OVERTIME_LENGTH_MS,
        *,
        time_source: TimeSource | None = None,
    ) -> None:
        self._ticker = ClockTicker(time_source)
        self._ledger = PeriodLedger(1, length_ms)
        self._phase = ClockPhase.IDLE
        self._lock = threading.Lock()

    @property
    def phase(self) -> ClockPhase:
        return self._phase

    @property
    def length_ms(self) -> int:
        return self._ledger.period_length_ms

    @property
    def elapsed_ms(self) -> int:
        return self._ledger.elapsed_in(0)

    @property
    def remaining_ms(self) -> int:
        return self._ledger.remaining(0)

    @property
    def is_expired(self) -> bool:
        return self._ledger.is_complete(0)

    def start(self) -> bool:
        with self._lock:
            if self._phase is not ClockPhase.RUNNING:
                self._ticker.arm()
                self._phase = ClockPhase.RUNNING
        return True

    def pause(self) -> None:
        with self._lock:
            if self._phase is not ClockPhase.RUNNING:
                return
            self._apply(self._ticker.sample())
            self._phase = ClockPhase.IDLE
            self._ticker.disarm()

    def toggle(self) -> None:
        if self.is_running:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        with self._lock:
            self._phase = ClockPhase.IDLE
            self._ticker.disarm()
            self._ledger.reset()
        _LOGGER.debug("Overtime clock reset")

    def restore(self, elapsed_ms: object) -> None:
        """Seed elapsed time from storage, clamped to the cap."""
        with self._lock:
            self._ledger.reset()
            self._ledger.record_delta(
                0, min(sanitize_delta(elapsed_ms), self._ledger.period_length_ms)
            )

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

    def _apply(self, delta_ms: object) -> int:
        applied = min(sanitize_delta(delta_ms), self._ledger.remaining(0))
        if applied > 0:
            self._ledger.record_delta(0, applied)
        return applied
