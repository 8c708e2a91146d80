"""Abstract interfaces and configuration for the clock layer.

The engine depends on the ``IClock`` contract and on an injectable
``TimeSource`` so that tests can drive time deterministically.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

from courttime.core.enums import ClockPhase, PeriodFormat
from courttime.core.limits import (
    DEFAULT_NUM_PLAYERS,
    DEFAULT_ON_COURT,
    DEFAULT_PERIOD_MINUTES,
    MAX_PERIOD_MINUTES,
    MAX_PLAYERS,
    MIN_PERIOD_MINUTES,
    MIN_PLAYERS,
    MS_PER_MINUTE,
    clamp_int,
)

TimeSource = Callable[[], float]
"""Zero-argument callable returning a monotonic reading in milliseconds."""


def monotonic_ms() -> float:
    """Default time source: the process monotonic clock in milliseconds."""
    return time.monotonic_ns() / 1_000_000


# ── Configuration ────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Immutable game configuration.

    Build through :meth:`clamped` when values come from user input; the
    dataclass constructor trusts its arguments.
    """

    num_players: int = DEFAULT_NUM_PLAYERS
    on_court: int = DEFAULT_ON_COURT
    format: PeriodFormat = PeriodFormat.QUARTERS
    period_minutes: int = DEFAULT_PERIOD_MINUTES

    @classmethod
    def clamped(
        cls,
        num_players: object = DEFAULT_NUM_PLAYERS,
        on_court: object = DEFAULT_ON_COURT,
        format: object = PeriodFormat.QUARTERS,
        period_minutes: object = DEFAULT_PERIOD_MINUTES,
        *,
        fallback: GameConfig | None = None,
    ) -> GameConfig:
        """Clamp each field into range.

        Unparseable values take the matching field of *fallback*, or the
        defaults when none is given.
        """
        base = fallback or cls()
        players = clamp_int(num_players, MIN_PLAYERS, MAX_PLAYERS, base.num_players)
        return cls(
            num_players=players,
            on_court=clamp_int(on_court, 1, players, base.on_court),
            format=PeriodFormat.parse(format, base.format),
            period_minutes=clamp_int(
                period_minutes,
                MIN_PERIOD_MINUTES,
                MAX_PERIOD_MINUTES,
                base.period_minutes,
            ),
        )

    def with_changes(self, **changes: object) -> GameConfig:
        """Return a clamped copy with *changes* applied."""
        values: dict[str, object] = {
            "num_players": self.num_players,
            "on_court": self.on_court,
            "format": self.format,
            "period_minutes": self.period_minutes,
        }
        values.update(changes)
        return GameConfig.clamped(**values, fallback=self)

    @property
    def num_periods(self) -> int:
        return self.format.num_periods

    @property
    def period_length_ms(self) -> int:
        return self.period_minutes * MS_PER_MINUTE

    @property
    def full_game_ms(self) -> int:
        return self.num_periods * self.period_length_ms

    def __repr__(self) -> str:
        return (
            f"GameConfig({self.num_players}p, {self.on_court} on court, "
            f"{self.num_periods}x{self.period_minutes}m)"
        )


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IClock(ABC):
    """Interface shared by the game clock and the overtime clock."""

    @property
    @abstractmethod
    def phase(self) -> ClockPhase: ...

    @abstractmethod
    def start(self) -> bool:
        """Begin ticking. Returns False if the clock cannot start."""

    @abstractmethod
    def pause(self) -> None:
        """Stop ticking, keeping accumulated time."""

    @abstractmethod
    def reset(self) -> None:
        """Stop ticking and zero all accumulated time."""

    @abstractmethod
    def poll(self) -> int:
        """Sample the time source and apply the elapsed delta.

        Returns the amount of time actually applied, in milliseconds.
        """

    @abstractmethod
    def tick(self, delta_ms: float) -> int:
        """Apply *delta_ms* of elapsed time; returns the clamped amount applied."""

    @property
    def is_running(self) -> bool:
        return self.phase is ClockPhase.RUNNING
