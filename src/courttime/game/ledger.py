"""PeriodLedger — elapsed time per period of the current game."""

from __future__ import annotations


class PeriodLedger:
    """Ordered elapsed-time counters, one per period.

    Every slot stays within ``[0, period_length_ms]``.
    """

    __slots__ = ("_elapsed", "_period_length_ms")

    def __init__(self, num_periods: int, period_length_ms: int) -> None:
        if num_periods < 1:
            raise ValueError(f"num_periods must be >= 1, got {num_periods}")
        self._elapsed: list[int] = [0] * num_periods
        self._period_length_ms = max(0, int(period_length_ms))

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def num_periods(self) -> int:
        return len(self._elapsed)

    @property
    def period_length_ms(self) -> int:
        return self._period_length_ms

    @property
    def elapsed(self) -> tuple[int, ...]:
        return tuple(self._elapsed)

    @property
    def game_elapsed_ms(self) -> int:
        return sum(self._elapsed)

    @property
    def longest_elapsed_ms(self) -> int:
        return max(self._elapsed)

    def elapsed_in(self, index: int) -> int:
        return self._elapsed[index]

    def remaining(self, index: int) -> int:
        return max(0, self._period_length_ms - self._elapsed[index])

    def is_complete(self, index: int) -> bool:
        return self._elapsed[index] >= self._period_length_ms

    def completed_periods(self) -> list[int]:
        return [i for i in range(len(self._elapsed)) if self.is_complete(i)]

    # ── Mutation ─────────────────────────────────────────────────────────

    def record_delta(self, index: int, amount: int) -> None:
        """Add *amount* to period *index*; must fit in what remains of it."""
        remaining = self.remaining(index)
        if not 0 <= amount <= remaining:
            raise ValueError(
                f"delta {amount} outside [0, {remaining}] for period {index}"
            )
        self._elapsed[index] += amount

    def reshape(self, num_periods: int) -> None:
        """Resize to *num_periods*, keeping values for indices in both shapes."""
        if num_periods < 1:
            raise ValueError(f"num_periods must be >= 1, got {num_periods}")
        kept = self._elapsed[:num_periods]
        self._elapsed = kept + [0] * (num_periods - len(kept))

    def set_period_length(self, period_length_ms: int) -> None:
        """Change the period cap. Callers must not shrink it below any slot."""
        length = max(0, int(period_length_ms))
        if length < self.longest_elapsed_ms:
            raise ValueError(
                f"period length {length} below elapsed {self.longest_elapsed_ms}"
            )
        self._period_length_ms = length

    def reset(self) -> None:
        self._elapsed = [0] * len(self._elapsed)

    def __repr__(self) -> str:
        return f"PeriodLedger({self._elapsed}, cap={self._period_length_ms})"
