"""Players and the per-player accrual table."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

DEFAULT_NAMES: tuple[str, ...] = (
    "Stella",
    "Lizzy",
    "Gisella",
    "Tory",
    "Esther",
    "Kaitlin",
    "Sadie",
    "Brigit",
    "Sofia",
    "Scarlett",
    "Empress",
)


def default_name(index: int) -> str:
    if 0 <= index < len(DEFAULT_NAMES):
        return DEFAULT_NAMES[index]
    return f"Player {index + 1}"


@dataclass(slots=True)
class Player:
    """One roster member and the time they have spent on court."""

    player_id: int
    name: str
    active: bool = False
    total_ms: int = 0
    period_ms: list[int] = field(default_factory=list)

    def zero(self, num_periods: int) -> None:
        self.total_ms = 0
        self.period_ms = [0] * num_periods

    def resize_periods(self, num_periods: int) -> None:
        kept = self.period_ms[:num_periods]
        self.period_ms = kept + [0] * (num_periods - len(kept))
        self.total_ms = sum(self.period_ms)

    def freeze(self) -> PlayerSnapshot:
        return PlayerSnapshot(
            player_id=self.player_id,
            name=self.name,
            active=self.active,
            total_ms=self.total_ms,
            period_ms=tuple(self.period_ms),
        )


@dataclass(frozen=True, slots=True)
class PlayerSnapshot:
    """Read-only copy of a :class:`Player` taken between ticks."""

    player_id: int
    name: str
    active: bool
    total_ms: int
    period_ms: tuple[int, ...]


class PlayerAccrualTable:
    """Roster-ordered players with their accrued active time.

    Accrual only changes through :meth:`apply_delta`, which credits the same
    amount to every active player, so ``total_ms == sum(period_ms)`` holds
    for each player after every call.
    """

    __slots__ = ("_players", "_num_periods", "_on_court", "_ids")

    def __init__(self, num_periods: int, on_court: int) -> None:
        self._players: list[Player] = []
        self._num_periods = num_periods
        self._on_court = on_court
        self._ids = itertools.count(1)

    @classmethod
    def create(
        cls,
        count: int,
        num_periods: int,
        on_court: int,
        names: Sequence[str] | None = None,
    ) -> PlayerAccrualTable:
        """Fresh table of *count* players with the first *on_court* seated."""
        table = cls(num_periods, on_court)
        table.reshape(count, num_periods, on_court)
        for i, name in enumerate((names or ())[:count]):
            table.rename(i, name)
        return table

    # ── Queries ──────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def __getitem__(self, index: int) -> Player:
        return self._players[index]

    @property
    def players(self) -> tuple[Player, ...]:
        return tuple(self._players)

    @property
    def num_periods(self) -> int:
        return self._num_periods

    @property
    def on_court(self) -> int:
        return self._on_court

    @property
    def active_count(self) -> int:
        return sum(1 for p in self._players if p.active)

    def active_indices(self) -> list[int]:
        return [i for i, p in enumerate(self._players) if p.active]

    def can_activate(self, index: int) -> bool:
        return self._players[index].active or self.active_count < self._on_court

    # ── Accrual ──────────────────────────────────────────────────────────

    def apply_delta(self, period_index: int, amount: int) -> int:
        """Credit *amount* ms in *period_index* to every active player.

        Returns the number of players credited. Inactive players are untouched.
        """
        if amount <= 0:
            return 0
        credited = 0
        for player in self._players:
            if not player.active:
                continue
            player.period_ms[period_index] += amount
            player.total_ms += amount
            credited += 1
        return credited

    def reset_accrual(self) -> None:
        for player in self._players:
            player.zero(self._num_periods)

    # ── Seating ──────────────────────────────────────────────────────────

    def toggle_active(self, index: int) -> bool:
        """Flip *index* on/off court.

        Activation is refused (returns False, nothing changes) when the
        on-court count is already reached; deactivation always succeeds.
        """
        player = self._players[index]
        if not player.active and self.active_count >= self._on_court:
            return False
        player.active = not player.active
        return True

    def seat_first(self, count: int | None = None) -> None:
        """Mark the first *count* players (default: on-court size) active."""
        n = self._on_court if count is None else count
        for i, player in enumerate(self._players):
            player.active = i < n

    def seat_exactly(self, indices: Iterable[int]) -> None:
        chosen = set(indices)
        for i, player in enumerate(self._players):
            player.active = i in chosen

    def rename(self, index: int, name: str) -> None:
        self._players[index].name = name

    # ── Shape ────────────────────────────────────────────────────────────

    def reshape(self, count: int, num_periods: int, on_court: int) -> None:
        """Reconcile roster length and period slots.

        Growing appends zeroed players, seating the first *on_court* new
        slots only when the table was empty. Shrinking truncates from the
        end. Surviving players keep their per-period values for every
        period index that still exists.
        """
        self._on_court = on_court
        if num_periods != self._num_periods:
            self._num_periods = num_periods
            for player in self._players:
                player.resize_periods(num_periods)

        was_empty = not self._players
        if count < len(self._players):
            del self._players[count:]
        while len(self._players) < count:
            index = len(self._players)
            self._players.append(
                Player(
                    player_id=next(self._ids),
                    name=default_name(index),
                    active=was_empty and index < on_court,
                    period_ms=[0] * num_periods,
                )
            )

    def replace_roster(self, names: Sequence[str], on_court: int) -> None:
        """Discard every player and build a fresh, zeroed roster from *names*."""
        self._players = []
        self._on_court = on_court
        self.reshape(len(names), self._num_periods, on_court)
        for i, name in enumerate(names):
            self._players[i].name = name

    def freeze(self) -> tuple[PlayerSnapshot, ...]:
        return tuple(p.freeze() for p in self._players)
