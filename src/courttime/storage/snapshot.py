"""Serializable snapshots exchanged with the storage collaborators.

Only configuration, names and counters are ever stored. Period and
accrual progress is deliberately absent: a reload always starts at zero.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from courttime.core.enums import PeriodFormat
from courttime.core.limits import (
    DEFAULT_NUM_PLAYERS,
    DEFAULT_ON_COURT,
    DEFAULT_PERIOD_MINUTES,
    MAX_PLAYERS,
    OVERTIME_LENGTH_MS,
    clamp_int,
)

DEFAULT_ROSTER_NAME = "My Roster"

_BIG = 1_000_000


def _names_from(raw: object) -> tuple[str, ...]:
    """``[{"name": ...}, ...]`` → names; malformed entries become ``""``."""
    if not isinstance(raw, list):
        return ()
    names: list[str] = []
    for item in raw[:MAX_PLAYERS]:
        name = item.get("name") if isinstance(item, Mapping) else None
        names.append(name if isinstance(name, str) else "")
    return tuple(names)


def _names_to(names: tuple[str, ...]) -> list[dict[str, str]]:
    return [{"name": n} for n in names]


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Everything persisted between launches."""

    num_players: int = DEFAULT_NUM_PLAYERS
    on_court: int = DEFAULT_ON_COURT
    format: PeriodFormat = PeriodFormat.QUARTERS
    period_minutes: int = DEFAULT_PERIOD_MINUTES
    roster_name: str = DEFAULT_ROSTER_NAME
    player_names: tuple[str, ...] = ()
    timeouts_used: int = 0
    overtimes: int = 0
    ot_elapsed_ms: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "numPlayers": self.num_players,
            "onCourt": self.on_court,
            "format": self.format.value,
            "periodMinutes": self.period_minutes,
            "rosterName": self.roster_name,
            "players": _names_to(self.player_names),
            "timeoutsUsed": self.timeouts_used,
            "overtimes": self.overtimes,
            "otElapsedMs": self.ot_elapsed_ms,
        }

    @classmethod
    def from_dict(cls, raw: object) -> SessionSnapshot | None:
        """Lenient parse: bad fields fall back to defaults, a non-mapping gives None."""
        if not isinstance(raw, Mapping):
            return None
        roster_name = raw.get("rosterName")
        return cls(
            num_players=clamp_int(
                raw.get("numPlayers"), 1, MAX_PLAYERS, DEFAULT_NUM_PLAYERS
            ),
            on_court=clamp_int(raw.get("onCourt"), 1, MAX_PLAYERS, DEFAULT_ON_COURT),
            format=PeriodFormat.parse(raw.get("format")),
            period_minutes=clamp_int(
                raw.get("periodMinutes"), 1, _BIG, DEFAULT_PERIOD_MINUTES
            ),
            roster_name=(
                roster_name if isinstance(roster_name, str) else DEFAULT_ROSTER_NAME
            ),
            player_names=_names_from(raw.get("players")),
            timeouts_used=clamp_int(raw.get("timeoutsUsed"), 0, _BIG, 0),
            overtimes=clamp_int(raw.get("overtimes"), 0, _BIG, 0),
            ot_elapsed_ms=clamp_int(raw.get("otElapsedMs"), 0, OVERTIME_LENGTH_MS, 0),
        )


@dataclass(frozen=True, slots=True)
class RosterEntry:
    """A saved roster: names plus the sizes they were saved with."""

    player_names: tuple[str, ...]
    num_players: int
    on_court: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "players": _names_to(self.player_names),
            "numPlayers": self.num_players,
            "onCourt": self.on_court,
        }

    @classmethod
    def from_dict(cls, raw: object) -> RosterEntry | None:
        if not isinstance(raw, Mapping):
            return None
        names = _names_from(raw.get("players"))
        fallback = len(names) or DEFAULT_NUM_PLAYERS
        return cls(
            player_names=names,
            num_players=clamp_int(raw.get("numPlayers"), 1, MAX_PLAYERS, fallback),
            on_court=clamp_int(raw.get("onCourt"), 1, MAX_PLAYERS, DEFAULT_ON_COURT),
        )
