"""Enumerations shared by the clock engine and the UI."""

from __future__ import annotations

from enum import Enum, IntEnum, auto


class PeriodFormat(Enum):
    """How a game is divided into periods."""

    QUARTERS = "Quarters"
    HALVES = "Halves"

    @property
    def num_periods(self) -> int:
        return 4 if self is PeriodFormat.QUARTERS else 2

    @property
    def label_prefix(self) -> str:
        return "Q" if self is PeriodFormat.QUARTERS else "H"

    @classmethod
    def parse(cls, value: object, default: PeriodFormat | None = None) -> PeriodFormat:
        """Lenient lookup by value or member name; unknown input gives *default*."""
        if isinstance(value, PeriodFormat):
            return value
        if isinstance(value, str):
            text = value.strip()
            for member in cls:
                if text.lower() in (member.value.lower(), member.name.lower()):
                    return member
        return default if default is not None else cls.QUARTERS


class ClockPhase(IntEnum):
    """Finite-state-machine states for a running clock."""

    IDLE = auto()
    RUNNING = auto()


class Baseline(Enum):
    """Reference value a player's accrued time is compared against."""

    GOAL = "goal"  # full game share
    IDEAL = "ideal"  # share of the time played so far


class CapacityPolicy(Enum):
    """What happens when a player is activated beyond the on-court count."""

    SILENT = "silent"
    WARN = "warn"


class PeriodView(Enum):
    """Which period columns the standings show."""

    CURRENT = "current"
    COMPLETED = "completed"
