"""Game constants, configuration bounds and input clamping."""

from __future__ import annotations

MS_PER_MINUTE = 60_000

GAME_TICK_INTERVAL_MS = 250
OVERTIME_TICK_INTERVAL_MS = 200

OVERTIME_LENGTH_MS = 3 * MS_PER_MINUTE
BASE_TIMEOUTS = 5

MIN_PLAYERS, MAX_PLAYERS = 1, 100
MIN_PERIOD_MINUTES, MAX_PERIOD_MINUTES = 1, 90

DEFAULT_NUM_PLAYERS = 11
DEFAULT_ON_COURT = 5
DEFAULT_PERIOD_MINUTES = 8


def clamp_int(value: object, low: int, high: int, default: int) -> int:
    """Coerce *value* to an int inside ``[low, high]``.

    Non-numeric input (``None``, ``"abc"``, NaN) falls back to *default*
    before clamping.
    """
    try:
        number = int(float(value))  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        number = default
    return max(low, min(high, number))
