"""ClockTicker — turns time-source samples into elapsed deltas."""

from __future__ import annotations

import math

from courttime.game.interfaces import TimeSource, monotonic_ms


def sanitize_delta(delta: object) -> int:
    """Whole non-negative milliseconds; negative, NaN or junk input gives 0."""
    try:
        value = float(delta)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(value) or value <= 0:
        return 0
    return int(value)


class ClockTicker:
    """Samples a monotonic time source and reports time since the last sample.

    Only whole milliseconds are handed out; the fractional remainder stays
    on the reference point so nothing is lost across many short ticks.
    The ticker owns no domain state.
    """

    __slots__ = ("_time_source", "_last_sample", "_armed")

    def __init__(self, time_source: TimeSource | None = None) -> None:
        self._time_source: TimeSource = time_source or monotonic_ms
        self._last_sample: float = 0.0
        self._armed = False

    @property
    def is_armed(self) -> bool:
        return self._armed

    def arm(self) -> None:
        """Set the reference point to *now*; the next sample measures from here."""
        self._last_sample = self._read()
        self._armed = True

    def disarm(self) -> None:
        self._armed = False

    def sample(self) -> int:
        """Milliseconds elapsed since the previous sample (0 when disarmed).

        A backwards or unreadable clock yields 0 and re-bases the reference
        point, so a later recovery does not produce one huge jump.
        """
        if not self._armed:
            return 0
        now = self._read()
        if not math.isfinite(now):
            return 0
        if not math.isfinite(self._last_sample):
            self._last_sample = now
            return 0
        raw = now - self._last_sample
        delta = sanitize_delta(raw)
        if raw < 0:
            self._last_sample = now
        else:
            self._last_sample += delta
        return delta

    def _read(self) -> float:
        try:
            return float(self._time_source())
        except (TypeError, ValueError):
            return math.nan
