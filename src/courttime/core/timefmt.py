"""Duration formatting for everything surfaced outside the engine."""

from __future__ import annotations

import math

from courttime.core.enums import PeriodFormat


def format_clock(ms: float) -> str:
    """Render *ms* as zero-padded ``mm:ss``, floor-truncated to whole seconds.

    Negative or non-finite input renders as ``00:00``.
    """
    if not math.isfinite(ms) or ms <= 0:
        return "00:00"
    total_seconds = int(ms // 1000)
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"


def format_signed_delta(ms: float) -> str:
    """``+mm:ss`` / ``-mm:ss`` for over/under-played time, ``±00:00`` when even."""
    if ms == 0:
        return "±00:00"
    sign = "+" if ms > 0 else "-"
    return f"{sign}{format_clock(abs(ms))}"


def period_label(fmt: PeriodFormat, index: int) -> str:
    return f"{fmt.label_prefix}{index + 1}"


def period_labels(fmt: PeriodFormat, count: int | None = None) -> list[str]:
    n = fmt.num_periods if count is None else count
    return [period_label(fmt, i) for i in range(n)]
