"""Core domain vocabulary — enums and time formatting, no Qt dependencies.

Quick start::

    from courttime.core import PeriodFormat, format_clock

    format_clock(95_400)                 # "01:35"
    PeriodFormat.QUARTERS.num_periods    # 4
"""

from courttime.core.enums import (
    Baseline,
    CapacityPolicy,
    ClockPhase,
    PeriodFormat,
    PeriodView,
)
from courttime.core.timefmt import (
    format_clock,
    format_signed_delta,
    period_label,
    period_labels,
)

__all__ = [
    "Baseline",
    "CapacityPolicy",
    "ClockPhase",
    "PeriodFormat",
    "PeriodView",
    "format_clock",
    "format_signed_delta",
    "period_label",
    "period_labels",
]
