"""User-facing application settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from courttime.core.enums import Baseline, CapacityPolicy, PeriodView

DATA_DIR_ENV = "COURTTIME_DATA_DIR"
LOG_LEVEL_ENV = "COURTTIME_LOG_LEVEL"

CAPACITY_NOTICE_MS = 3000


@dataclass
class AppSettings:
    """All user-configurable display and behaviour settings."""

    language: str = "English"
    baseline: Baseline = Baseline.GOAL
    period_view: PeriodView = PeriodView.CURRENT
    capacity_policy: CapacityPolicy = CapacityPolicy.WARN


def resolve_data_dir(default: Path | str | None = None) -> Path:
    """``$COURTTIME_DATA_DIR`` if set, else *default*, else ``~/.courttime``."""
    env = os.environ.get(DATA_DIR_ENV)
    if env:
        return Path(env).expanduser()
    if default:
        return Path(default)
    return Path.home() / ".courttime"
