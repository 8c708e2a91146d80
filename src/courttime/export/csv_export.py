"""Playing-time table export as CSV."""

from __future__ import annotations

import csv
import io
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from courttime.core.timefmt import format_clock
from courttime.game.roster import PlayerSnapshot

_LOGGER = logging.getLogger(__name__)

DEFAULT_FILE_NAME = "playing-time.csv"


def header_row(period_labels: Sequence[str]) -> list[str]:
    return [
        "Player",
        "Total (mm:ss)",
        *(f"{label} (mm:ss)" for label in period_labels),
    ]


def export_rows(
    players: Iterable[PlayerSnapshot], period_labels: Sequence[str]
) -> list[list[str]]:
    """Header plus one ``[name, total, p1, ..., pN]`` row per player."""
    rows = [header_row(period_labels)]
    for p in players:
        rows.append(
            [p.name, format_clock(p.total_ms), *map(format_clock, p.period_ms)]
        )
    return rows


def to_csv(rows: Iterable[Sequence[str]]) -> str:
    """Render *rows* with every cell quoted and ``\\n`` line endings."""
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerows(rows)
    return buf.getvalue().rstrip("\n")


def write_csv(
    path: Path, players: Iterable[PlayerSnapshot], period_labels: Sequence[str]
) -> Path:
    """Write the export to *path*; I/O errors propagate to the caller."""
    path = Path(path)
    path.write_text(to_csv(export_rows(players, period_labels)), encoding="utf-8")
    _LOGGER.info("Exported playing time to %s", path)
    return path
