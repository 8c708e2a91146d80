"""RosterLibrary — named rosters saved and loaded on explicit request."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from courttime.storage.jsonfile import read_json, write_json
from courttime.storage.snapshot import RosterEntry

_LOGGER = logging.getLogger(__name__)

ROSTERS_FILE_NAME = "pt_rosters_v1.json"
FALLBACK_ROSTER_NAME = "Roster"


def roster_key(name: str | None) -> str:
    """Trimmed roster name, or ``"Roster"`` when blank."""
    return (name or "").strip() or FALLBACK_ROSTER_NAME


class RosterLibrary:
    """Mapping of roster name → :class:`RosterEntry`, mirrored to a JSON file.

    The in-memory mapping stays authoritative when the file cannot be
    written; unreadable entries are skipped on load.
    """

    __slots__ = ("_path", "_entries")

    def __init__(self, data_dir: Path) -> None:
        self._path = Path(data_dir) / ROSTERS_FILE_NAME
        self._entries: dict[str, RosterEntry] = {}
        self.reload()

    @property
    def path(self) -> Path:
        return self._path

    def reload(self) -> None:
        raw = read_json(self._path)
        self._entries = {}
        if not isinstance(raw, Mapping):
            return
        for name, value in raw.items():
            entry = RosterEntry.from_dict(value)
            if isinstance(name, str) and entry is not None:
                self._entries[name] = entry
            else:
                _LOGGER.warning("Skipping malformed roster %r", name)

    def names(self) -> list[str]:
        return sorted(self._entries)

    def get(self, name: str) -> RosterEntry | None:
        return self._entries.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def save(self, name: str | None, entry: RosterEntry) -> str:
        """Store *entry* under the trimmed *name*; returns the key used."""
        key = roster_key(name)
        self._entries[key] = entry
        self._flush()
        _LOGGER.info("Saved roster %r (%d players)", key, len(entry.player_names))
        return key

    def delete(self, name: str) -> bool:
        if self._entries.pop(name, None) is None:
            return False
        self._flush()
        _LOGGER.info("Deleted roster %r", name)
        return True

    def _flush(self) -> None:
        write_json(
            self._path, {name: e.to_dict() for name, e in self._entries.items()}
        )
