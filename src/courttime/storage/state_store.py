"""StateStore — persists the session snapshot between launches."""

from __future__ import annotations

import logging
from pathlib import Path

from courttime.storage.jsonfile import read_json, write_json
from courttime.storage.snapshot import SessionSnapshot

_LOGGER = logging.getLogger(__name__)

STATE_FILE_NAME = "pt_state_v2.json"


class StateStore:
    """JSON-file store for :class:`SessionSnapshot`.

    Failures never propagate: a missing or corrupt file loads as None and a
    failed write is logged and reported as False.
    """

    __slots__ = ("_path", "_last_saved")

    def __init__(self, data_dir: Path) -> None:
        self._path = Path(data_dir) / STATE_FILE_NAME
        self._last_saved: SessionSnapshot | None = None

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> SessionSnapshot | None:
        snapshot = SessionSnapshot.from_dict(read_json(self._path))
        if snapshot is not None:
            _LOGGER.debug("Loaded session snapshot from %s", self._path)
        self._last_saved = snapshot
        return snapshot

    def save(self, snapshot: SessionSnapshot) -> bool:
        """Write *snapshot* unless it equals the last one written."""
        if snapshot == self._last_saved:
            return True
        ok = write_json(self._path, snapshot.to_dict())
        if ok:
            self._last_saved = snapshot
        return ok
