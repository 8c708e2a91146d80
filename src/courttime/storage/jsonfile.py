"""Fail-soft JSON file helpers shared by the storage collaborators."""

from __future__ import annotations

import json
import logging
from pathlib import Path

_LOGGER = logging.getLogger(__name__)


def read_json(path: Path) -> object | None:
    """Parsed contents of *path*, or None when missing, unreadable or malformed."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as exc:
        _LOGGER.warning("Cannot read %s: %s", path, exc)
        return None
    try:
        return json.loads(text)
    except ValueError as exc:
        _LOGGER.warning("Ignoring malformed JSON in %s: %s", path, exc)
        return None


def write_json(path: Path, data: object) -> bool:
    """Write *data* atomically; returns False (and logs) instead of raising."""
    tmp = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        tmp.replace(path)
    except (OSError, TypeError, ValueError) as exc:
        _LOGGER.warning("Cannot write %s: %s", path, exc)
        return False
    return True
