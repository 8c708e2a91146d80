"""Storage collaborators — fail-soft JSON persistence of snapshots and rosters."""

from courttime.storage.roster_library import RosterLibrary, roster_key
from courttime.storage.snapshot import RosterEntry, SessionSnapshot
from courttime.storage.state_store import StateStore

__all__ = [
    "RosterEntry",
    "RosterLibrary",
    "SessionSnapshot",
    "StateStore",
    "roster_key",
]
