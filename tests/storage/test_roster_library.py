"""Tests for RosterLibrary."""

import json
from pathlib import Path

from courttime.storage.roster_library import (
    ROSTERS_FILE_NAME,
    RosterLibrary,
    roster_key,
)
from courttime.storage.snapshot import RosterEntry

ENTRY = RosterEntry(("Ann", "Bea"), num_players=2, on_court=1)


class TestRosterKey:
    def test_trims(self) -> None:
        assert roster_key("  Saturday ") == "Saturday"

    def test_blank_falls_back(self) -> None:
        assert roster_key("   ") == "Roster"
        assert roster_key(None) == "Roster"


class TestRosterLibrary:
    def test_empty(self, tmp_path: Path) -> None:
        library = RosterLibrary(tmp_path)
        assert len(library) == 0
        assert library.names() == []

    def test_save_persists(self, tmp_path: Path) -> None:
        key = RosterLibrary(tmp_path).save(" Home ", ENTRY)
        assert key == "Home"
        reloaded = RosterLibrary(tmp_path)
        assert "Home" in reloaded
        assert reloaded.get("Home") == ENTRY

    def test_save_overwrites(self, tmp_path: Path) -> None:
        library = RosterLibrary(tmp_path)
        library.save("Home", ENTRY)
        other = RosterEntry(("Cat",), num_players=1, on_court=1)
        library.save("Home", other)
        assert len(library) == 1
        assert library.get("Home") == other

    def test_names_sorted(self, tmp_path: Path) -> None:
        library = RosterLibrary(tmp_path)
        library.save("b", ENTRY)
        library.save("a", ENTRY)
        assert library.names() == ["a", "b"]

    def test_delete(self, tmp_path: Path) -> None:
        library = RosterLibrary(tmp_path)
        library.save("Home", ENTRY)
        assert library.delete("Home")
        assert not library.delete("Home")
        assert "Home" not in RosterLibrary(tmp_path)

    def test_malformed_entries_skipped(self, tmp_path: Path) -> None:
        (tmp_path / ROSTERS_FILE_NAME).write_text(
            json.dumps({"Good": ENTRY.to_dict(), "Bad": 17}), encoding="utf-8"
        )
        library = RosterLibrary(tmp_path)
        assert library.names() == ["Good"]

    def test_malformed_file(self, tmp_path: Path) -> None:
        (tmp_path / ROSTERS_FILE_NAME).write_text("[1, 2", encoding="utf-8")
        assert len(RosterLibrary(tmp_path)) == 0
