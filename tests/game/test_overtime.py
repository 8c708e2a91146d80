"""Tests for OvertimeClock."""

import pytest

from courttime.game.overtime import OvertimeClock


@pytest.fixture
def clock(fake_time) -> OvertimeClock:
    return OvertimeClock(time_source=fake_time)


class TestOvertimeClock:
    def test_defaults(self, clock: OvertimeClock) -> None:
        assert clock.length_ms == 180_000
        assert clock.elapsed_ms == 0
        assert not clock.is_running

    def test_poll_accumulates(self, clock: OvertimeClock, fake_time) -> None:
        clock.start()
        fake_time.advance(200)
        assert clock.poll() == 200
        assert clock.remaining_ms == 179_800

    def test_clamps_at_cap_and_keeps_running(self, clock: OvertimeClock) -> None:
        clock.start()
        assert clock.tick(200_000) == 180_000
        assert clock.is_expired
        assert clock.is_running
        assert clock.tick(200) == 0

    def test_toggle(self, clock: OvertimeClock, fake_time) -> None:
        clock.toggle()
        assert clock.is_running
        fake_time.advance(700)
        clock.toggle()
        assert not clock.is_running
        assert clock.elapsed_ms == 700

    def test_reset(self, clock: OvertimeClock) -> None:
        clock.start()
        clock.tick(1_000)
        clock.reset()
        assert not clock.is_running
        assert clock.elapsed_ms == 0

    @pytest.mark.parametrize(
        ("stored", "expected"),
        [(45_000, 45_000), (999_999, 180_000), (-5, 0), ("junk", 0)],
    )
    def test_restore(self, clock: OvertimeClock, stored: object, expected: int) -> None:
        clock.restore(stored)
        assert clock.elapsed_ms == expected

    def test_bad_ticks_ignored(self, clock: OvertimeClock) -> None:
        clock.start()
        assert clock.tick(float("nan")) == 0
        assert clock.tick(-100) == 0
        assert clock.elapsed_ms == 0
