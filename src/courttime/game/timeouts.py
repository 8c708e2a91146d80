"""TimeoutLedger — team timeouts, with one extra granted per overtime."""

from __future__ import annotations

from courttime.core.limits import BASE_TIMEOUTS


class TimeoutLedger:
    __slots__ = ("_used", "_overtimes", "_base")

    def __init__(
        self, base: int = BASE_TIMEOUTS, used: int = 0, overtimes: int = 0
    ) -> None:
        self._base = max(0, base)
        self._overtimes = max(0, overtimes)
        self._used = max(0, min(used, self.cap))

    @property
    def used(self) -> int:
        return self._used

    @property
    def overtimes(self) -> int:
        return self._overtimes

    @property
    def cap(self) -> int:
        return self._base + self._overtimes

    @property
    def remaining(self) -> int:
        return max(0, self.cap - self._used)

    def use(self) -> int:
        self._used = min(self.cap, self._used + 1)
        return self._used

    def undo(self) -> int:
        self._used = max(0, self._used - 1)
        return self._used

    def add_overtime(self) -> int:
        self._overtimes += 1
        return self._overtimes

    def reset(self) -> None:
        self._used = 0
        self._overtimes = 0

    def restore(self, used: int, overtimes: int) -> None:
        self._overtimes = max(0, overtimes)
        self._used = max(0, min(used, self.cap))
