"""TickDriver — schedules clock polls on the Qt event loop."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from courttime.game.interfaces import IClock


class TickDriver(QObject):
    """Polls an :class:`IClock` at a fixed cadence while it runs.

    The timer is single-shot and re-armed only after a poll returns, so at
    most one tick is ever in flight. A late timer just yields a larger delta
    on the next poll; nothing is lost or counted twice.
    """

    ticked = pyqtSignal(int)  # ms applied by the poll
    stopped = pyqtSignal()

    def __init__(
        self, clock: IClock, interval_ms: int, parent: QObject | None = None
    ) -> None:
        super().__init__(parent)
        self._clock = clock
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def is_active(self) -> bool:
        return self._timer.isActive()

    def sync(self) -> None:
        """Arm or disarm the timer to match the clock's running state."""
        if self._clock.is_running:
            if not self._timer.isActive():
                self._timer.start()
        else:
            self._timer.stop()

    def stop(self) -> None:
        self._timer.stop()

    def _on_timeout(self) -> None:
        applied = self._clock.poll()
        self.ticked.emit(applied)
        if self._clock.is_running:
            self._timer.start()
        else:
            self._timer.stop()
            self.stopped.emit()
