"""Game clock layer — ticker, ledger, accrual table, engine, session.

Quick start::

    from courttime.game import GameConfig, GameSession

    session = GameSession(GameConfig(num_players=10, on_court=5))
    session.start()
    session.engine.poll()          # called on a timer by the UI
    report = session.metrics()
    report.goal_per_player_full_game_ms
"""

from courttime.game.engine import EngineEvents, EngineSnapshot, GameClockEngine
from courttime.game.interfaces import GameConfig, IClock, TimeSource, monotonic_ms
from courttime.game.ledger import PeriodLedger
from courttime.game.metrics import (
    FairnessReport,
    PlayerStanding,
    compute_metrics,
    goal_per_player_ms,
    ideal_ms_so_far,
)
from courttime.game.overtime import OvertimeClock
from courttime.game.resizer import RosterResizer
from courttime.game.roster import Player, PlayerAccrualTable, PlayerSnapshot
from courttime.game.session import GameSession, SessionEvents
from courttime.game.ticker import ClockTicker
from courttime.game.timeouts import TimeoutLedger

__all__ = [
    # Interfaces
    "GameConfig",
    "IClock",
    "TimeSource",
    "monotonic_ms",
    # Concrete
    "ClockTicker",
    "EngineEvents",
    "EngineSnapshot",
    "FairnessReport",
    "GameClockEngine",
    "GameSession",
    "OvertimeClock",
    "PeriodLedger",
    "Player",
    "PlayerAccrualTable",
    "PlayerSnapshot",
    "PlayerStanding",
    "RosterResizer",
    "SessionEvents",
    "TimeoutLedger",
    # Metrics
    "compute_metrics",
    "goal_per_player_ms",
    "ideal_ms_so_far",
]
