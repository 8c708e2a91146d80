"""RosterResizer — keeps engine state shaped like the configuration."""

from __future__ import annotations

import logging
import math
from dataclasses import replace

from courttime.core.limits import MS_PER_MINUTE
from courttime.game.engine import GameClockEngine
from courttime.game.interfaces import GameConfig

_LOGGER = logging.getLogger(__name__)


class RosterResizer:
    """Reshapes ledger and player table after a configuration change.

    :meth:`settle` works from the full requested configuration rather than
    from the individual field that changed, so applying the same request
    twice, or player-count and format changes in either order, ends in the
    same state.
    """

    __slots__ = ("_engine",)

    def __init__(self, engine: GameClockEngine) -> None:
        self._engine = engine

    def settle(self, requested: GameConfig) -> GameConfig:
        """Apply *requested* to the engine and return the configuration in force.

        ``on_court`` is reconciled against ``num_players`` first. A period
        length shorter than time already played in a surviving period is
        raised to the smallest whole minute that still contains it.
        """
        config = requested
        if config.on_court > config.num_players:
            config = replace(config, on_court=config.num_players)

        engine = self._engine
        with engine.locked():
            ledger = engine.ledger
            ledger.reshape(config.num_periods)

            needed = math.ceil(ledger.longest_elapsed_ms / MS_PER_MINUTE)
            if config.period_minutes < needed:
                _LOGGER.debug(
                    "Period length %dm below elapsed time; keeping %dm",
                    config.period_minutes,
                    needed,
                )
                config = replace(config, period_minutes=needed)
            ledger.set_period_length(config.period_length_ms)

            engine.table.reshape(
                config.num_players, config.num_periods, config.on_court
            )
            engine.clamp_current_period()
        return config
