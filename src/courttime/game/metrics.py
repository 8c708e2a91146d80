"""Fairness metrics derived on demand from an engine snapshot.

Nothing here holds state: every value is recomputed from the snapshot and
configuration passed in, so a reading can never go stale.
"""

from __future__ import annotations

from dataclasses import dataclass

from courttime.core.enums import Baseline, PeriodView
from courttime.game.engine import EngineSnapshot
from courttime.game.interfaces import GameConfig


def ideal_ms_so_far(game_elapsed_ms: float, on_court: int, num_players: int) -> float:
    """Fair share of the time played so far; 0 for an empty roster."""
    if num_players <= 0:
        return 0.0
    return game_elapsed_ms * (on_court / num_players)


def goal_per_player_ms(
    num_periods: int, period_length_ms: int, on_court: int, num_players: int
) -> float:
    """Fair share of the full scheduled game; 0 for an empty roster."""
    if num_players <= 0:
        return 0.0
    return (num_periods * period_length_ms * on_court) / num_players


def chart_minutes(total_ms: float) -> float:
    """Minutes rounded to one decimal, as plotted in the minutes chart."""
    return round(total_ms / 6_000) / 10


@dataclass(frozen=True, slots=True)
class PlayerStanding:
    """A player's accrued time measured against the selected baseline."""

    index: int
    player_id: int
    name: str
    active: bool
    total_ms: int
    period_ms: tuple[int, ...]
    delta_ms: float
    progress: float

    @property
    def minutes(self) -> float:
        return chart_minutes(self.total_ms)

    @property
    def is_over(self) -> bool:
        return self.delta_ms > 0

    @property
    def is_under(self) -> bool:
        return self.delta_ms < 0


@dataclass(frozen=True, slots=True)
class FairnessReport:
    game_elapsed_ms: int
    ideal_ms_so_far: float
    goal_per_player_full_game_ms: float
    baseline: Baseline = Baseline.GOAL

    @property
    def baseline_ms(self) -> float:
        if self.baseline is Baseline.GOAL:
            return self.goal_per_player_full_game_ms
        return self.ideal_ms_so_far

    def delta(self, total_ms: float) -> float:
        return total_ms - self.baseline_ms

    def progress(self, total_ms: float) -> float:
        """Fraction of the baseline reached, clamped to ``[0, 1]``."""
        base = self.baseline_ms
        if base <= 0:
            return 0.0
        return max(0.0, min(1.0, total_ms / base))


def compute_metrics(
    snapshot: EngineSnapshot,
    config: GameConfig,
    baseline: Baseline = Baseline.GOAL,
) -> FairnessReport:
    elapsed = snapshot.game_elapsed_ms
    return FairnessReport(
        game_elapsed_ms=elapsed,
        ideal_ms_so_far=ideal_ms_so_far(elapsed, config.on_court, config.num_players),
        goal_per_player_full_game_ms=goal_per_player_ms(
            snapshot.num_periods,
            snapshot.period_length_ms,
            config.on_court,
            config.num_players,
        ),
        baseline=baseline,
    )


def standings(
    snapshot: EngineSnapshot, report: FairnessReport
) -> list[PlayerStanding]:
    """Players ordered on-court first, then by most time played."""
    rows = [
        PlayerStanding(
            index=i,
            player_id=p.player_id,
            name=p.name,
            active=p.active,
            total_ms=p.total_ms,
            period_ms=p.period_ms,
            delta_ms=report.delta(p.total_ms),
            progress=report.progress(p.total_ms),
        )
        for i, p in enumerate(snapshot.players)
    ]
    rows.sort(key=lambda r: (not r.active, -r.total_ms))
    return rows


def displayed_periods(snapshot: EngineSnapshot, view: PeriodView) -> list[int]:
    """Period columns to show: the current one, or every completed one."""
    if view is PeriodView.COMPLETED:
        completed = snapshot.completed_periods()
        if completed:
            return completed
    return [snapshot.current_period]


def needs_subs(snapshot: EngineSnapshot, on_court: int) -> bool:
    return sum(1 for p in snapshot.players if p.active) != on_court
