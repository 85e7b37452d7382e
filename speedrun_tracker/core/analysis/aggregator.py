from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable

from core.analysis.heuristics import HeuristicThresholds
from core.analysis.models import Statistics, WorldFact

_ZERO = timedelta(0)
_WEEK = timedelta(days=7)


class FleetAggregator:
    def __init__(self, thresholds: HeuristicThresholds | None = None) -> None:
        self._thresholds = thresholds or HeuristicThresholds()

    def aggregate(self, facts: Iterable[WorldFact], now: datetime | None = None) -> Statistics:
        worlds = list(facts)
        if not worlds:
            return Statistics.empty()

        played = [world for world in worlds if world.played]
        abandoned = [world for world in worlds if not world.played]

        today = (now or datetime.now()).replace(hour=0, minute=0, second=0, microsecond=0)
        week_start = today - _WEEK

        total_storage = sum(world.total_size_bytes for world in worlds)

        return Statistics(
            total_worlds=len(worlds),
            worlds_played=len(played),
            worlds_abandoned=len(abandoned),
            reset_ratio=len(abandoned) / len(worlds),
            average_playtime=self._mean([world.estimated_playtime for world in played]),
            average_time_to_first_activity=self._mean(
                [world.time_to_first_activity for world in worlds]
            ),
            total_storage_bytes=total_storage,
            average_world_size_bytes=total_storage // len(worlds),
            today_resets=sum(1 for world in abandoned if world.created_at >= today),
            week_resets=sum(1 for world in abandoned if world.created_at >= week_start),
            fastest_reset=self._fastest_reset(abandoned),
            longest_session=self._longest_session(played),
            # sorted() keeps encounter order for equal keys, even with reverse=True.
            worlds=tuple(sorted(worlds, key=lambda world: world.created_at, reverse=True)),
        )

    def _fastest_reset(self, abandoned: list[WorldFact]) -> timedelta | None:
        ceiling = self._thresholds.fastest_reset_ceiling
        candidates = [
            world.time_to_first_activity
            for world in abandoned
            if _ZERO < world.time_to_first_activity < ceiling
        ]
        return min(candidates) if candidates else None

    @staticmethod
    def _longest_session(played: list[WorldFact]) -> timedelta | None:
        candidates = [world.estimated_playtime for world in played if world.estimated_playtime > _ZERO]
        return max(candidates) if candidates else None

    @staticmethod
    def _mean(values: list[timedelta]) -> timedelta:
        if not values:
            return _ZERO
        return sum(values, _ZERO) / len(values)
