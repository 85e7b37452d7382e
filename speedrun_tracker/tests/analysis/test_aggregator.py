from __future__ import annotations

from datetime import datetime, timedelta
from pathlib import Path

from core.analysis.aggregator import FleetAggregator
from core.analysis.models import PlayedCriteria, WorldFact

NOW = datetime(2024, 5, 10, 15, 30, 0)

_PLAYED = PlayedCriteria(size_check=True, chunk_check=True, modification_check=False, activity_check=False)
_ABANDONED = PlayedCriteria(size_check=False, chunk_check=False, modification_check=False, activity_check=False)


def _fact(
    name: str,
    *,
    played: bool,
    created_at: datetime = NOW,
    size: int = 0,
    first_activity: float = 0.0,
    playtime: float = 0.0,
) -> WorldFact:
    return WorldFact(
        name=name,
        path=Path("worlds") / name,
        created_at=created_at,
        modified_at=created_at,
        accessed_at=created_at,
        total_size_bytes=size,
        chunk_count=0,
        db_file_count=0,
        time_to_first_activity=timedelta(seconds=first_activity),
        modification_count=0,
        estimated_playtime=timedelta(seconds=playtime),
        criteria=_PLAYED if played else _ABANDONED,
    )


def test_empty_input_gives_zero_statistics() -> None:
    stats = FleetAggregator().aggregate([], now=NOW)

    assert stats.total_worlds == 0
    assert stats.reset_ratio == 0.0
    assert stats.average_playtime == timedelta(0)
    assert stats.average_time_to_first_activity == timedelta(0)
    assert stats.average_world_size_bytes == 0
    assert stats.fastest_reset is None
    assert stats.longest_session is None
    assert stats.worlds == ()


def test_counts_and_ratio() -> None:
    facts = [
        _fact("a", played=True),
        _fact("b", played=False),
        _fact("c", played=False),
        _fact("d", played=False),
    ]
    stats = FleetAggregator().aggregate(facts, now=NOW)

    assert (stats.total_worlds, stats.worlds_played, stats.worlds_abandoned) == (4, 1, 3)
    assert stats.reset_ratio == 0.75
    assert 0.0 <= stats.reset_ratio <= 1.0


def test_average_playtime_only_counts_played_worlds() -> None:
    facts = [
        _fact("a", played=True, playtime=100),
        _fact("b", played=True, playtime=200),
        _fact("c", played=False, playtime=9000),
    ]
    stats = FleetAggregator().aggregate(facts, now=NOW)
    assert stats.average_playtime == timedelta(seconds=150)


def test_average_playtime_zero_without_played_worlds() -> None:
    stats = FleetAggregator().aggregate([_fact("a", played=False, playtime=50)], now=NOW)
    assert stats.average_playtime == timedelta(0)
    assert stats.longest_session is None


def test_average_first_activity_covers_all_worlds() -> None:
    facts = [
        _fact("a", played=True, first_activity=10),
        _fact("b", played=False, first_activity=0),
        _fact("c", played=False, first_activity=20),
    ]
    stats = FleetAggregator().aggregate(facts, now=NOW)
    assert stats.average_time_to_first_activity == timedelta(seconds=10)


def test_storage_totals_and_truncated_average() -> None:
    facts = [
        _fact("a", played=True, size=10),
        _fact("b", played=False, size=11),
    ]
    stats = FleetAggregator().aggregate(facts, now=NOW)
    assert stats.total_storage_bytes == 21
    assert stats.average_world_size_bytes == 10


def test_today_and_week_resets() -> None:
    midnight = NOW.replace(hour=0, minute=0, second=0, microsecond=0)
    facts = [
        _fact("today", played=False, created_at=midnight),
        _fact("yesterday", played=False, created_at=midnight - timedelta(hours=1)),
        _fact("week-edge", played=False, created_at=midnight - timedelta(days=7)),
        _fact("too-old", played=False, created_at=midnight - timedelta(days=7, seconds=1)),
        _fact("played-today", played=True, created_at=NOW),
    ]
    stats = FleetAggregator().aggregate(facts, now=NOW)

    assert stats.today_resets == 1
    assert stats.week_resets == 3
    assert stats.today_resets <= stats.week_resets


def test_small_abandoned_world_created_today_counts_as_reset() -> None:
    stats = FleetAggregator().aggregate([_fact("fresh", played=False, size=1000)], now=NOW)
    assert stats.today_resets == 1
    assert stats.week_resets == 1


def test_fastest_reset_bounds() -> None:
    facts = [
        _fact("zero", played=False, first_activity=0),
        _fact("minute", played=False, first_activity=60),
        _fact("fast", played=False, first_activity=4.5),
        _fact("faster-but-played", played=True, first_activity=1),
        _fact("slow", played=False, first_activity=30),
    ]
    stats = FleetAggregator().aggregate(facts, now=NOW)
    assert stats.fastest_reset == timedelta(seconds=4.5)


def test_fastest_reset_absent_without_qualifying_world() -> None:
    facts = [
        _fact("zero", played=False, first_activity=0),
        _fact("minute", played=False, first_activity=60),
    ]
    stats = FleetAggregator().aggregate(facts, now=NOW)
    assert stats.fastest_reset is None


def test_longest_session_from_played_worlds() -> None:
    facts = [
        _fact("a", played=True, playtime=0),
        _fact("b", played=True, playtime=600),
        _fact("c", played=True, playtime=120),
        _fact("d", played=False, playtime=5000),
    ]
    stats = FleetAggregator().aggregate(facts, now=NOW)
    assert stats.longest_session == timedelta(seconds=600)


def test_worlds_sorted_newest_first_with_stable_ties() -> None:
    older = NOW - timedelta(days=1)
    facts = [
        _fact("old", played=False, created_at=older),
        _fact("tie-1", played=False, created_at=NOW),
        _fact("tie-2", played=True, created_at=NOW),
    ]
    stats = FleetAggregator().aggregate(facts, now=NOW)
    assert [world.name for world in stats.worlds] == ["tie-1", "tie-2", "old"]
