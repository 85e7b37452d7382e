from __future__ import annotations

from datetime import datetime

from core.analysis.models import Statistics, WorldFact
from core.export.formatting import format_bytes

_RULE = "=" * 80
_DIVIDER = "-" * 80
_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _optional(value: object | None) -> str:
    return "N/A" if value is None else str(value)


def render_detailed_report(statistics: Statistics, generated_at: datetime | None = None) -> str:
    """Render the plain-text analysis report written to the log after a scan."""
    stamp = (generated_at or datetime.now()).strftime(_TIMESTAMP_FORMAT)
    lines = [
        _RULE,
        f"DETAILED SPEEDRUN ANALYSIS REPORT - {stamp}",
        _RULE,
        "",
        "SUMMARY STATISTICS:",
        f"  Total Worlds: {statistics.total_worlds}",
        f"  Worlds Played: {statistics.worlds_played}",
        f"  Worlds Abandoned: {statistics.worlds_abandoned}",
        f"  Reset Ratio: {statistics.reset_ratio:.2%}",
        f"  Average Playtime: {statistics.average_playtime}",
        f"  Average Time to First Activity: {statistics.average_time_to_first_activity}",
        f"  Total Storage: {format_bytes(statistics.total_storage_bytes, decimals=2)}",
        f"  Average World Size: {format_bytes(statistics.average_world_size_bytes, decimals=2)}",
        "",
        "SESSION STATISTICS:",
        f"  Today's Resets: {statistics.today_resets}",
        f"  This Week's Resets: {statistics.week_resets}",
        f"  Fastest Reset: {_optional(statistics.fastest_reset)}",
        f"  Longest Session: {_optional(statistics.longest_session)}",
        "",
        "WORLD DETAILS:",
        _DIVIDER,
    ]

    for world in statistics.worlds:
        lines.extend(_world_lines(world))
        lines.append(_DIVIDER)

    lines.extend(["", _RULE, ""])
    return "\n".join(lines)


def _world_lines(world: WorldFact) -> list[str]:
    criteria = world.criteria
    return [
        f"World: {world.name}",
        f"  Path: {world.path}",
        f"  Created: {world.created_at.strftime(_TIMESTAMP_FORMAT)}",
        f"  Last Modified: {world.modified_at.strftime(_TIMESTAMP_FORMAT)}",
        f"  Status: {'PLAYED' if world.played else 'ABANDONED'}",
        f"  Time to First Activity: {world.time_to_first_activity}",
        f"  Estimated Playtime: {world.estimated_playtime}",
        f"  Size: {format_bytes(world.total_size_bytes, decimals=2)}",
        f"  Chunk Count: {world.chunk_count}",
        f"  DB Files: {world.db_file_count}",
        f"  Modification Count: {world.modification_count}",
        f"  Detection Scores: {criteria.passed}/4 (need {criteria.required})",
        f"    - Size Check: {criteria.size_check}",
        f"    - Chunk Check: {criteria.chunk_check}",
        f"    - Modification Check: {criteria.modification_check}",
        f"    - Time Check: {criteria.activity_check}",
    ]
