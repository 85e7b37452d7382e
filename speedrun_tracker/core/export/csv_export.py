from __future__ import annotations

import csv
import logging
from datetime import datetime
from pathlib import Path

from core.analysis.models import Statistics, WorldFact

_logger = logging.getLogger("speedrun_tracker.export")

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

CSV_HEADER = (
    "World Name",
    "Creation Time",
    "Was Played",
    "Time to First Activity (s)",
    "Estimated Playtime (s)",
    "Size (bytes)",
    "Chunk Count",
    "Modifications",
    "DB Files",
    "Last Modified",
)


def default_export_filename(now: datetime | None = None) -> str:
    stamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    return f"speedrun_stats_{stamp}.csv"


def world_to_row(world: WorldFact) -> list[str]:
    return [
        world.name,
        world.created_at.strftime(TIMESTAMP_FORMAT),
        str(world.played),
        f"{world.time_to_first_activity.total_seconds():.2f}",
        f"{world.estimated_playtime.total_seconds():.2f}",
        str(world.total_size_bytes),
        str(world.chunk_count),
        str(world.modification_count),
        str(world.db_file_count),
        world.modified_at.strftime(TIMESTAMP_FORMAT),
    ]


def export_statistics_csv(statistics: Statistics, target: Path) -> Path:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(CSV_HEADER)
        for world in statistics.worlds:
            writer.writerow(world_to_row(world))

    _logger.info("Exported %s worlds to %s", len(statistics.worlds), target)
    return target
