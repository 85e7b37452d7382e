from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Iterator

from core.analysis.models import Statistics

_SIZE_UNITS = ("B", "KB", "MB", "GB")

STATUS_PLAYED = "PLAYED"
STATUS_RESET = "RESET"


@dataclass(frozen=True, slots=True)
class WorldDisplayRow:
    world_name: str
    created: str
    status: str
    playtime: str
    size: str


def format_duration(value: timedelta) -> str:
    total_seconds = value.total_seconds()
    if total_seconds >= 3600:
        hours, remainder = divmod(int(total_seconds), 3600)
        return f"{hours}h {remainder // 60}m"
    if total_seconds >= 60:
        minutes, seconds = divmod(int(total_seconds), 60)
        return f"{minutes}m {seconds}s"
    return f"{total_seconds:.1f}s"


def format_optional_duration(value: timedelta | None) -> str:
    if value is None:
        return "N/A"
    return format_duration(value)


def format_bytes(size_bytes: int, decimals: int = 1) -> str:
    value = float(size_bytes)
    order = 0
    while value >= 1024 and order < len(_SIZE_UNITS) - 1:
        order += 1
        value /= 1024
    return f"{value:.{decimals}f} {_SIZE_UNITS[order]}"


def world_display_rows(statistics: Statistics) -> Iterator[WorldDisplayRow]:
    for world in statistics.worlds:
        yield WorldDisplayRow(
            world_name=world.name,
            created=world.created_at.strftime("%m/%d %H:%M"),
            status=STATUS_PLAYED if world.played else STATUS_RESET,
            playtime=format_duration(world.estimated_playtime),
            size=format_bytes(world.total_size_bytes),
        )
