from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path


@dataclass(frozen=True, slots=True)
class FileStamp:
    name: str
    created_at: datetime
    modified_at: datetime


@dataclass(frozen=True, slots=True)
class WorldProbe:
    name: str
    path: Path
    created_at: datetime
    modified_at: datetime
    accessed_at: datetime
    total_size_bytes: int
    chunk_count: int
    db_file_count: int
    file_mtimes: tuple[datetime, ...]
    key_files: tuple[FileStamp, ...]


@dataclass(frozen=True, slots=True)
class PlayedCriteria:
    size_check: bool
    chunk_check: bool
    modification_check: bool
    activity_check: bool
    required: int = 2

    @property
    def passed(self) -> int:
        return sum(
            (self.size_check, self.chunk_check, self.modification_check, self.activity_check)
        )

    @property
    def played(self) -> bool:
        return self.passed >= self.required


@dataclass(frozen=True, slots=True)
class WorldFact:
    name: str
    path: Path
    created_at: datetime
    modified_at: datetime
    accessed_at: datetime
    total_size_bytes: int
    chunk_count: int
    db_file_count: int
    time_to_first_activity: timedelta
    modification_count: int
    estimated_playtime: timedelta
    criteria: PlayedCriteria

    @property
    def played(self) -> bool:
        return self.criteria.played


@dataclass(frozen=True, slots=True)
class WorldOutcome:
    path: Path
    fact: WorldFact | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.fact is not None


@dataclass(frozen=True, slots=True)
class Statistics:
    total_worlds: int
    worlds_played: int
    worlds_abandoned: int
    reset_ratio: float
    average_playtime: timedelta
    average_time_to_first_activity: timedelta
    total_storage_bytes: int
    average_world_size_bytes: int
    today_resets: int
    week_resets: int
    fastest_reset: timedelta | None
    longest_session: timedelta | None
    worlds: tuple[WorldFact, ...]

    @classmethod
    def empty(cls) -> Statistics:
        return cls(
            total_worlds=0,
            worlds_played=0,
            worlds_abandoned=0,
            reset_ratio=0.0,
            average_playtime=timedelta(0),
            average_time_to_first_activity=timedelta(0),
            total_storage_bytes=0,
            average_world_size_bytes=0,
            today_resets=0,
            week_resets=0,
            fastest_reset=None,
            longest_session=None,
            worlds=(),
        )
