from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Callable, Iterable, TypeVar

from core.analysis.heuristics import HeuristicThresholds
from core.analysis.models import FileStamp, PlayedCriteria, WorldFact, WorldProbe

_T = TypeVar("_T")

_ZERO = timedelta(0)


class WorldClassifier:
    """Turns probed metadata into a WorldFact.

    Each derived quantity is computed independently; a failure in one falls
    back to that quantity's zero value and leaves the others intact.
    """

    def __init__(
        self,
        thresholds: HeuristicThresholds | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._thresholds = thresholds or HeuristicThresholds()
        self._logger = logger or logging.getLogger("speedrun_tracker.analysis.classifier")

    @property
    def thresholds(self) -> HeuristicThresholds:
        return self._thresholds

    def classify(self, probe: WorldProbe) -> WorldFact:
        modification_count = self._guarded(
            "modification count",
            probe,
            lambda: self.count_modifications(probe.key_files, probe.chunk_count),
            0,
        )
        first_activity = self._guarded(
            "time to first activity",
            probe,
            lambda: self.time_to_first_activity(probe.created_at, probe.file_mtimes),
            _ZERO,
        )
        playtime = self._guarded(
            "playtime",
            probe,
            lambda: self.estimate_playtime(probe.file_mtimes),
            _ZERO,
        )
        criteria = self.evaluate_criteria(
            total_size_bytes=probe.total_size_bytes,
            chunk_count=probe.chunk_count,
            modification_count=modification_count,
            time_to_first_activity=first_activity,
        )

        self._logger.debug(
            "Classified %s: size=%s chunks=%s mods=%s first_activity=%s criteria=%s/4 played=%s",
            probe.name,
            probe.total_size_bytes,
            probe.chunk_count,
            modification_count,
            first_activity,
            criteria.passed,
            criteria.played,
        )

        return WorldFact(
            name=probe.name,
            path=probe.path,
            created_at=probe.created_at,
            modified_at=probe.modified_at,
            accessed_at=probe.accessed_at,
            total_size_bytes=max(0, probe.total_size_bytes),
            chunk_count=max(0, probe.chunk_count),
            db_file_count=max(0, probe.db_file_count),
            time_to_first_activity=first_activity,
            modification_count=modification_count,
            estimated_playtime=playtime,
            criteria=criteria,
        )

    def count_modifications(self, key_files: Iterable[FileStamp], chunk_count: int) -> int:
        # Chunk files are added on top of the key file writes.
        rewritten = sum(
            1 for stamp in key_files if stamp.modified_at - stamp.created_at > self._thresholds.write_skew
        )
        return rewritten + max(0, chunk_count)

    @staticmethod
    def time_to_first_activity(created_at: datetime, file_mtimes: Iterable[datetime]) -> timedelta:
        later = [mtime for mtime in file_mtimes if mtime > created_at]
        if not later:
            return _ZERO
        return min(later) - created_at

    def estimate_playtime(self, file_mtimes: Iterable[datetime]) -> timedelta:
        ordered = sorted(file_mtimes)
        if len(ordered) < 2:
            return _ZERO

        total = _ZERO
        for previous, current in zip(ordered, ordered[1:]):
            gap = current - previous
            if gap < self._thresholds.idle_gap:
                total += gap
        return total

    def evaluate_criteria(
        self,
        *,
        total_size_bytes: int,
        chunk_count: int,
        modification_count: int,
        time_to_first_activity: timedelta,
    ) -> PlayedCriteria:
        thresholds = self._thresholds
        return PlayedCriteria(
            size_check=total_size_bytes > thresholds.min_played_size_bytes,
            chunk_check=chunk_count > thresholds.min_chunk_files,
            modification_check=modification_count > thresholds.min_modifications,
            activity_check=time_to_first_activity > thresholds.min_first_activity,
            required=thresholds.required_criteria,
        )

    def _guarded(self, label: str, probe: WorldProbe, compute: Callable[[], _T], default: _T) -> _T:
        try:
            return compute()
        except Exception:
            self._logger.debug("Failed to compute %s for %s", label, probe.name, exc_info=True)
            return default
