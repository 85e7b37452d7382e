from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields, replace
from datetime import timedelta
from typing import Any, Mapping

_logger = logging.getLogger("speedrun_tracker.analysis.heuristics")

# Config keys for duration fields are expressed in seconds.
_DURATION_FIELDS = {
    "min_first_activity",
    "idle_gap",
    "fastest_reset_ceiling",
    "write_skew",
}


@dataclass(frozen=True, slots=True)
class HeuristicThresholds:
    """Tuning constants for the played/abandoned classifier and the aggregator.

    The defaults are empirical values observed on Bedrock speedrun worlds. A
    world counts as played when at least ``required_criteria`` of the four
    criteria hold.
    """

    min_played_size_bytes: int = 50_000
    min_chunk_files: int = 5
    min_modifications: int = 3
    min_first_activity: timedelta = timedelta(seconds=2)
    idle_gap: timedelta = timedelta(minutes=5)
    fastest_reset_ceiling: timedelta = timedelta(minutes=1)
    write_skew: timedelta = timedelta(seconds=5)
    required_criteria: int = 2

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> HeuristicThresholds:
        thresholds = cls()
        known = {item.name for item in fields(cls)}
        overrides: dict[str, Any] = {}

        for key, value in raw.items():
            if key not in known:
                _logger.warning("Unknown heuristic setting ignored: %s", key)
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                _logger.warning("Invalid value for heuristic %s ignored: %r", key, value)
                continue

            try:
                if not math.isfinite(value) or value < 0:
                    raise ValueError(value)
                if key in _DURATION_FIELDS:
                    overrides[key] = timedelta(seconds=float(value))
                else:
                    overrides[key] = int(value)
            except (OverflowError, ValueError):
                _logger.warning("Invalid value for heuristic %s ignored: %r", key, value)

        if not overrides:
            return thresholds
        return replace(thresholds, **overrides)

    def to_mapping(self) -> dict[str, int | float]:
        result: dict[str, int | float] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, timedelta):
                result[item.name] = value.total_seconds()
            else:
                result[item.name] = value
        return result
