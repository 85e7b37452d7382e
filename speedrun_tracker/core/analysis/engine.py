from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from core.analysis.aggregator import FleetAggregator
from core.analysis.classifier import WorldClassifier
from core.analysis.errors import WorldsRootNotFoundError
from core.analysis.heuristics import HeuristicThresholds
from core.analysis.models import Statistics, WorldOutcome
from core.analysis.probe import FileMetadataProbe


class AnalysisEngine:
    """Runs one synchronous scan over every world directory under a root.

    A missing root is the only failure surfaced to the caller. Worlds that
    fail to probe are logged and left out of the statistics. The engine keeps
    no guard against overlapping calls; callers serialize scans.
    """

    def __init__(
        self,
        thresholds: HeuristicThresholds | None = None,
        logger: logging.Logger | None = None,
        probe: FileMetadataProbe | None = None,
        classifier: WorldClassifier | None = None,
        aggregator: FleetAggregator | None = None,
    ) -> None:
        self._logger = logger or logging.getLogger("speedrun_tracker.analysis.engine")
        self._thresholds = thresholds or HeuristicThresholds()
        self._probe = probe or FileMetadataProbe(self._logger.getChild("probe"))
        self._classifier = classifier or WorldClassifier(self._thresholds, self._logger.getChild("classifier"))
        self._aggregator = aggregator or FleetAggregator(self._thresholds)

    @property
    def thresholds(self) -> HeuristicThresholds:
        return self._thresholds

    def analyze(self, root: Path, now: datetime | None = None) -> Statistics:
        safe_root = root.expanduser()
        if not safe_root.exists() or not safe_root.is_dir():
            self._logger.error("Worlds root does not exist: %s", safe_root)
            raise WorldsRootNotFoundError(safe_root)

        self._logger.info("Scanning worlds root: %s", safe_root)

        outcomes = [self.analyze_world(world_dir) for world_dir in self._list_world_dirs(safe_root)]
        facts = [outcome.fact for outcome in outcomes if outcome.fact is not None]

        skipped = len(outcomes) - len(facts)
        statistics = self._aggregator.aggregate(facts, now=now)

        self._logger.info(
            "Scan finished: worlds=%s played=%s abandoned=%s skipped=%s",
            statistics.total_worlds,
            statistics.worlds_played,
            statistics.worlds_abandoned,
            skipped,
        )
        return statistics

    def analyze_world(self, world_dir: Path) -> WorldOutcome:
        try:
            probe = self._probe.probe(world_dir)
            fact = self._classifier.classify(probe)
        except Exception as exc:
            self._logger.warning("World skipped: %s (%s)", world_dir.name, exc)
            return WorldOutcome(path=world_dir, error=str(exc))
        return WorldOutcome(path=world_dir, fact=fact)

    def _list_world_dirs(self, root: Path) -> list[Path]:
        try:
            entries = list(root.iterdir())
        except OSError as exc:
            self._logger.error("Could not list worlds root %s: %s", root, exc)
            return []

        world_dirs: list[Path] = []
        for entry in entries:
            try:
                if entry.is_dir():
                    world_dirs.append(entry)
            except OSError:
                self._logger.warning("World skipped: %s (not accessible)", entry.name)
        return sorted(world_dirs, key=lambda path: path.name)
