from core.analysis.aggregator import FleetAggregator
from core.analysis.classifier import WorldClassifier
from core.analysis.engine import AnalysisEngine
from core.analysis.errors import AnalysisError, WorldsRootNotFoundError
from core.analysis.heuristics import HeuristicThresholds
from core.analysis.models import FileStamp, PlayedCriteria, Statistics, WorldFact, WorldOutcome, WorldProbe
from core.analysis.probe import FileMetadataProbe

__all__ = [
    "AnalysisEngine",
    "AnalysisError",
    "FileMetadataProbe",
    "FileStamp",
    "FleetAggregator",
    "HeuristicThresholds",
    "PlayedCriteria",
    "Statistics",
    "WorldClassifier",
    "WorldFact",
    "WorldOutcome",
    "WorldProbe",
    "WorldsRootNotFoundError",
]
