from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from core.analysis.engine import AnalysisEngine
from core.analysis.errors import AnalysisError, WorldsRootNotFoundError
from core.analysis.models import WorldProbe
from core.analysis.probe import FileMetadataProbe


class _FlakyProbe(FileMetadataProbe):
    def probe(self, world_dir: Path) -> WorldProbe:
        if world_dir.name == "broken":
            raise PermissionError("access denied")
        return super().probe(world_dir)


def _played_world(root: Path, folder: str, name: str) -> Path:
    world = root / folder
    db_dir = world / "db"
    db_dir.mkdir(parents=True)
    for index in range(6):
        (db_dir / f"{index:06d}.ldb").write_bytes(b"c" * 10_000)
    (world / "levelname.txt").write_text(name, encoding="utf-8")
    return world


def _fresh_world(root: Path, folder: str) -> Path:
    world = root / folder
    world.mkdir(parents=True)
    (world / "levelname.txt").write_text("New World", encoding="utf-8")
    return world


def test_missing_root_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(WorldsRootNotFoundError) as excinfo:
        AnalysisEngine().analyze(tmp_path / "nope")

    assert isinstance(excinfo.value, AnalysisError)
    assert "nope" in str(excinfo.value)


def test_root_that_is_a_file_is_fatal(tmp_path: Path) -> None:
    root_file = tmp_path / "worlds.txt"
    root_file.write_text("", encoding="utf-8")

    with pytest.raises(WorldsRootNotFoundError):
        AnalysisEngine().analyze(root_file)


def test_empty_root_returns_empty_statistics(tmp_path: Path) -> None:
    stats = AnalysisEngine().analyze(tmp_path)

    assert stats.total_worlds == 0
    assert stats.worlds_played == 0
    assert stats.worlds_abandoned == 0
    assert stats.reset_ratio == 0.0
    assert stats.fastest_reset is None
    assert stats.longest_session is None


def test_worlds_are_classified(tmp_path: Path) -> None:
    _played_world(tmp_path, "aaa", "Any% Run")
    _fresh_world(tmp_path, "bbb")
    (tmp_path / "stray.txt").write_text("not a world", encoding="utf-8")

    stats = AnalysisEngine().analyze(tmp_path, now=datetime.now())

    assert stats.total_worlds == 2
    by_name = {world.name: world for world in stats.worlds}
    assert by_name["Any% Run"].played is True
    assert by_name["Any% Run"].chunk_count == 6
    assert by_name["New World"].played is False
    assert stats.worlds_played == 1
    assert stats.worlds_abandoned == 1
    assert stats.total_storage_bytes == 60_000 + len("Any% Run") + len("New World")


def test_failing_world_is_skipped(tmp_path: Path) -> None:
    _played_world(tmp_path, "good", "Good")
    _fresh_world(tmp_path, "broken")

    engine = AnalysisEngine(probe=_FlakyProbe())
    stats = engine.analyze(tmp_path)

    assert [world.name for world in stats.worlds] == ["Good"]


def test_analyze_world_reports_failure_as_outcome(tmp_path: Path) -> None:
    broken = _fresh_world(tmp_path, "broken")

    outcome = AnalysisEngine(probe=_FlakyProbe()).analyze_world(broken)

    assert outcome.ok is False
    assert outcome.fact is None
    assert outcome.error == "access denied"


def test_only_failing_worlds_gives_empty_statistics(tmp_path: Path) -> None:
    _fresh_world(tmp_path, "broken")

    stats = AnalysisEngine(probe=_FlakyProbe()).analyze(tmp_path)
    assert stats.total_worlds == 0
    assert stats.worlds == ()
