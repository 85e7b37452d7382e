from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path

from core.analysis.constants import CHUNK_FILE_SUFFIX, DB_DIR_NAME, KEY_FILES, LEVEL_NAME_FILE
from core.analysis.models import FileStamp, WorldProbe


def _creation_timestamp(stat_info: os.stat_result) -> float:
    birthtime = getattr(stat_info, "st_birthtime", None)
    if birthtime is not None:
        return float(birthtime)
    return float(stat_info.st_ctime)


class FileMetadataProbe:
    """Collects filesystem metadata for a single world directory.

    Only the directory's own ``stat`` may raise; every other read failure is
    logged at debug level and the affected item is skipped.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("speedrun_tracker.analysis.probe")

    def probe(self, world_dir: Path) -> WorldProbe:
        stat_info = world_dir.stat()

        total_size, file_mtimes = self._walk_files(world_dir)
        chunk_count, db_file_count = self._count_db_files(world_dir / DB_DIR_NAME)

        return WorldProbe(
            name=self.read_world_name(world_dir),
            path=world_dir,
            created_at=datetime.fromtimestamp(_creation_timestamp(stat_info)),
            modified_at=datetime.fromtimestamp(stat_info.st_mtime),
            accessed_at=datetime.fromtimestamp(stat_info.st_atime),
            total_size_bytes=total_size,
            chunk_count=chunk_count,
            db_file_count=db_file_count,
            file_mtimes=tuple(file_mtimes),
            key_files=self._read_key_files(world_dir),
        )

    def read_world_name(self, world_dir: Path) -> str:
        name_path = world_dir / LEVEL_NAME_FILE
        try:
            if name_path.is_file():
                content = name_path.read_text(encoding="utf-8", errors="replace").strip()
                if content:
                    return content
        except OSError:
            self._logger.debug("Could not read %s in %s", LEVEL_NAME_FILE, world_dir.name)
        return world_dir.name.strip()

    def _walk_files(self, world_dir: Path) -> tuple[int, list[datetime]]:
        total_size = 0
        mtimes: list[datetime] = []

        def _on_error(error: OSError) -> None:
            self._logger.debug("Skipping unreadable directory: %s", error)

        for dir_path, _dir_names, file_names in os.walk(world_dir, onerror=_on_error):
            for file_name in file_names:
                file_path = Path(dir_path) / file_name
                try:
                    file_stat = file_path.stat()
                except OSError:
                    self._logger.debug("Skipping unreadable file: %s", file_path)
                    continue
                total_size += int(file_stat.st_size)
                mtimes.append(datetime.fromtimestamp(file_stat.st_mtime))

        return total_size, mtimes

    def _count_db_files(self, db_dir: Path) -> tuple[int, int]:
        chunk_count = 0
        file_count = 0
        try:
            if not db_dir.is_dir():
                return 0, 0
            for entry in db_dir.iterdir():
                try:
                    if not entry.is_file():
                        continue
                except OSError:
                    continue
                file_count += 1
                if entry.suffix.lower() == CHUNK_FILE_SUFFIX:
                    chunk_count += 1
        except OSError:
            self._logger.debug("Could not list %s", db_dir)
            return 0, 0

        return chunk_count, file_count

    def _read_key_files(self, world_dir: Path) -> tuple[FileStamp, ...]:
        stamps: list[FileStamp] = []
        for relative in KEY_FILES:
            key_path = world_dir / relative
            try:
                if not key_path.is_file():
                    continue
                key_stat = key_path.stat()
            except OSError:
                self._logger.debug("Could not stat key file %s", key_path)
                continue

            stamps.append(
                FileStamp(
                    name=relative,
                    created_at=datetime.fromtimestamp(_creation_timestamp(key_stat)),
                    modified_at=datetime.fromtimestamp(key_stat.st_mtime),
                )
            )
        return tuple(stamps)
