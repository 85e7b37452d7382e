from __future__ import annotations

LEVEL_NAME_FILE = "levelname.txt"
DB_DIR_NAME = "db"
CHUNK_FILE_SUFFIX = ".ldb"

# Relative to the world directory.
KEY_FILES: tuple[str, ...] = (
    "level.dat",
    "level.dat_old",
    f"{DB_DIR_NAME}/CURRENT",
)
