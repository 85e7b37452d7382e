from __future__ import annotations

from pathlib import Path


class AnalysisError(Exception):
    pass


class WorldsRootNotFoundError(AnalysisError):
    def __init__(self, root: Path) -> None:
        super().__init__(f"Minecraft worlds directory not found: {root}")
        self.root = root
