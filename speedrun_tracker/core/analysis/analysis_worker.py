from __future__ import annotations

from datetime import datetime
from pathlib import Path

from PySide6.QtCore import QObject, Signal, Slot

from core.analysis.engine import AnalysisEngine
from core.analysis.models import Statistics


class AnalysisWorker(QObject):
    started = Signal()
    finished = Signal(object)
    failed = Signal(str)

    def __init__(self, engine: AnalysisEngine, root: Path, now: datetime | None = None) -> None:
        super().__init__()
        self._engine = engine
        self._root = root
        self._now = now
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    @Slot()
    def run(self) -> None:
        if self._running:
            self.failed.emit("An analysis is already running")
            return

        self._running = True
        self.started.emit()
        try:
            result: Statistics = self._engine.analyze(self._root, now=self._now)
        except Exception as exc:
            self._running = False
            self.failed.emit(str(exc))
            return

        self._running = False
        self.finished.emit(result)
