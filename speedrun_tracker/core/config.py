from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.analysis.heuristics import HeuristicThresholds
from core.paths import get_config_path, get_default_worlds_root, get_exports_dir


class AppConfig:
    _DEFAULTS: dict[str, Any] = {
        "worlds_root": str(get_default_worlds_root()),
        "export_dir": str(get_exports_dir()),
        "heuristics": {},
    }

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = config_path or get_config_path()
        self._data: dict[str, Any] = {}
        self._load_or_create()

    def _load_or_create(self) -> None:
        if not self._config_path.exists():
            self._data = dict(self._DEFAULTS)
            self.save()
            return

        try:
            content = self._config_path.read_text(encoding="utf-8")
            loaded = json.loads(content)
            if not isinstance(loaded, dict):
                loaded = {}
        except (json.JSONDecodeError, OSError):
            loaded = {}

        self._data = dict(self._DEFAULTS)
        self._data.update(loaded)

        if not isinstance(self._data.get("heuristics"), dict):
            self._data["heuristics"] = {}

        self.save()

    def save(self) -> None:
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        self._config_path.write_text(
            json.dumps(self._data, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self.save()

    def get_worlds_root(self) -> str:
        return str(self._data.get("worlds_root", self._DEFAULTS["worlds_root"]))

    def set_worlds_root(self, root_path: str) -> None:
        self._data["worlds_root"] = str(root_path)
        self.save()

    def get_export_dir(self) -> str:
        return str(self._data.get("export_dir", self._DEFAULTS["export_dir"]))

    def set_export_dir(self, export_dir: str) -> None:
        self._data["export_dir"] = str(export_dir)
        self.save()

    def get_thresholds(self) -> HeuristicThresholds:
        raw = self._data.get("heuristics", {})
        if not isinstance(raw, dict):
            return HeuristicThresholds()
        return HeuristicThresholds.from_mapping(raw)

    def set_threshold(self, key: str, value: int | float) -> None:
        heuristics = dict(self._data.get("heuristics") or {})
        heuristics[key] = value
        self._data["heuristics"] = heuristics
        self.save()
