from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "SpeedrunTracker"

_BEDROCK_PACKAGE = "Microsoft.MinecraftUWP_8wekyb3d8bbwe"


def get_app_data_dir() -> Path:
    if os.name == "nt":
        appdata = os.getenv("APPDATA")
        base_dir = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
    else:
        base_dir = Path.home() / ".config"

    app_data_dir = base_dir / APP_NAME
    app_data_dir.mkdir(parents=True, exist_ok=True)
    return app_data_dir.resolve()


def get_logs_dir() -> Path:
    logs_dir = get_app_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir.resolve()


def get_exports_dir() -> Path:
    exports_dir = get_app_data_dir() / "exports"
    exports_dir.mkdir(parents=True, exist_ok=True)
    return exports_dir.resolve()


def get_config_path() -> Path:
    return (get_app_data_dir() / "config.json").resolve()


def get_default_worlds_root() -> Path:
    local_appdata = os.getenv("LOCALAPPDATA")
    base = Path(local_appdata) if local_appdata else Path.home() / "AppData" / "Local"
    return (
        base
        / "Packages"
        / _BEDROCK_PACKAGE
        / "LocalState"
        / "games"
        / "com.mojang"
        / "minecraftWorlds"
    )


def ensure_runtime_directories() -> None:
    get_app_data_dir()
    get_logs_dir()
    get_exports_dir()
