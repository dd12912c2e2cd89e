"""App path helpers (cross-platform).

Environment overrides (useful for portable/dev launches):
- STIMCONFIG_DATA_DIR: base dir for app data (logs)
- STIMCONFIG_LOG_FILE: explicit log file path; enables file logging at startup
"""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_data_dir

APP_NAME = "StimConfig"


def _env_path(name: str) -> Path | None:
    v = os.environ.get(name)
    if not v:
        return None
    return Path(os.path.expanduser(v)).resolve()


def get_app_data_dir() -> Path:
    """Base app data dir."""
    data_dir = _env_path("STIMCONFIG_DATA_DIR")
    if data_dir is not None:
        return data_dir
    return Path(user_data_dir(APP_NAME, appauthor=False, roaming=True)).resolve()


def get_log_dir() -> Path:
    log_dir = get_app_data_dir() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def get_log_file_path() -> Path | None:
    """Log file requested through the environment, or None when file logging is off."""
    v = os.environ.get("STIMCONFIG_LOG_FILE")
    if not v:
        return None
    # Bare file names land in the app log dir
    if os.sep not in v and (os.altsep is None or os.altsep not in v):
        return get_log_dir() / v
    log_file = Path(os.path.expanduser(v)).resolve()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    return log_file
