from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from roster_engine.logging_setup import LOG_FORMATS
from roster_engine.paths import default_data_root

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True, slots=True)
class GuiSettings:
    """
    Persisted launch settings.

    Notes
    -----
    These only control defaults. Command-line options always win.
    """

    data_root: Path | None
    log_level: str  # "DEBUG" | "INFO" | "WARNING" | "ERROR" | "CRITICAL"
    log_format: str  # "text" | "json"

    @staticmethod
    def defaults() -> "GuiSettings":
        return GuiSettings(data_root=None, log_level="INFO", log_format="text")


def settings_path(data_root: Path | None) -> Path:
    root = default_data_root() if data_root is None else data_root
    return root / "gui_settings.json"


def load_gui_settings(*, data_root: Path | None) -> GuiSettings:
    """
    Load GUI settings from disk.

    Parameters
    ----------
    data_root:
        Directory holding the settings file. If None, the default data root.

    Returns
    -------
    GuiSettings
        Loaded settings, or defaults if missing/unreadable. Individual invalid
        values fall back to their default.
    """
    path = settings_path(data_root)
    defaults = GuiSettings.defaults()
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return defaults
    except (OSError, ValueError):
        logger.warning("Ignoring unreadable settings file %s", path)
        return defaults

    if not isinstance(payload, dict):
        return defaults

    raw_root = payload.get("data_root")
    data_root_val = Path(raw_root) if isinstance(raw_root, str) and raw_root.strip() else None

    log_level = str(payload.get("log_level", defaults.log_level)).upper()
    if log_level not in _LOG_LEVELS:
        log_level = defaults.log_level

    log_format = payload.get("log_format", defaults.log_format)
    if log_format not in LOG_FORMATS:
        log_format = defaults.log_format

    return GuiSettings(data_root=data_root_val, log_level=log_level, log_format=str(log_format))


def save_gui_settings(*, data_root: Path | None, settings: GuiSettings) -> Path:
    """
    Save GUI settings to disk.

    Parameters
    ----------
    data_root:
        Directory holding the settings file. If None, the default data root.
    settings:
        Settings to persist.

    Returns
    -------
    pathlib.Path
        Path of the written file.
    """
    path = settings_path(data_root)
    path.parent.mkdir(parents=True, exist_ok=True)

    payload = {
        "data_root": str(settings.data_root) if settings.data_root is not None else None,
        "log_level": settings.log_level,
        "log_format": settings.log_format,
    }
    path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
    return path
