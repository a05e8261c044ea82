"""
Filesystem path policy for orgroster.

This module is the single place that decides where orgroster keeps its data:

- Runtime data lives under an orgroster "data root".
- The durable store is a single SQLite file directly under the data root.
- GUI settings live next to it as a small JSON file.

Nothing else in the engine should invent filesystem locations.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

from .errors import PathConfigError

APP_DIR_NAME: Final[str] = "orgroster"
STORE_FILE_NAME: Final[str] = "orgroster.sqlite"
DATA_ROOT_ENV: Final[str] = "ORGROSTER_DATA_ROOT"


def default_data_root() -> Path:
    """
    Resolve the default orgroster data root.

    Preference order:
    1) $ORGROSTER_DATA_ROOT if set (used verbatim)
    2) %LOCALAPPDATA%\\orgroster
    3) %APPDATA%\\orgroster (Roaming) as fallback
    4) $XDG_DATA_HOME/orgroster
    5) ~/.local/share/orgroster
    """
    explicit = os.environ.get(DATA_ROOT_ENV)
    if explicit and explicit.strip():
        return Path(explicit.strip())

    local = os.environ.get("LOCALAPPDATA")
    if local:
        return Path(local) / APP_DIR_NAME

    roaming = os.environ.get("APPDATA")
    if roaming:
        return Path(roaming) / APP_DIR_NAME

    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME

    return Path.home() / ".local" / "share" / APP_DIR_NAME


def resolve_store_path(data_root: Path | None = None, file_name: str = STORE_FILE_NAME) -> Path:
    """
    Return the canonical path of the durable store file.

    Parameters
    ----------
    data_root:
        Optional override for the orgroster data root.
    file_name:
        Name of the SQLite file. Must be a simple, non-empty file name.

    Returns
    -------
    pathlib.Path
        Resolved path to the store file under the data root.

    Raises
    ------
    PathConfigError
        If file_name is unsafe or the resolved path escapes the data root.
    """
    name = file_name.strip()
    if not name:
        raise PathConfigError("Store file name must not be empty.")
    if name in {".", ".."}:
        raise PathConfigError("Store file name must not be '.' or '..'.")
    if any(ch in name for ch in r'\/:*?"<>|'):
        raise PathConfigError(f"Store file name contains invalid characters: {name!r}")

    root = (data_root or default_data_root()).expanduser().resolve()
    path = (root / name).resolve()
    _assert_within(root, path, purpose="store file")
    return path


def _assert_within(base: Path, candidate: Path, purpose: str) -> None:
    """Ensure candidate is within base after resolution."""
    try:
        candidate.relative_to(base)
    except ValueError as exc:
        raise PathConfigError(
            f"Unsafe path for {purpose}: {candidate} is not within {base}"
        ) from exc
