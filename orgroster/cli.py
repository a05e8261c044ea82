"""
Launcher for the orgroster desktop app.

Notes
-----
The launcher is intentionally thin. It resolves settings, configures logging,
opens the store and hands it to the GUI. It is also the one place that decides
what a store initialization failure means: print an error and exit with 2.

Precedence for every option: command line, then saved settings, then defaults.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from gui.settings_store import GuiSettings, load_gui_settings, save_gui_settings
from roster_engine.errors import StoreInitError
from roster_engine.logging_setup import LOG_FORMATS, setup_logging
from roster_engine.store.api import Store
from roster_engine.store.sqlite_store import open_store

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the launcher argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser.
    """
    parser = argparse.ArgumentParser(
        prog="orgroster",
        description="Keep a local roster of organizations and their members",
    )
    parser.add_argument(
        "--data-root",
        default=None,
        help="Override the orgroster data root. If omitted, saved settings or defaults are used.",
    )
    location = parser.add_mutually_exclusive_group(required=False)
    location.add_argument(
        "--db-path",
        type=Path,
        default=None,
        help="Explicit path to the store file (overrides --data-root for the store).",
    )
    location.add_argument(
        "--in-memory",
        action="store_true",
        help="Use a throwaway in-memory store. Nothing is written to disk.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: saved setting, else INFO).",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=list(LOG_FORMATS),
        help="Log line format (default: saved setting, else text).",
    )
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="Remember --data-root/--log-level/--log-format as the new defaults.",
    )
    return parser


def run_app(store: Store) -> int:
    """Show the GUI over store and return its exit code."""
    # Qt is imported only when a window is actually shown.
    from gui.app import run_app as run_gui

    return run_gui(store)


def main(argv: list[str] | None = None) -> int:
    """
    Launcher entry point.

    Parameters
    ----------
    argv:
        Optional argument vector. If None, argparse uses sys.argv.

    Returns
    -------
    int
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    saved = load_gui_settings(data_root=None)
    effective = GuiSettings(
        data_root=Path(args.data_root) if args.data_root else saved.data_root,
        log_level=args.log_level or saved.log_level,
        log_format=args.log_format or saved.log_format,
    )
    setup_logging(effective.log_level, effective.log_format)

    if args.save_settings:
        try:
            path = save_gui_settings(data_root=None, settings=effective)
        except OSError as exc:
            print(f"ERROR: could not save settings: {exc}")
            return 2
        logger.info("Saved settings to %s", path)

    try:
        store = open_store(args.db_path, in_memory=args.in_memory, data_root=effective.data_root)
    except StoreInitError as exc:
        logger.critical("Store initialization failed", exc_info=True)
        print(f"ERROR: {exc}")
        return 2

    with store:
        return run_app(store)


if __name__ == "__main__":
    raise SystemExit(main())
