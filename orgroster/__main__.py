"""
Module entrypoint for orgroster.

This file exists so that `python -m orgroster ...` works consistently in all
environments, including when the console-script wrapper is not installed.
"""

from __future__ import annotations

import sys

from orgroster.cli import main


def _run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    _run()
