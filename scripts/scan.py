#!/usr/bin/env python3
"""Local CLI entrypoint to run the checks from a source checkout.

Usage:
  python scripts/scan.py --root . [--strict] [--format json]

This calls the same ``lockfile_guard.cli.main`` as the installed
``lockfile-guard`` console script.
"""

from __future__ import annotations

from lockfile_guard.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
