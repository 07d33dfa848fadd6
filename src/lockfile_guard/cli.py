"""Command-line entrypoint.

Usage:
  lockfile-guard [LOCKFILE ...] [--root DIR] [--strict] [--allowed-registry URL ...]
                 [--config PATH_OR_URL] [--format text|json] [--summary PATH]

Exit codes: 0 when every lockfile passed, 1 when any failed its checks, 2 when
a lockfile or the configuration could not be read, or the summary could not
be written.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any

from .config import ConfigError, load_config, strict_from_env
from .core import check_lockfile, scan_repository
from .log import configure_logging
from .models import CheckResult
from .parsers.package_lock import LockfileReadError, MalformedLockfile
from .report import build_report
from .summary import render_summary

EXIT_PASSED = 0
EXIT_FAILED = 1
EXIT_UNREADABLE = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lockfile-guard",
        description="Check npm lockfiles for unapproved registries, missing "
        "integrity digests and duplicate versions.",
    )
    parser.add_argument(
        "lockfiles",
        nargs="*",
        type=Path,
        help="Lockfiles to check; when omitted, lockfiles under --root are discovered",
    )
    parser.add_argument("--root", type=Path, default=Path("."))
    parser.add_argument(
        "--config",
        default=None,
        help="Path or URL of a JSON/YAML configuration file",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat every finding as an error",
    )
    parser.add_argument(
        "--allowed-registry",
        dest="allowed_registries",
        action="append",
        default=None,
        metavar="URL",
        help="Allowed registry URL prefix; repeat to allow several (replaces the configured list)",
    )
    parser.add_argument("--format", choices=("text", "json"), default="text")
    parser.add_argument(
        "--summary",
        type=Path,
        default=os.getenv("GITHUB_STEP_SUMMARY") or None,
        help="Append a Markdown summary to this file (defaults to $GITHUB_STEP_SUMMARY)",
    )
    return parser.parse_args(argv)


def _render_text(report: dict[str, Any]) -> str:
    lines: list[str] = []
    if not report["lockfiles"]:
        lines.append("No lockfiles found")
    for lock in report["lockfiles"]:
        status = "passed" if lock["passed"] else "failed"
        lines.append(f"{lock['path']}: {status}")
        for severity, findings in (("ERROR", lock["errors"]), ("WARNING", lock["warnings"])):
            for finding in findings:
                lines.append(f"  {severity} [{finding['kind']}] {finding['detail']}")

    totals = report["totals"]
    lines.append(
        f"{totals['lockfiles']} lockfile(s) checked: "
        f"{totals['errors']} error(s), {totals['warnings']} warning(s)"
    )
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging()

    try:
        config = load_config(args.config)
        config = config.with_overrides(
            strict=True if args.strict or strict_from_env() else None,
            allowed_registries=args.allowed_registries,
        )
    except ConfigError as exc:
        print(f"ERROR: invalid configuration: {exc}", file=sys.stderr)
        return EXIT_UNREADABLE

    root: Path | None = None
    try:
        if args.lockfiles:
            results: dict[Path, CheckResult] = {
                path: check_lockfile(path, config) for path in args.lockfiles
            }
        else:
            root = args.root.resolve()
            results = scan_repository(root, config)
    except (LockfileReadError, MalformedLockfile) as exc:
        print(f"ERROR: cannot read lockfile: {exc}", file=sys.stderr)
        return EXIT_UNREADABLE

    report = build_report(results, root=root, strict=config.strict)

    if args.format == "json":
        print(json.dumps(report, indent=2))
    else:
        print(_render_text(report))

    if args.summary:
        try:
            with args.summary.open("a", encoding="utf-8") as fh:
                fh.write(render_summary(report))
        except OSError as exc:
            print(f"ERROR: cannot write summary: {exc}", file=sys.stderr)
            return EXIT_UNREADABLE

    return EXIT_PASSED if report["passed"] else EXIT_FAILED


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
