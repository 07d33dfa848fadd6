"""Result aggregation and schema-friendly output."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import replace
from pathlib import Path
from typing import Any

from .models import CheckResult, Finding, Severity

REPORT_VERSION = "1"


def aggregate(findings: Iterable[Finding], strict: bool = False) -> CheckResult:
    """Classify findings as errors or warnings and compute the verdict.

    In strict mode every finding is reclassified as an error. Otherwise a
    finding keeps its own severity; all current kinds are warnings. Both
    buckets are ordered by kind (registry, integrity, duplicates) and then by
    entry position, no matter the order the findings arrive in.
    """
    ordered = sorted(findings, key=lambda finding: finding.sort_key)

    if strict:
        errors = tuple(replace(f, severity=Severity.ERROR) for f in ordered)
        warnings: tuple[Finding, ...] = ()
    else:
        errors = tuple(f for f in ordered if f.severity is Severity.ERROR)
        warnings = tuple(f for f in ordered if f.severity is not Severity.ERROR)

    return CheckResult(passed=not errors, errors=errors, warnings=warnings)


def build_report(
    results: Mapping[Path, CheckResult],
    root: Path | None = None,
    strict: bool = False,
) -> dict[str, Any]:
    """Combine per-lockfile results into a single schema-compatible report.

    Lockfile paths are made relative to ``root`` when given and listed in
    sorted order.
    """
    lockfiles: list[dict[str, Any]] = []
    for path, result in sorted(results.items(), key=lambda kv: str(kv[0])):
        display = path.relative_to(root) if root is not None else path
        lockfiles.append({"path": str(display), **result.to_dict()})

    total_errors = sum(len(r.errors) for r in results.values())
    total_warnings = sum(len(r.warnings) for r in results.values())

    return {
        "version": REPORT_VERSION,
        "passed": all(r.passed for r in results.values()),
        "strict": strict,
        "lockfiles": lockfiles,
        "totals": {
            "lockfiles": len(lockfiles),
            "errors": total_errors,
            "warnings": total_warnings,
        },
    }
