"""Human-readable summary rendering for $GITHUB_STEP_SUMMARY."""

from __future__ import annotations

from typing import Any


def _cell(value: Any) -> str:
    return str(value).replace("|", "\\|")


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with totals and a table of findings."""
    totals = report.get("totals", {})
    lockfiles = report.get("lockfiles", [])
    verdict = "passed" if report.get("passed") else "failed"

    lines = []
    lines.append("# lockfile-guard Summary")
    lines.append("")
    lines.append(
        f"Result: **{verdict}** | Lockfiles: {totals.get('lockfiles', 0)} | "
        f"Errors: {totals.get('errors', 0)} | Warnings: {totals.get('warnings', 0)}"
    )
    lines.append("")
    lines.append("| Lockfile | Severity | Check | Package | Detail |")
    lines.append("| --- | --- | --- | --- | --- |")

    has_rows = False

    for lock in lockfiles:
        path = _cell(lock.get("path") or "(unknown lockfile)")
        findings = (lock.get("errors") or []) + (lock.get("warnings") or [])
        if not findings:
            lines.append(f"| {path} | n/a | n/a | n/a | No issues found |")
            has_rows = True
            continue

        for finding in findings:
            lines.append(
                f"| {path} | {finding.get('severity', '')} | {finding.get('kind', '')} "
                f"| {_cell(finding.get('package', ''))} | {_cell(finding.get('detail', ''))} |"
            )
            has_rows = True

    if not has_rows:
        lines.append("| (no lockfiles checked) | n/a | n/a | n/a | No issues found |")

    return "\n".join(lines) + "\n"
