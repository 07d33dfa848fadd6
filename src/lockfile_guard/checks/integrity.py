"""Flag packages that carry no integrity digest."""

from __future__ import annotations

from collections.abc import Sequence

from ..models import Finding, FindingKind, PackageEntry, Severity


def check_integrity(entries: Sequence[PackageEntry]) -> list[Finding]:
    """Return one warning per entry whose integrity is absent or empty."""
    findings: list[Finding] = []

    for position, entry in enumerate(entries):
        if entry.integrity:
            continue
        findings.append(
            Finding(
                kind=FindingKind.MISSING_INTEGRITY,
                severity=Severity.WARNING,
                package_name=entry.name,
                detail=f"{entry.label} has no integrity digest",
                position=position,
            )
        )

    return findings
