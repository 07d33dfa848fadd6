"""Flag package names that resolve to more than one version."""

from __future__ import annotations

from collections.abc import Sequence

from ..models import Finding, FindingKind, PackageEntry, Severity


def check_duplicates(entries: Sequence[PackageEntry]) -> list[Finding]:
    """Return one warning per name with two or more distinct versions.

    Grouping uses the literal package name, so the same package installed at
    several nested paths forms a single group. Versions are listed in
    first-seen order.
    """
    # dicts keep insertion order: name -> (first position, {version: None})
    groups: dict[str, tuple[int, dict[str, None]]] = {}
    for position, entry in enumerate(entries):
        _, versions = groups.setdefault(entry.name, (position, {}))
        versions.setdefault(entry.version, None)

    findings: list[Finding] = []
    for name, (first_position, versions) in groups.items():
        if len(versions) < 2:
            continue
        findings.append(
            Finding(
                kind=FindingKind.DUPLICATE_VERSION,
                severity=Severity.WARNING,
                package_name=name,
                detail=f"{name} resolves to multiple versions: {', '.join(versions)}",
                position=first_position,
            )
        )

    return findings
