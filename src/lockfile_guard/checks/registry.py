"""Flag packages resolved from a registry outside the allowlist."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..models import Finding, FindingKind, PackageEntry, Severity

DEFAULT_ALLOWED_REGISTRIES: tuple[str, ...] = (
    "https://registry.npmjs.org",
    "https://registry.yarnpkg.com",
)


def check_registries(
    entries: Sequence[PackageEntry],
    allowed_registries: Iterable[str] = DEFAULT_ALLOWED_REGISTRIES,
) -> list[Finding]:
    """Return one warning per entry whose ``resolved`` URL matches no allowed prefix.

    Entries without a ``resolved`` field are left to the integrity check.
    """
    if isinstance(allowed_registries, str):
        prefixes: tuple[str, ...] = (allowed_registries,)
    else:
        prefixes = tuple(allowed_registries)
    findings: list[Finding] = []

    for position, entry in enumerate(entries):
        if entry.resolved is None:
            continue
        if entry.resolved.startswith(prefixes):
            continue
        findings.append(
            Finding(
                kind=FindingKind.SUSPICIOUS_REGISTRY,
                severity=Severity.WARNING,
                package_name=entry.name,
                detail=f"{entry.label} resolved from unapproved registry: {entry.resolved}",
                position=position,
            )
        )

    return findings
