"""Aggregated verdict for a single lockfile."""

from __future__ import annotations

from dataclasses import dataclass

from .finding import Finding


@dataclass(frozen=True)
class CheckResult:
    """Final outcome of checking one lockfile.

    ``passed`` is true exactly when ``errors`` is empty.
    """

    passed: bool
    errors: tuple[Finding, ...] = ()
    warnings: tuple[Finding, ...] = ()

    def __post_init__(self) -> None:
        if self.passed != (not self.errors):
            raise ValueError("passed must be True if and only if there are no errors")

    @property
    def findings(self) -> tuple[Finding, ...]:
        return self.errors + self.warnings

    def to_dict(self) -> dict[str, object]:
        return {
            "passed": self.passed,
            "errors": [finding.to_dict() for finding in self.errors],
            "warnings": [finding.to_dict() for finding in self.warnings],
        }
