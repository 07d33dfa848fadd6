"""Finding model emitted by the check passes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FindingKind(str, Enum):
    SUSPICIOUS_REGISTRY = "suspicious-registry"
    MISSING_INTEGRITY = "missing-integrity"
    DUPLICATE_VERSION = "duplicate-version"

    @property
    def rank(self) -> int:
        """Position of this kind in reports: registry, integrity, duplicates."""
        return _KIND_ORDER.index(self)


_KIND_ORDER = (
    FindingKind.SUSPICIOUS_REGISTRY,
    FindingKind.MISSING_INTEGRITY,
    FindingKind.DUPLICATE_VERSION,
)


class Severity(str, Enum):
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Finding:
    """A single issue detected by one check pass.

    ``position`` is the index of the entry the finding refers to (for
    duplicates, the first entry of the group) and keeps merged output in
    encounter order.
    """

    kind: FindingKind
    severity: Severity
    package_name: str
    detail: str
    position: int = 0

    def __post_init__(self) -> None:
        if not self.package_name:
            raise ValueError("Finding must reference a package")
        if not self.detail:
            raise ValueError("Finding detail must be non-empty")
        if self.position < 0:
            raise ValueError("Finding position must be non-negative")

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.kind.rank, self.position)

    def to_dict(self) -> dict[str, str]:
        return {
            "kind": self.kind.value,
            "severity": self.severity.value,
            "package": self.package_name,
            "detail": self.detail,
        }
