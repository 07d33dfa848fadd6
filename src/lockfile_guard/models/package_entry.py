"""Package entry model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PackageEntry:
    """Represent one resolved package record from a lockfile.

    ``resolved`` and ``integrity`` are ``None`` when the lockfile omits the
    field, which is distinct from an empty string.
    """

    name: str
    version: str
    resolved: str | None = None
    integrity: str | None = None
    dev: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Package name must be non-empty")
        if not isinstance(self.version, str):
            raise ValueError("Package version must be a string")

    @property
    def label(self) -> str:
        return f"{self.name}@{self.version}"
