"""Data models shared by the extractor, the check passes and the aggregator."""

from __future__ import annotations

from .check_result import CheckResult
from .finding import Finding, FindingKind, Severity
from .package_entry import PackageEntry

__all__ = [
    "CheckResult",
    "Finding",
    "FindingKind",
    "PackageEntry",
    "Severity",
]
