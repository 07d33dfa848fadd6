"""Independent check passes over extracted lockfile entries."""

from .duplicates import check_duplicates
from .integrity import check_integrity
from .registry import DEFAULT_ALLOWED_REGISTRIES, check_registries

__all__ = [
    "DEFAULT_ALLOWED_REGISTRIES",
    "check_duplicates",
    "check_integrity",
    "check_registries",
]
