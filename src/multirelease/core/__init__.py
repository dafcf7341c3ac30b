"""
Core parsing for multirelease.

Available components:
- RuntimeVersion: immutable major.minor.patch triple
- parse_runtime_version / runtime_version: version property parsing
- requires_release_version: JDK threshold check
- extract_release_version: jdeps argument scanner
"""

from multirelease.core.integers import parse_int
from multirelease.core.runtime_version import (
    RuntimeVersion,
    parse_runtime_version,
    runtime_version,
)
from multirelease.core.thresholds import requires_release_version
from multirelease.core.arguments import extract_release_version

__all__ = [
    "parse_int",
    "RuntimeVersion",
    "parse_runtime_version",
    "runtime_version",
    "requires_release_version",
    "extract_release_version",
]
