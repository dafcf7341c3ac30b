"""
multirelease: multi-release version resolution for jdeps.

Decides whether jdeps has to be run with an explicit ``--multi-release``
value on the current Java runtime, and extracts that value from the extra
arguments supplied by the user.

Main Components:
    - RuntimeVersion: parsed ``java.version`` triple
    - requires_release_version: JDK 14+ / 11.0.11+ threshold check
    - extract_release_version: ``--multi-release`` argument scanner
    - resolve_with_version: all of the above in one call

Quick Start:
    >>> import logging
    >>> from multirelease import resolve_with_version
    >>>
    >>> resolve_with_version(
    ...     ["--multi-release", "17"],
    ...     log=logging.getLogger("jdeps"),
    ...     properties={"java.version": "17.0.2+8"},
    ... )
    17

Design Principles:
    - Configuration-driven: constants and thresholds via a dataclass config
    - No exceptions for bad input: failures become None plus a log line
    - Logging through an injected collaborator, no-op when absent

Repository Structure:
    multirelease/
    ├── config/          # Configuration dataclasses
    ├── core/            # Version parsing, thresholds, argument scanning
    ├── utils/           # Log capability, property lookup
    └── resolver.py      # resolve_with_version entry point
"""

from multirelease.version import __version__, get_version

# Configuration
from multirelease.config import (
    BaseConfig,
    ResolverConfig,
    DEFAULT_CONFIG,
)

# Core
from multirelease.core import (
    RuntimeVersion,
    parse_runtime_version,
    runtime_version,
    requires_release_version,
    extract_release_version,
)

# Resolver
from multirelease.resolver import resolve_with_version

# Utils
from multirelease.utils import (
    Log,
    NullLog,
    LoggerLog,
    get_log,
    read_property,
)


__all__ = [
    # Version
    "__version__",
    "get_version",
    # Configuration
    "BaseConfig",
    "ResolverConfig",
    "DEFAULT_CONFIG",
    # Core
    "RuntimeVersion",
    "parse_runtime_version",
    "runtime_version",
    "requires_release_version",
    "extract_release_version",
    # Resolver
    "resolve_with_version",
    # Utils
    "Log",
    "NullLog",
    "LoggerLog",
    "get_log",
    "read_property",
]
