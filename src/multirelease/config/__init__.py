"""
Configuration system for multirelease.

The resolver constants are defined via a configuration dataclass.
This enables:
- Type-safe parameter definition
- Validation at construction time
- Overriding thresholds in tests

Usage:
    >>> from multirelease import resolve_with_version
    >>> from multirelease.config import ResolverConfig
    >>> config = ResolverConfig(release_flag="--multi-release")
    >>> resolve_with_version(["--multi-release", "17"], config=config)
"""

from multirelease.config.base import (
    BaseConfig,
    ResolverConfig,
    DEFAULT_CONFIG,
)

__all__ = [
    "BaseConfig",
    "ResolverConfig",
    "DEFAULT_CONFIG",
]
