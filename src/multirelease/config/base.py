"""
Base configuration classes for multirelease.

Design Principles:
- All constants are explicit and overridable
- Validation at construction time
- Serializable for diagnostics

Configuration Hierarchy:
    BaseConfig
    └── ResolverConfig   (property name, flag name, version thresholds)
"""

from dataclasses import dataclass, asdict
import json
import re


# =============================================================================
# Base Configuration
# =============================================================================


@dataclass
class BaseConfig:
    """
    Base configuration class with common utilities.

    All config classes inherit from this and gain:
    - Serialization to dict/JSON
    - Validation hook
    - String representation
    """

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self.validate()

    def validate(self) -> None:
        """
        Validate configuration values.

        Override in subclasses to add specific validation.
        Should raise ValueError with descriptive message on failure.
        """
        pass

    def to_dict(self) -> dict:
        """Convert configuration to dictionary."""
        return asdict(self)

    def to_json(self) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=2, default=str)

    @classmethod
    def from_dict(cls, d: dict) -> "BaseConfig":
        """Create configuration from dictionary."""
        return cls(**d)


# =============================================================================
# Resolver Configuration
# =============================================================================


@dataclass
class ResolverConfig(BaseConfig):
    """
    Configuration for the multi-release resolver.

    The defaults describe the JDK behaviour: from JDK 14 (and from the
    11.0.11 backport onwards) jdeps needs an explicit ``--multi-release``
    value when analysing multi-release JARs.

    Args:
        property_name: System property holding the runtime version
        version_pattern: Regex with three groups (major, minor, patch);
            must match the whole property value
        release_flag: jdeps flag carrying the multi-release version
        min_major: First major version that always needs the flag
        backport_major: Major version of the backport line
        backport_minor: Minor version of the backport line
        backport_min_patch: First patch of the backport line needing the flag

    Example:
        >>> config = ResolverConfig(min_major=17)
        >>> config.release_flag
        '--multi-release'
    """

    # Runtime version source
    property_name: str = "java.version"
    version_pattern: str = r"^(\d+)\.(\d+)\.(\d+).*"

    # jdeps argument
    release_flag: str = "--multi-release"

    # Thresholds
    min_major: int = 14
    backport_major: int = 11
    backport_minor: int = 0
    backport_min_patch: int = 11

    def validate(self) -> None:
        if not self.property_name:
            raise ValueError("property_name must not be empty")
        if not self.release_flag:
            raise ValueError("release_flag must not be empty")
        try:
            pattern = re.compile(self.version_pattern)
        except re.error as ex:
            raise ValueError(f"version_pattern is not a valid regex: {ex}") from ex
        if pattern.groups != 3:
            raise ValueError(
                f"version_pattern must define 3 groups, got {pattern.groups}"
            )
        for name in ("min_major", "backport_major", "backport_minor", "backport_min_patch"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")

    @property
    def compiled_pattern(self) -> re.Pattern:
        """Version pattern compiled with ASCII-only digit classes."""
        return re.compile(self.version_pattern, re.ASCII)

    @property
    def backport_line(self) -> tuple:
        """(major, minor) of the backport line."""
        return (self.backport_major, self.backport_minor)


DEFAULT_CONFIG = ResolverConfig()
