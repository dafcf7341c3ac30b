"""
Runtime version value object and parser.

The ``java.version`` property looks like ``17.0.2``, ``11.0.11+9`` or
``21.0.1-ea``. Only the leading ``major.minor.patch`` triple is kept:

    "17.0.2+8"  ->  RuntimeVersion(17, 0, 2)
    "1.8.0_292" ->  RuntimeVersion(1, 8, 0)
    "17"        ->  None (warning)

Failures never raise; they are reported through the log collaborator.
"""

from dataclasses import dataclass
from typing import Mapping, Optional

from multirelease.config import ResolverConfig, DEFAULT_CONFIG
from multirelease.core.integers import parse_int
from multirelease.utils.log import LogLike, as_log
from multirelease.utils.properties import read_property


@dataclass(frozen=True, order=True)
class RuntimeVersion:
    """
    Immutable major.minor.patch triple.

    Ordering is lexicographic on (major, minor, patch).

    Example:
        >>> RuntimeVersion(11, 0, 11) < RuntimeVersion(14, 0, 0)
        True
        >>> str(RuntimeVersion(17, 0, 2))
        '17.0.2'
    """

    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")

    def as_tuple(self) -> tuple:
        return (self.major, self.minor, self.patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_runtime_version(
    text: Optional[str],
    log: Optional[LogLike] = None,
    config: Optional[ResolverConfig] = None,
) -> Optional[RuntimeVersion]:
    """
    Parse a version property value into a RuntimeVersion.

    Args:
        text: Property value, e.g. "17.0.2+8"
        log: Optional Log collaborator (or logging.Logger)
        config: Resolver configuration (default: DEFAULT_CONFIG)

    Returns:
        The parsed version, or None if the value does not match the pattern
        (logged as a warning) or a component is out of range (logged as an
        error)
    """
    log = as_log(log)
    config = config or DEFAULT_CONFIG

    match = config.compiled_pattern.fullmatch(text) if text is not None else None
    if match is None:
        log.warn(
            f"The java version {text} cannot be parsed as {config.version_pattern}"
        )
        return None

    try:
        version = RuntimeVersion(
            parse_int(match.group(1)),
            parse_int(match.group(2)),
            parse_int(match.group(3)),
        )
    except ValueError as ex:
        log.error(f"The java version {text} has an invalid format. {ex}")
        return None

    log.debug(f"parsed.version -> {version}")
    return version


def runtime_version(
    log: Optional[LogLike] = None,
    config: Optional[ResolverConfig] = None,
    properties: Optional[Mapping[str, str]] = None,
) -> Optional[RuntimeVersion]:
    """
    Read the runtime version property and parse it.

    Args:
        log: Optional Log collaborator (or logging.Logger)
        config: Resolver configuration (default: DEFAULT_CONFIG)
        properties: Property mapping; the process environment is used if None

    Returns:
        The parsed version, or None on a missing or malformed property
    """
    log = as_log(log)
    config = config or DEFAULT_CONFIG

    text = read_property(config.property_name, properties)
    log.debug(f"{config.property_name} -> {text}")
    return parse_runtime_version(text, log, config)
