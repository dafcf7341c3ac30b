"""
Multi-release resolution for jdeps.

Entry point combining the three steps:

    java.version ──► RuntimeVersion ──► threshold check ──► argument scan

On runtimes below the thresholds the arguments are not inspected at all
and None is returned.
"""

from typing import Mapping, Optional, Sequence

from multirelease.config import ResolverConfig, DEFAULT_CONFIG
from multirelease.core.arguments import extract_release_version
from multirelease.core.runtime_version import runtime_version
from multirelease.core.thresholds import requires_release_version
from multirelease.utils.log import LogLike, as_log


def resolve_with_version(
    arguments: Sequence[str],
    log: Optional[LogLike] = None,
    properties: Optional[Mapping[str, str]] = None,
    config: Optional[ResolverConfig] = None,
) -> Optional[int]:
    """
    Resolve the multi-release version jdeps should run with.

    Args:
        arguments: jdeps extra arguments
        log: Optional Log collaborator (or logging.Logger)
        properties: Property mapping; the process environment is used if None
        config: Resolver configuration (default: DEFAULT_CONFIG)

    Returns:
        The requested multi-release version, or None if the runtime does not
        need it or the arguments do not provide a valid one

    Example:
        >>> resolve_with_version(
        ...     ["--multi-release=11"], properties={"java.version": "17.0.2"}
        ... )
        11
    """
    log = as_log(log)
    config = config or DEFAULT_CONFIG

    version = runtime_version(log, config, properties)
    if not requires_release_version(version, log, config):
        log.debug(
            f"Java version does not need to check if {config.release_flag} is set"
        )
        return None

    result = extract_release_version(arguments, log, config)
    if result is not None:
        log.debug(f"Resolve with version: multi release is set to {result}")
    else:
        log.debug("Resolve without version: multi release not set")
    return result
