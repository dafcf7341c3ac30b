"""
Runtime version thresholds.

jdeps needs an explicit ``--multi-release`` value from JDK 14 onwards and
on the 11.0.x line from 11.0.11, where the change was backported.
"""

from typing import Optional

from multirelease.config import ResolverConfig, DEFAULT_CONFIG
from multirelease.core.runtime_version import RuntimeVersion
from multirelease.utils.log import LogLike, as_log


def requires_release_version(
    version: Optional[RuntimeVersion],
    log: Optional[LogLike] = None,
    config: Optional[ResolverConfig] = None,
) -> bool:
    """
    Check whether a runtime needs the multi-release version resolved.

    Args:
        version: Parsed runtime version, None if parsing failed
        log: Optional Log collaborator (or logging.Logger)
        config: Resolver configuration (default: DEFAULT_CONFIG)

    Returns:
        True for major >= min_major, or for the backport line at or above
        backport_min_patch; False otherwise (including version None)
    """
    log = as_log(log)
    config = config or DEFAULT_CONFIG

    if version is None:
        return False

    if version.major >= config.min_major:
        log.debug(f"Detected JDK {config.min_major}+")
        return True

    if ((version.major, version.minor) == config.backport_line
            and version.patch >= config.backport_min_patch):
        log.debug(
            f"Detected JDK {config.backport_major}.{config.backport_minor}."
            f"{config.backport_min_patch}+"
        )
        return True

    return False
