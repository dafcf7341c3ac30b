"""
Extraction of the multi-release version from jdeps extra arguments.

Both argument forms accepted by jdeps are supported:

    ["--multi-release", "17"]   ->  17
    ["--multi-release=17"]      ->  17

In the joined form any single character after the flag name is taken
as the separator.

Only the first argument starting with the flag is considered. A missing
or malformed value is logged as an error; an absent flag is not an error.
"""

from typing import Optional, Sequence

from multirelease.config import ResolverConfig, DEFAULT_CONFIG
from multirelease.core.integers import parse_int
from multirelease.utils.log import Log, LogLike, as_log


def extract_release_version(
    arguments: Sequence[str],
    log: Optional[LogLike] = None,
    config: Optional[ResolverConfig] = None,
) -> Optional[int]:
    """
    Find and parse the multi-release version in an argument list.

    Args:
        arguments: Ordered jdeps extra arguments
        log: Optional Log collaborator (or logging.Logger)
        config: Resolver configuration (default: DEFAULT_CONFIG)

    Returns:
        The version number of the first flag occurrence, or None if the flag
        is absent or its value is missing or malformed
    """
    log = as_log(log)
    config = config or DEFAULT_CONFIG
    flag = config.release_flag

    for index, argument in enumerate(arguments):
        if not argument.startswith(flag):
            continue
        if len(argument) == len(flag):
            # value expected in the next argument
            return _value_from_next_argument(arguments, index, log, config)
        return _value_from_same_argument(argument, log, config)

    log.debug(f"No version can be extracted from arguments: {list(arguments)}")
    return None


def _value_from_next_argument(
    arguments: Sequence[str],
    index: int,
    log: Log,
    config: ResolverConfig,
) -> Optional[int]:
    if index == len(arguments) - 1:
        log.error(f"No argument value for {config.release_flag}")
        return None

    value = arguments[index + 1]
    log.debug(f"Version extracted from the next argument: {value}")
    return _parse_release(value, log, config)


def _value_from_same_argument(
    argument: str,
    log: Log,
    config: ResolverConfig,
) -> Optional[int]:
    flag = config.release_flag
    # one separator character, then at least one value character
    if len(argument) < len(flag) + 2:
        log.error(f"Invalid argument value for {flag}: {argument}")
        return None

    value = argument[len(flag) + 1:]
    log.debug(f"Version extracted from the same argument: {value}")
    return _parse_release(value, log, config)


def _parse_release(value: str, log: Log, config: ResolverConfig) -> Optional[int]:
    try:
        return parse_int(value)
    except ValueError:
        log.error(f"Invalid argument value for {config.release_flag}: {value}")
        return None
