"""
Log capability used by the resolver.

The resolver never configures logging itself. Callers inject a collaborator
with three methods (debug, warn, error); when none is given every message
is dropped.

Accepted collaborators:
    None            -> NullLog (no-op)
    logging.Logger  -> LoggerLog (warn maps to Logger.warning)
    LoggerAdapter   -> LoggerLog
    anything else   -> used as is, must provide debug/warn/error
"""

import logging
from typing import Optional, Protocol, Union, runtime_checkable


@runtime_checkable
class Log(Protocol):
    """Minimal logging capability: debug, warn and error."""

    def debug(self, message: str) -> None: ...

    def warn(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class NullLog:
    """Log that discards every message."""

    def debug(self, message: str) -> None:
        pass

    def warn(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass


class LoggerLog:
    """
    Adapter from the Log capability to a stdlib ``logging.Logger``.

    Args:
        logger: Target logger or LoggerAdapter
    """

    def __init__(self, logger: Union[logging.Logger, logging.LoggerAdapter]):
        self.logger = logger

    def debug(self, message: str) -> None:
        self.logger.debug(message)

    def warn(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)


def get_log(name: str) -> LoggerLog:
    """
    Get a Log backed by the stdlib logger of a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        LoggerLog instance
    """
    return LoggerLog(logging.getLogger(name))


LogLike = Union[Log, logging.Logger, logging.LoggerAdapter]


def as_log(log: Optional[LogLike]) -> Log:
    """Normalize an optional collaborator into a Log."""
    if log is None:
        return NullLog()
    if isinstance(log, (logging.Logger, logging.LoggerAdapter)):
        return LoggerLog(log)
    return log
