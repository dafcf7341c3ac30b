"""
Utility modules for multirelease.

Contains:
- Log capability and its stdlib logging adapter
- System property lookup
"""

from multirelease.utils.log import (
    Log,
    LogLike,
    NullLog,
    LoggerLog,
    get_log,
    as_log,
)
from multirelease.utils.properties import (
    property_env_name,
    read_property,
)

__all__ = [
    "Log",
    "LogLike",
    "NullLog",
    "LoggerLog",
    "get_log",
    "as_log",
    "property_env_name",
    "read_property",
]
