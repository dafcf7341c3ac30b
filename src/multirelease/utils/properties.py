"""
System property lookup.

A property such as ``java.version`` is looked up in an explicit mapping
when the caller provides one. Otherwise the process environment is used,
with the property name converted to an environment variable name:

    java.version  ->  JAVA_VERSION
"""

import os
from typing import Mapping, Optional


def property_env_name(name: str) -> str:
    """
    Environment variable name for a dotted property name.

    Example:
        >>> property_env_name("java.version")
        'JAVA_VERSION'
    """
    return name.replace(".", "_").replace("-", "_").upper()


def read_property(
    name: str,
    properties: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """
    Read one system property.

    Args:
        name: Dotted property name (e.g. "java.version")
        properties: Explicit property mapping; the environment is used if None

    Returns:
        The property value, or None if it is not set
    """
    if properties is not None:
        return properties.get(name)
    return os.environ.get(property_env_name(name))
