"""
Adapters for the environment component.
"""

from .host import (
    HostPlatformAdapter,
    StaticPlatformAdapter,
    UserAgentAdapter,
    default_platform,
)

__all__ = [
    "HostPlatformAdapter",
    "StaticPlatformAdapter",
    "UserAgentAdapter",
    "default_platform",
]
