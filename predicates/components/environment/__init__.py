"""
Environment component - browser, OS and app detection.

Detectors read the host platform name and the user-agent string through
PlatformInfoPort so they can run against a real host, a request's
user agent, or fixed test values.
"""

from .adapters import (
    HostPlatformAdapter,
    StaticPlatformAdapter,
    UserAgentAdapter,
    default_platform,
)
from .component import (
    is_browser,
    is_iphone,
    is_mac,
    is_weixin,
    is_windows,
    run,
    snapshot,
)
from .models import DetectPlatformInput, PlatformReport, PlatformSnapshot
from .ports import PlatformInfoPort

__all__ = [
    # Entry points
    "run",
    "snapshot",
    "is_browser",
    "is_iphone",
    "is_mac",
    "is_weixin",
    "is_windows",
    # Models
    "DetectPlatformInput",
    "PlatformReport",
    "PlatformSnapshot",
    # Ports
    "PlatformInfoPort",
    # Adapters
    "HostPlatformAdapter",
    "StaticPlatformAdapter",
    "UserAgentAdapter",
    "default_platform",
]
