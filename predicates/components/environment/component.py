"""
Environment component - host platform and user-agent detection.

Every detector reads ambient information through a PlatformInfoPort and
never mutates it. Omitting the port uses the process default adapter.

Invariants:
- I1: is_iphone and is_weixin are False outside a browser context
- I2: is_mac is False for iPhone user agents ("like Mac OS X")
- I3: user-agent matching is case-insensitive
"""

from __future__ import annotations

from .adapters import UserAgentAdapter, default_platform
from .models import DetectPlatformInput, PlatformReport, PlatformSnapshot
from .ports import PlatformInfoPort

WINDOWS_UA_TOKEN = "windows nt"
MAC_UA_TOKEN = "mac os x"
IPHONE_UA_TOKEN = "iphone os"
WEIXIN_UA_TOKEN = "micromessenger"

WINDOWS_PLATFORM = "win32"
MAC_PLATFORM = "darwin"


def _resolve(platform: PlatformInfoPort | None) -> PlatformInfoPort:
    return platform if platform is not None else default_platform


def _user_agent(platform: PlatformInfoPort) -> str:
    return platform.current_user_agent().lower()


def is_browser(platform: PlatformInfoPort | None = None) -> bool:
    return _resolve(platform).has_window_context()


def is_windows(platform: PlatformInfoPort | None = None) -> bool:
    platform = _resolve(platform)
    if platform.has_window_context():
        return WINDOWS_UA_TOKEN in _user_agent(platform)
    return platform.host_platform_name() == WINDOWS_PLATFORM


def is_iphone(platform: PlatformInfoPort | None = None) -> bool:
    platform = _resolve(platform)
    if not platform.has_window_context():
        return False
    return IPHONE_UA_TOKEN in _user_agent(platform)


def is_mac(platform: PlatformInfoPort | None = None) -> bool:
    platform = _resolve(platform)
    if platform.has_window_context():
        return MAC_UA_TOKEN in _user_agent(platform) and not is_iphone(platform)
    return platform.host_platform_name() == MAC_PLATFORM


def is_weixin(platform: PlatformInfoPort | None = None) -> bool:
    platform = _resolve(platform)
    if not platform.has_window_context():
        return False
    return WEIXIN_UA_TOKEN in _user_agent(platform)


def snapshot(platform: PlatformInfoPort | None = None) -> PlatformSnapshot:
    platform = _resolve(platform)
    return PlatformSnapshot(
        has_window=platform.has_window_context(),
        user_agent=platform.current_user_agent(),
        host_platform=platform.host_platform_name(),
    )


def run(
    inp: DetectPlatformInput,
    *,
    platform: PlatformInfoPort | None = None,
) -> PlatformReport:
    """
    Run every detector against one platform.

    A user agent on the input describes a browser context and takes
    precedence over the given port.
    """
    if inp.user_agent is not None:
        host = _resolve(platform).host_platform_name()
        platform = UserAgentAdapter(inp.user_agent, host_platform=host)
    else:
        platform = _resolve(platform)

    return PlatformReport(
        snapshot=snapshot(platform),
        is_browser=is_browser(platform),
        is_windows=is_windows(platform),
        is_mac=is_mac(platform),
        is_iphone=is_iphone(platform),
        is_weixin=is_weixin(platform),
    )
