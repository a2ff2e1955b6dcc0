"""
Platform info adapters for the environment component.
"""

from __future__ import annotations

import logging
import sys

logger = logging.getLogger(__name__)


class HostPlatformAdapter:
    """Adapter for a plain Python process: no window, platform from sys.platform."""

    def has_window_context(self) -> bool:
        return False

    def current_user_agent(self) -> str:
        return ""

    def host_platform_name(self) -> str:
        return sys.platform


class UserAgentAdapter:
    """
    Adapter for a browser context described by a user-agent string,
    e.g. the User-Agent header of an incoming request.
    """

    def __init__(self, user_agent: str, host_platform: str | None = None) -> None:
        self._user_agent = user_agent
        self._host_platform = host_platform if host_platform is not None else sys.platform
        logger.debug("UserAgentAdapter created for %r", user_agent)

    def has_window_context(self) -> bool:
        return True

    def current_user_agent(self) -> str:
        return self._user_agent

    def host_platform_name(self) -> str:
        return self._host_platform


class StaticPlatformAdapter:
    """Adapter with fixed values (tests, server-side rendering)."""

    def __init__(
        self,
        *,
        has_window: bool = False,
        user_agent: str = "",
        host_platform: str = "linux",
    ) -> None:
        self._has_window = has_window
        self._user_agent = user_agent
        self._host_platform = host_platform

    def has_window_context(self) -> bool:
        return self._has_window

    def current_user_agent(self) -> str:
        return self._user_agent

    def host_platform_name(self) -> str:
        return self._host_platform


# Default adapter instance
default_platform = HostPlatformAdapter()
