"""
Environment component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class PlatformInfoPort(Protocol):
    """Port for ambient platform information - enables deterministic testing."""

    def has_window_context(self) -> bool:
        """True when running inside a browser-like context."""
        ...

    def current_user_agent(self) -> str:
        """User-agent string, empty outside a browser context."""
        ...

    def host_platform_name(self) -> str:
        """Host platform identifier in sys.platform form ("win32", "darwin", "linux")."""
        ...
