"""
Environment component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PlatformSnapshot:
    """Platform information read once from a provider."""

    has_window: bool
    user_agent: str
    host_platform: str


@dataclass(frozen=True)
class DetectPlatformInput:
    """Input for running every detector at once."""

    user_agent: str | None = None


@dataclass(frozen=True)
class PlatformReport:
    """Output of the environment detectors."""

    snapshot: PlatformSnapshot
    is_browser: bool
    is_windows: bool
    is_mac: bool
    is_iphone: bool
    is_weixin: bool
