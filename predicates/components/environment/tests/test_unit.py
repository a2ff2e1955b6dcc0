"""
Environment component unit tests.

Tests for browser, OS and app detection against fake platform ports.
"""

from __future__ import annotations

import sys

import pytest

from predicates.components.environment import (
    DetectPlatformInput,
    HostPlatformAdapter,
    PlatformSnapshot,
    StaticPlatformAdapter,
    UserAgentAdapter,
    is_browser,
    is_iphone,
    is_mac,
    is_weixin,
    is_windows,
    run,
    snapshot,
)

WINDOWS_CHROME_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
MAC_SAFARI_UA = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.1 Safari/605.1.15"
)
IPHONE_UA = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_1 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.1 Mobile/15E148 Safari/604.1"
)
WEIXIN_UA = IPHONE_UA + " MicroMessenger/8.0.42(0x18002a2c) NetType/WIFI Language/zh_CN"

# --- Mock Implementations ---


class MockPlatform:
    """Counts reads to prove detectors never need more than read access."""

    def __init__(self, has_window: bool, user_agent: str, host_platform: str) -> None:
        self._has_window = has_window
        self._user_agent = user_agent
        self._host_platform = host_platform
        self.reads = 0

    def has_window_context(self) -> bool:
        self.reads += 1
        return self._has_window

    def current_user_agent(self) -> str:
        self.reads += 1
        return self._user_agent

    def host_platform_name(self) -> str:
        self.reads += 1
        return self._host_platform


# --- Fixtures ---


@pytest.fixture
def windows_browser() -> UserAgentAdapter:
    return UserAgentAdapter(WINDOWS_CHROME_UA, host_platform="linux")


@pytest.fixture
def iphone_browser() -> UserAgentAdapter:
    return UserAgentAdapter(IPHONE_UA)


# --- Browser detection ---


class TestIsBrowser:
    def test_host_process_is_not_a_browser(self) -> None:
        assert is_browser(HostPlatformAdapter()) is False

    def test_default_port_is_host(self) -> None:
        assert is_browser() is False

    def test_user_agent_adapter_is_a_browser(self, windows_browser: UserAgentAdapter) -> None:
        assert is_browser(windows_browser) is True


# --- OS detection ---


class TestIsWindows:
    def test_browser_uses_user_agent(self, windows_browser: UserAgentAdapter) -> None:
        assert is_windows(windows_browser) is True

    def test_browser_ignores_host_platform(self) -> None:
        platform = StaticPlatformAdapter(
            has_window=True, user_agent=MAC_SAFARI_UA, host_platform="win32"
        )
        assert is_windows(platform) is False

    def test_host_platform(self) -> None:
        assert is_windows(StaticPlatformAdapter(host_platform="win32")) is True
        assert is_windows(StaticPlatformAdapter(host_platform="linux")) is False

    def test_default_port_matches_sys_platform(self) -> None:
        assert is_windows() is (sys.platform == "win32")


class TestIsMac:
    def test_mac_user_agent(self) -> None:
        assert is_mac(UserAgentAdapter(MAC_SAFARI_UA)) is True

    def test_iphone_is_not_mac(self, iphone_browser: UserAgentAdapter) -> None:
        assert is_mac(iphone_browser) is False

    def test_host_platform(self) -> None:
        assert is_mac(StaticPlatformAdapter(host_platform="darwin")) is True
        assert is_mac(StaticPlatformAdapter(host_platform="win32")) is False


# --- Device and app detection ---


class TestIsIphone:
    def test_iphone_user_agent(self, iphone_browser: UserAgentAdapter) -> None:
        assert is_iphone(iphone_browser) is True

    def test_false_outside_browser(self) -> None:
        platform = StaticPlatformAdapter(has_window=False, user_agent=IPHONE_UA)
        assert is_iphone(platform) is False

    def test_case_insensitive(self) -> None:
        assert is_iphone(UserAgentAdapter("CPU IPHONE OS 17")) is True


class TestIsWeixin:
    def test_wechat_user_agent(self) -> None:
        assert is_weixin(UserAgentAdapter(WEIXIN_UA)) is True

    def test_plain_iphone(self, iphone_browser: UserAgentAdapter) -> None:
        assert is_weixin(iphone_browser) is False

    def test_false_outside_browser(self) -> None:
        platform = StaticPlatformAdapter(has_window=False, user_agent=WEIXIN_UA)
        assert is_weixin(platform) is False


# --- Snapshot and run ---


class TestRun:
    def test_snapshot(self) -> None:
        platform = StaticPlatformAdapter(
            has_window=True, user_agent=WEIXIN_UA, host_platform="linux"
        )
        assert snapshot(platform) == PlatformSnapshot(
            has_window=True, user_agent=WEIXIN_UA, host_platform="linux"
        )

    def test_run_with_user_agent_input(self) -> None:
        report = run(
            DetectPlatformInput(user_agent=WEIXIN_UA),
            platform=StaticPlatformAdapter(host_platform="darwin"),
        )
        assert report.is_browser is True
        assert report.is_iphone is True
        assert report.is_weixin is True
        assert report.is_mac is False
        assert report.is_windows is False
        assert report.snapshot.host_platform == "darwin"

    def test_run_with_port(self) -> None:
        report = run(
            DetectPlatformInput(), platform=StaticPlatformAdapter(host_platform="darwin")
        )
        assert report.is_browser is False
        assert report.is_mac is True
        assert report.is_iphone is False

    def test_detectors_are_repeatable(self) -> None:
        platform = MockPlatform(True, WINDOWS_CHROME_UA, "linux")
        first = run(DetectPlatformInput(), platform=platform)
        second = run(DetectPlatformInput(), platform=platform)
        assert first == second
        assert platform.reads > 0
