"""
Pytest configuration and shared fixtures.

Playwright pages, frames and element handles are replaced with mocks
wired to the router UI selectors, so no browser is launched.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from lan_isolation.config import SELECTORS, Settings
from lan_isolation.utils.logging import init_logging


@pytest.fixture(autouse=True)
def log_file(tmp_path):
    """Send every test's log output to a temporary file"""
    path = tmp_path / "logs" / "app.log"
    init_logging(str(path))
    return path


@pytest.fixture
def settings(tmp_path):
    return Settings(
        url="http://192.168.1.1/",
        username="admin",
        password="secret",
        profile_dir=tmp_path / "profile",
    )


def make_router(isolation_checked=True, has_iframe=True, has_content=True):
    """Build a mock page whose main iframe exposes the LAN settings UI"""
    checkbox = MagicMock(name="isolation_checkbox")
    checkbox.is_checked.return_value = isolation_checked
    apply_button = MagicMock(name="apply_button")

    network_row = MagicMock(name="network_row")
    network_cell = MagicMock(name="network_cell")
    network_cell.evaluate_handle.return_value.as_element.return_value = network_row

    lan_row = MagicMock(name="lan_row")
    lan_label = MagicMock(name="lan_label")
    lan_label.evaluate_handle.return_value.as_element.return_value = lan_row

    frame = MagicMock(name="frame")
    frame_elements = {
        SELECTORS["network_menu"]: network_cell,
        SELECTORS["lan_submenu"]: lan_label,
        SELECTORS["isolation_checkbox"]: checkbox,
        SELECTORS["apply_button"]: apply_button,
    }
    frame.query_selector.side_effect = frame_elements.get

    iframe = MagicMock(name="iframe")
    iframe.content_frame.return_value = frame if has_content else None

    page = MagicMock(name="page")
    page_elements = {SELECTORS["main_frame"]: iframe} if has_iframe else {}
    page.query_selector.side_effect = page_elements.get

    return SimpleNamespace(
        page=page,
        frame=frame,
        iframe=iframe,
        checkbox=checkbox,
        apply_button=apply_button,
        network_cell=network_cell,
        network_row=network_row,
        lan_label=lan_label,
        lan_row=lan_row,
    )


class FakeSession:
    """Stands in for BrowserSession, recording open/close calls"""

    def __init__(self, page, events=None):
        self.page = page
        self.events = events if events is not None else []
        self.open_calls = 0
        self.close_calls = 0

    def open(self):
        self.open_calls += 1
        self.events.append("open")
        return self

    def new_page(self):
        return self.page

    def close(self):
        self.close_calls += 1
        self.events.append("close")


@pytest.fixture
def router():
    return make_router()
