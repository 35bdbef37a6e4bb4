"""Menu navigation to the LAN settings page"""

from lan_isolation.config import SELECTOR_TIMEOUT_MS, SELECTORS
from lan_isolation.utils.logging import found, log


class FrameNotFoundError(RuntimeError):
    """The router's main iframe or its document could not be obtained"""


def _ancestor(handle, levels):
    """Walk up `levels` parents from an element. Returns None if the chain breaks."""
    if handle is None:
        return None
    script = """node => {
        let el = node;
        for (let i = 0; i < %d && el; i++) el = el.parentElement;
        return el;
    }""" % levels
    return handle.evaluate_handle(script).as_element()


def get_main_frame(page):
    """Wait for the router's main iframe and return its content frame"""
    page.wait_for_selector(SELECTORS["main_frame"], timeout=SELECTOR_TIMEOUT_MS)

    iframe = page.query_selector(SELECTORS["main_frame"])
    log("Found iframe", found(iframe))

    frame = iframe.content_frame() if iframe else None
    log("Got iframe content frame", found(frame))

    if frame is None:
        raise FrameNotFoundError("Failed to get iframe content frame")

    return frame


def navigate_to_lan_settings(page):
    """
    Open Network > LAN inside the main iframe.

    The menu is a table: clicking the Network row expands a submenu, and
    the LAN entry's clickable row is two levels above its label.

    Returns the iframe's frame, now showing the LAN settings form.
    """
    log("Navigating to LAN settings...")

    frame = get_main_frame(page)

    td_network = frame.query_selector(SELECTORS["network_menu"])
    log("Found Network menu item", found(td_network))

    tr_network = _ancestor(td_network, 1)
    log("Got Network menu row", found(tr_network))

    if tr_network:
        tr_network.click()

    frame.wait_for_selector(SELECTORS["lan_submenu"], timeout=SELECTOR_TIMEOUT_MS)

    font_lan = frame.query_selector(SELECTORS["lan_submenu"])
    log("Found LAN Settings submenu item", found(font_lan))

    tr_lan = _ancestor(font_lan, 2)
    log("Got LAN Settings menu row", found(tr_lan))

    # Without a row nothing triggers navigation and the wait times out
    with frame.expect_navigation(wait_until="networkidle"):
        if tr_lan:
            tr_lan.click()

    log("Navigation completed successfully")
    return frame
