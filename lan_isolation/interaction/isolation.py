"""LAN isolation checkbox handling"""

from lan_isolation.config import SELECTOR_TIMEOUT_MS, SELECTORS
from lan_isolation.utils.logging import found, log


def find_isolation_checkbox(frame):
    """Wait for the LAN Isolation checkbox. Returns (checkbox, is_checked)."""
    frame.wait_for_selector(
        SELECTORS["isolation_checkbox"], timeout=SELECTOR_TIMEOUT_MS
    )

    checkbox = frame.query_selector(SELECTORS["isolation_checkbox"])
    log("Found LAN Isolation checkbox", found(checkbox))

    return checkbox, bool(checkbox and checkbox.is_checked())


def disable_isolation(frame, checkbox):
    """Uncheck the checkbox and submit the form"""
    checkbox.click()
    log("Clicked LAN Isolation checkbox")

    apply_button = frame.query_selector(SELECTORS["apply_button"])
    log("Found Apply button", found(apply_button))

    with frame.expect_navigation(wait_until="networkidle"):
        if apply_button:
            apply_button.click()
            log("Clicked Apply button")

    log("LAN Isolation disabled successfully ✅")
