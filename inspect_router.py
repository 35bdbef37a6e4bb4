#!/usr/bin/env python3
"""Quick script to check which router UI selectors are present after login.

Read-only: expands no menus and submits nothing. Useful after a firmware
update to see which selector broke.
"""

import sys

from lan_isolation.browser.session import BrowserSession
from lan_isolation.config import SELECTORS, load_settings
from lan_isolation.interaction.login import login
from lan_isolation.utils.logging import found, init_logging, log

PAGE_SELECTORS = ("main_frame",)
FRAME_SELECTORS = ("network_menu", "lan_submenu", "isolation_checkbox", "apply_button")


def probe(target, names):
    """Return {name: present} for each named selector on a page or frame"""
    results = {}
    for name in names:
        present = target.query_selector(SELECTORS[name]) is not None
        results[name] = present
        log(f"  {found(present)} {name}: {SELECTORS[name]}")
    return results


def main():
    init_logging()
    settings = load_settings()
    session = BrowserSession(settings)

    try:
        session.open()
        page = session.new_page()
        login(page, settings)

        print("\n" + "=" * 80)
        print("PAGE")
        print("=" * 80)
        probe(page, PAGE_SELECTORS)

        iframe = page.query_selector(SELECTORS["main_frame"])
        frame = iframe.content_frame() if iframe else None
        if frame is None:
            log("❌ No content frame, cannot inspect menu selectors")
            return 0

        print("\n" + "=" * 80)
        print(f"FRAME ({frame.url})")
        print("=" * 80)
        probe(frame, FRAME_SELECTORS)
        return 0
    except Exception as e:
        log(f"\n✗ Error: {e}\n")
        return 1
    finally:
        session.close()


if __name__ == "__main__":
    sys.exit(main())
