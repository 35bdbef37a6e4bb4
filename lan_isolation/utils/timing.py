"""Timing utilities"""

import time

from lan_isolation.config import SETTLE_DELAY_MS


def settle_delay(ms=SETTLE_DELAY_MS):
    """Fixed pause to let client-side UI transitions finish"""
    time.sleep(ms / 1000)
