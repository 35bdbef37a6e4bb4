"""Configuration for the LAN isolation automation"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

# ========================================
# PATHS
# ========================================
# Browser profile lives in the home directory, outside any checkout or venv
DEFAULT_PROFILE_DIR = Path.home() / ".playwright_isolated_profile"

LOG_DIR = "logs"
LOG_FILE = os.path.join(LOG_DIR, "app.log")

# ========================================
# TIMING
# ========================================
# All values in milliseconds unless noted
SETTLE_DELAY_MS = 500  # Pause between steps for UI transitions
SELECTOR_TIMEOUT_MS = 5000  # Bounded wait for specific elements
SHUTDOWN_TIMEOUT_S = 60  # Watchdog before forcing exit

# ========================================
# EXIT CODES
# ========================================
EXIT_SUCCESS = 0
EXIT_FAILURE = 1

# ========================================
# BROWSER LAUNCH
# ========================================
LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-features=PasswordLeakDetection",
    "--disable-save-password-bubble",
]

# ========================================
# ROUTER UI SELECTORS
# ========================================
# Tied to the router firmware's HTML. Any firmware change breaks these.
SELECTORS = {
    "username": 'input[name="Username"]',
    "password": 'input[name="Password"]',
    "login_submit": 'input[type="submit"]',
    "main_frame": 'iframe[id="mainFrame"]',
    "network_menu": 'td[id="mmNet"]',
    "lan_submenu": 'font[id="smAddMgr"]',
    "isolation_checkbox": 'input[name="Frm_IsolateEnable"]',
    "apply_button": 'input[id="Btn_Submit"]',
}


class ConfigurationError(RuntimeError):
    """Required configuration value is missing"""


@dataclass(frozen=True)
class Settings:
    """Run inputs, read once from the environment"""

    url: Optional[str]
    username: Optional[str]
    password: Optional[str]
    headless: bool = False
    chromium_path: Optional[str] = None
    profile_dir: Path = DEFAULT_PROFILE_DIR

    def require_credentials(self):
        """Raise ConfigurationError unless URL, USERNAME and PASSWORD are all set"""
        if not self.url or not self.username or not self.password:
            raise ConfigurationError(
                "Missing URL, USERNAME, or PASSWORD in environment variables"
            )


def load_settings(environ=None):
    """
    Build Settings from the environment.

    A `.env` file in the working directory is loaded first when reading
    the real process environment; values already exported take precedence.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    profile_dir = environ.get("PROFILE_DIR")

    return Settings(
        url=environ.get("URL") or None,
        username=environ.get("USERNAME") or None,
        password=environ.get("PASSWORD") or None,
        headless=environ.get("HEADLESS") == "true",
        chromium_path=environ.get("CHROMIUM_PATH") or None,
        profile_dir=Path(profile_dir) if profile_dir else DEFAULT_PROFILE_DIR,
    )
