"""Browser session management"""

from playwright.sync_api import sync_playwright

from lan_isolation.browser.preferences import ensure_profile_preferences
from lan_isolation.config import LAUNCH_ARGS
from lan_isolation.utils.logging import log


class BrowserSession:
    """
    Owns the single browser for a run.

    Launches Chromium with a persistent profile so cookies and the patched
    Preferences file carry over between runs. Only one browser may be open
    per session object; close() is safe to call at any time.
    """

    def __init__(self, settings, playwright_factory=sync_playwright):
        self.settings = settings
        self._playwright_factory = playwright_factory
        self._playwright = None
        self.context = None

    @property
    def is_open(self):
        return self.context is not None

    def _launch(self, profile_dir):
        return self._playwright.chromium.launch_persistent_context(
            user_data_dir=str(profile_dir),
            headless=self.settings.headless,
            args=LAUNCH_ARGS,
            executable_path=self.settings.chromium_path,
        )

    def _bootstrap_profile(self, profile_dir):
        """Launch and immediately close a browser so Chromium creates the profile"""
        throwaway = self._launch(profile_dir)
        throwaway.close()

    def open(self):
        """Patch profile preferences, then launch the long-lived browser"""
        if self.is_open:
            raise RuntimeError("Browser session is already open")

        log("Opening browser...")
        self._playwright = self._playwright_factory().start()

        try:
            ensure_profile_preferences(
                self.settings.profile_dir, self._bootstrap_profile
            )
            self.context = self._launch(self.settings.profile_dir)
        except Exception:
            self._playwright.stop()
            self._playwright = None
            raise

        return self

    def new_page(self):
        if not self.is_open:
            raise RuntimeError("Browser session is not open")
        return self.context.new_page()

    def close(self):
        """Close the browser if one is open. Never raises."""
        context, self.context = self.context, None
        playwright, self._playwright = self._playwright, None

        if context is not None:
            try:
                context.close()
                log("Browser closed")
            except Exception as e:
                log(f"  ⚠️ Error closing browser: {e}")

        if playwright is not None:
            try:
                playwright.stop()
            except Exception as e:
                log(f"  ⚠️ Error stopping Playwright: {e}")
