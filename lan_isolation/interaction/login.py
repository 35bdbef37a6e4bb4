"""Router login"""

from lan_isolation.config import SELECTORS
from lan_isolation.utils.logging import log


def login(page, settings):
    """Log into the router admin UI and wait for the post-login page to settle"""
    log("Logging in...")

    settings.require_credentials()

    page.goto(settings.url, wait_until="networkidle")
    page.fill(SELECTORS["username"], settings.username)
    page.fill(SELECTORS["password"], settings.password)

    with page.expect_navigation(wait_until="networkidle"):
        page.click(SELECTORS["login_submit"])

    log("Logged in successfully")
