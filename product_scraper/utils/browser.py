# product_scraper/utils/browser.py

import subprocess
import sys
from pathlib import Path
from typing import Optional

from playwright.async_api import async_playwright

from product_scraper.sources.scraper_config import SCRAPER_SETTINGS
from product_scraper.utils.logging_config import Logger, _log


# ----------------------------------------------------------
# Make sure Playwright's Chromium is installed
# ----------------------------------------------------------
def ensure_browsers_installed(logger: Optional[Logger] = None) -> None:
    """
    The 'playwright' package can be installed without its browsers
    (fresh CI runners, containers). Install Chromium on demand.
    """
    _log(logger, "Playwright Chromium is missing, installing it (first run only)…")

    cmd = [sys.executable, "-m", "playwright", "install", "chromium"]
    try:
        subprocess.run(cmd, check=True)
        _log(logger, "Playwright Chromium installation finished ✅")
    except Exception as e:
        _log(logger, f"❌ Failed to install Playwright browsers automatically: {e}")
        raise


class BrowserFactory:
    """
    Async context manager around one Chromium instance:

        async with BrowserFactory(headless=True) as page:
            await page.goto(url)
    """

    def __init__(self, headless=True, logger: Optional[Logger] = None):
        self.headless = headless
        self.logger = logger
        self.browser = None
        self.page = None
        self.pw = None

    async def _launch(self):
        return await self.pw.chromium.launch(
            headless=self.headless,
            args=SCRAPER_SETTINGS["BROWSER_ARGS"],
        )

    async def __aenter__(self):
        self.pw = await async_playwright().start()

        try:
            return await self._open_page()
        except BaseException:
            await self.__aexit__(None, None, None)
            raise

    async def _open_page(self):
        try:
            self.browser = await self._launch()
        except Exception as e:
            # "Executable doesn't exist at /home/.../ms-playwright/chromium-..."
            if "Executable doesn't exist" not in str(e):
                raise
            ensure_browsers_installed(self.logger)
            self.browser = await self._launch()

        context = await self.browser.new_context(
            viewport=SCRAPER_SETTINGS["VIEWPORT"],
            java_script_enabled=True,
            locale=SCRAPER_SETTINGS["LOCALE"],
            timezone_id=SCRAPER_SETTINGS["TIMEZONE"],
            user_agent=SCRAPER_SETTINGS["USER_AGENT"],
        )

        # Basic anti-bot hardening
        await context.add_init_script(
            "Object.defineProperty(navigator, 'webdriver', { get: () => undefined });"
        )

        self.page = await context.new_page()
        return self.page

    async def __aexit__(self, exc_type, exc, tb):
        try:
            if self.browser:
                await self.browser.close()
        finally:
            if self.pw:
                await self.pw.stop()


# ----------------------------------------------------------
# Full-page screenshot
# ----------------------------------------------------------
async def capture_screenshot(page, path: str, logger: Optional[Logger] = None) -> Optional[str]:
    try:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        await page.screenshot(path=path, full_page=True)
    except Exception as e:
        _log(logger, f"⚠️ Screenshot failed ({path}): {e}")
        return None
    _log(logger, f"📸 Screenshot saved: {path}")
    return path
