"""
Browser Manager - Launch and manage the Playwright browser.
Owns the browser session used by the HTML extraction path.
"""

from typing import Optional
from playwright.async_api import async_playwright, Browser, BrowserContext, Page, Playwright
from form_field_extractor.config.settings import Settings
from form_field_extractor.config.browser_profiles import BrowserProfiles
from form_field_extractor.utils.logger import logger


class BrowserManager:
    """Manages Playwright browser lifecycle."""

    def __init__(self, profile_name: str = 'desktop_chrome', headless: Optional[bool] = None,
                 timeout: Optional[int] = None):
        """
        Initialize browser manager.

        Args:
            profile_name: Browser profile to use
            headless: Override headless setting
            timeout: Launch timeout in ms
        """
        self.profile_name = profile_name
        self.headless = headless if headless is not None else Settings.HEADLESS
        self.timeout = timeout or Settings.DEFAULT_TIMEOUT
        self.profile = BrowserProfiles.get_profile(profile_name)

        self.playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    async def launch(self) -> Browser:
        """
        Launch browser instance.

        Returns:
            Browser instance
        """
        logger.step(3, "Launching browser")

        self.playwright = await async_playwright().start()

        browser_type = getattr(self.playwright, Settings.BROWSER_TYPE)
        self.browser = await browser_type.launch(
            headless=self.headless,
            args=self.profile['args'],
            timeout=self.timeout,
        )

        # Create context with profile settings
        self.context = await self.browser.new_context(
            user_agent=self.profile['user_agent'],
            viewport=self.profile['viewport'],
            extra_http_headers=BrowserProfiles.get_headers(),
        )

        logger.success(f"Browser launched ({self.profile_name})")
        return self.browser

    async def new_page(self) -> Page:
        """
        Create a new page.

        Returns:
            Page instance
        """
        if not self.context:
            await self.launch()

        self._page = await self.context.new_page()
        return self._page

    async def close(self):
        """
        Close page, context, browser and driver.

        Safe to call more than once and after a partial launch; a failure
        closing one layer is logged and does not keep the others open.
        """
        page, self._page = self._page, None
        context, self.context = self.context, None
        browser, self.browser = self.browser, None
        playwright, self.playwright = self.playwright, None

        if not any((page, context, browser, playwright)):
            return

        for resource in (page, context, browser):
            if resource is None:
                continue
            try:
                await resource.close()
            except Exception as e:
                logger.warning(f"Failed to close {type(resource).__name__}: {e}")

        if playwright:
            try:
                await playwright.stop()
            except Exception as e:
                logger.warning(f"Failed to stop Playwright driver: {e}")

        logger.success("Browser closed")
