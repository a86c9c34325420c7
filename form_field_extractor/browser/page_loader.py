"""
Page Loader - Navigate to a URL and wait for it to load.
Both waits are bounded; any failure is an acquisition error.
"""

from typing import Optional
from playwright.async_api import (
    Page, TimeoutError as PlaywrightTimeoutError, Error as PlaywrightError,
)
from form_field_extractor.config.settings import Settings
from form_field_extractor.errors import AcquisitionError
from form_field_extractor.utils.logger import logger


class PageLoader:
    """Handles page navigation and load waiting."""

    ALLOWED_SCHEMES = ('http://', 'https://', 'file://')

    @staticmethod
    async def load(
        page: Page,
        url: str,
        timeout: Optional[int] = None
    ) -> Page:
        """
        Navigate to a URL and wait for the load event.

        Args:
            page: Playwright page object
            url: URL to load (as-is, no modification)
            timeout: Timeout in ms for navigation and for the load wait

        Returns:
            Loaded page

        Raises:
            AcquisitionError: invalid URL, navigation failure or timeout
        """
        if not url.lower().startswith(PageLoader.ALLOWED_SCHEMES):
            raise AcquisitionError(url, "URL must start with http://, https:// or file://")

        timeout = timeout or Settings.DEFAULT_TIMEOUT

        logger.step(4, "Loading page")

        try:
            logger.debug(f"Navigating to {url}")
            await page.goto(url, wait_until='domcontentloaded', timeout=timeout)
        except PlaywrightTimeoutError as e:
            logger.error(f"Navigation timeout: {url}")
            raise AcquisitionError(url, f"navigation did not finish within {timeout}ms") from e
        except PlaywrightError as e:
            logger.error(f"Navigation failed: {e}")
            raise AcquisitionError(url, f"failed to navigate: {e}") from e

        try:
            await page.wait_for_load_state('load', timeout=timeout)
        except PlaywrightTimeoutError as e:
            logger.error(f"Page load timeout: {url}")
            raise AcquisitionError(url, f"page did not load within {timeout}ms") from e
        except PlaywrightError as e:
            logger.error(f"Page load failed: {e}")
            raise AcquisitionError(url, f"failed waiting for page load: {e}") from e

        logger.success("Page loaded")
        return page
