"""
HTML Field Adapter - Canonical fields from a loaded page.
Owns the browser session and the navigated page for one extraction.
"""

from typing import Callable, List, Optional
from playwright.async_api import Page, Error as PlaywrightError
from form_field_extractor.analyzer.label_resolver import LabelResolver
from form_field_extractor.browser.browser_manager import BrowserManager
from form_field_extractor.browser.page_loader import PageLoader
from form_field_extractor.config.settings import Settings
from form_field_extractor.errors import (
    AcquisitionError, FieldExtractionError, StructuralParseError,
)
from form_field_extractor.models.field import FormField
from form_field_extractor.utils.logger import logger


class HTMLFieldAdapter:
    """Extracts form fields from an HTML page."""

    source = "html"

    def __init__(self, reference: str, timeout: Optional[int] = None,
                 headless: Optional[bool] = None,
                 browser_factory: Optional[Callable[..., BrowserManager]] = None):
        """
        Initialize the adapter. No browser is launched until open().

        Args:
            reference: Page URL
            timeout: Timeout in ms for launch, navigation and load wait
            headless: Override headless setting
            browser_factory: Builds the BrowserManager (for tests)
        """
        self.reference = reference
        self.timeout = timeout or Settings.DEFAULT_TIMEOUT
        self.headless = headless
        self.browser_factory = browser_factory or BrowserManager

        self.browser_manager: Optional[BrowserManager] = None
        self.page: Optional[Page] = None

    async def __aenter__(self):
        """Acquire the page; release anything partial on failure."""
        try:
            await self.open()
        except BaseException:
            await self.close()
            raise
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Release the browser session."""
        await self.close()

    async def open(self):
        """
        Launch a browser, open a page and load the reference.

        Raises:
            AcquisitionError: launch, navigation or load wait failed
        """
        self.browser_manager = self.browser_factory(headless=self.headless, timeout=self.timeout)

        try:
            await self.browser_manager.launch()
            self.page = await self.browser_manager.new_page()
        except PlaywrightError as e:
            raise AcquisitionError(self.reference, f"failed to start browser: {e}") from e

        await PageLoader.load(self.page, self.reference, timeout=self.timeout)

    async def extract(self) -> List[FormField]:
        """Extract fields from the loaded page."""
        if self.page is None:
            raise FieldExtractionError(self.reference, "page is not loaded")

        return await self.from_page(self.page, self.reference)

    @staticmethod
    async def from_page(page: Page, reference: str = "") -> List[FormField]:
        """
        Build one FormField per named form control, in document order.

        Args:
            page: Loaded Playwright page
            reference: Page reference, for error context

        Returns:
            List of FormField objects

        Raises:
            StructuralParseError: the control query was rejected
        """
        logger.step(5, "Extracting form controls")

        try:
            elements = await page.query_selector_all(Settings.FORM_CONTROL_SELECTOR)
        except PlaywrightError as e:
            raise StructuralParseError(reference, f"failed to find form elements: {e}") from e

        logger.metric("Controls found", len(elements))

        fields = []
        for element in elements:
            field = await LabelResolver.build_field(element, page)
            if field is None:
                logger.debug("Skipped control without a name attribute")
                continue
            fields.append(field)

        logger.metric("Fields extracted", len(fields))
        return fields

    async def close(self):
        """Close the page and the browser session. Idempotent."""
        manager, self.browser_manager = self.browser_manager, None
        self.page = None

        if manager is None:
            return

        logger.step(6, "Cleanup - Closing browser")
        await manager.close()
