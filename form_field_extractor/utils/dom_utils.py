"""
DOM access utilities.
Attribute, tag and label lookups that treat driver failures as "absent".
"""

from typing import Optional
from playwright.async_api import Page, ElementHandle, Error as PlaywrightError
from form_field_extractor.utils.logger import logger


class DOMUtils:
    """DOM access helper functions."""

    @staticmethod
    async def get_attribute(element: ElementHandle, name: str) -> Optional[str]:
        """
        Read an attribute from an element.

        Args:
            element: Playwright element handle
            name: Attribute name

        Returns:
            Attribute value ("" for boolean attributes), None if absent
            or if the read failed
        """
        try:
            return await element.get_attribute(name)
        except PlaywrightError as e:
            logger.debug(f"Failed to read attribute '{name}': {e}")
            return None

    @staticmethod
    async def get_tag_name(element: ElementHandle) -> str:
        """
        Get the lowercase tag name of an element.

        Args:
            element: Playwright element handle

        Returns:
            Tag name, empty string if it could not be read
        """
        try:
            return await element.evaluate("(el) => el.tagName.toLowerCase()")
        except PlaywrightError as e:
            logger.debug(f"Failed to read tag name: {e}")
            return ""

    @staticmethod
    def label_selector(element_id: str) -> str:
        """Build a ``label[for=...]`` selector with the id quoted safely."""
        escaped = element_id.replace('\\', '\\\\').replace('"', '\\"')
        return f'label[for="{escaped}"]'

    @staticmethod
    async def get_label_text(page: Page, element_id: str) -> Optional[str]:
        """
        Find the rendered text of the label associated with an id.

        Args:
            page: Playwright page object
            element_id: Value of the control's id attribute

        Returns:
            Stripped label text if a label exists, None otherwise
        """
        try:
            label = await page.query_selector(DOMUtils.label_selector(element_id))
            if label is None:
                return None
            text = await label.inner_text()
            return text.strip() if text else None
        except PlaywrightError as e:
            logger.debug(f"Failed to resolve label for '#{element_id}': {e}")
            return None
