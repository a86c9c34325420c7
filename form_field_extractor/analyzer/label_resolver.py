"""
Label Resolver - Derive label, type and required flag for HTML controls.
Applies the label resolution chain to a single element.
"""

from typing import Optional
from playwright.async_api import Page, ElementHandle
from form_field_extractor.config.settings import Settings
from form_field_extractor.models.field import FormField
from form_field_extractor.utils.dom_utils import DOMUtils


class LabelResolver:
    """Resolves human-readable metadata for a form control."""

    @staticmethod
    async def resolve(element: ElementHandle, page: Page) -> str:
        """
        Resolve the best available label for an element.

        Resolution order (first non-empty wins):
        1. Text of ``label[for=<id>]``
        2. ``aria-label`` attribute
        3. ``placeholder`` attribute
        4. ``name`` attribute

        Args:
            element: Playwright element handle
            page: Page used to look up the associated label

        Returns:
            Label text; non-empty whenever the element has a name
        """
        element_id = await DOMUtils.get_attribute(element, 'id')
        if element_id:
            label_text = await DOMUtils.get_label_text(page, element_id)
            if label_text:
                return label_text

        for attribute in ('aria-label', 'placeholder', 'name'):
            value = await DOMUtils.get_attribute(element, attribute)
            if value:
                return value

        return ""

    @staticmethod
    async def resolve_type(element: ElementHandle) -> str:
        """Explicit type attribute, else select/textarea tag, else text."""
        type_attr = await DOMUtils.get_attribute(element, 'type')
        if type_attr and type_attr.strip():
            return type_attr.strip().lower()

        tag_name = await DOMUtils.get_tag_name(element)
        if tag_name in Settings.TAG_FIELD_TYPES:
            return tag_name

        return Settings.DEFAULT_FIELD_TYPE

    @staticmethod
    async def resolve_required(element: ElementHandle) -> bool:
        """Presence of the required attribute, whatever its value."""
        return await DOMUtils.get_attribute(element, 'required') is not None

    @staticmethod
    async def resolve_value(element: ElementHandle) -> Optional[str]:
        """Current value attribute, None when absent or empty."""
        return await DOMUtils.get_attribute(element, 'value') or None

    @staticmethod
    async def build_field(element: ElementHandle, page: Page) -> Optional[FormField]:
        """
        Build a FormField for one control.

        Args:
            element: Playwright element handle
            page: Page containing the element

        Returns:
            FormField, or None for controls without a name attribute
        """
        name = await DOMUtils.get_attribute(element, 'name')
        if not name:
            return None

        return FormField(
            name=name,
            type=await LabelResolver.resolve_type(element),
            label=await LabelResolver.resolve(element, page),
            required=await LabelResolver.resolve_required(element),
            value=await LabelResolver.resolve_value(element),
        )
