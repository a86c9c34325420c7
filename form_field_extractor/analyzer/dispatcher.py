"""
Extractor Dispatcher - Pick the adapter for a reference and run it.
Every dispatch builds its own adapter and releases it exactly once.
"""

from typing import Callable, List, Optional, Protocol, Union
from form_field_extractor.analyzer.html_field_adapter import HTMLFieldAdapter
from form_field_extractor.analyzer.pdf_field_adapter import PDFFieldAdapter
from form_field_extractor.browser.browser_manager import BrowserManager
from form_field_extractor.config.settings import Settings
from form_field_extractor.errors import ExtractionError, FieldExtractionError
from form_field_extractor.models.field import FormField
from form_field_extractor.pdf.downloader import Downloader
from form_field_extractor.utils.logger import logger


class FieldAdapter(Protocol):
    """What the dispatcher needs from an adapter."""

    source: str

    async def __aenter__(self) -> "FieldAdapter": ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None: ...

    async def extract(self) -> List[FormField]: ...

    async def close(self) -> None: ...


class ExtractorDispatcher:
    """Selects the PDF or HTML path for a reference."""

    def __init__(self, timeout: Optional[int] = None, headless: Optional[bool] = None,
                 downloader: Optional[Downloader] = None,
                 browser_factory: Optional[Callable[..., BrowserManager]] = None):
        """
        Initialize dispatcher.

        Args:
            timeout: Acquisition timeout in ms (download, navigation, load wait)
            headless: Override headless setting for the HTML path
            downloader: Downloader for the PDF path
            browser_factory: BrowserManager factory for the HTML path
        """
        self.timeout = timeout or Settings.DEFAULT_TIMEOUT
        self.headless = headless
        self.downloader = downloader
        self.browser_factory = browser_factory

    @staticmethod
    def is_pdf_reference(reference: str) -> bool:
        """Case-insensitive ``.pdf`` suffix check; no content sniffing."""
        return reference.lower().endswith('.pdf')

    def select_adapter(self, reference: str) -> Union[PDFFieldAdapter, HTMLFieldAdapter]:
        """
        Build the adapter for a reference without acquiring anything.

        Args:
            reference: URL or path

        Returns:
            PDFFieldAdapter for ``.pdf`` references, HTMLFieldAdapter otherwise
        """
        if self.is_pdf_reference(reference):
            return PDFFieldAdapter(reference, timeout=self.timeout, downloader=self.downloader)

        return HTMLFieldAdapter(
            reference,
            timeout=self.timeout,
            headless=self.headless,
            browser_factory=self.browser_factory,
        )

    async def dispatch(self, reference: str) -> List[FormField]:
        """
        Acquire, extract and release for one reference.

        Args:
            reference: URL or path of a PDF or HTML form

        Returns:
            Canonical fields in source order

        Raises:
            ExtractionError: tagged with the failing phase
        """
        logger.step(1, f"Accepting reference: {reference}")

        adapter: FieldAdapter = self.select_adapter(reference)
        logger.step(2, f"Selected {adapter.source.upper()} extraction path")

        try:
            async with adapter:
                fields = await adapter.extract()
        except ExtractionError:
            raise
        except Exception as e:
            logger.error(f"Extraction failed: {e}")
            raise FieldExtractionError(reference, f"failed to extract fields: {e}") from e

        logger.success(f"Extracted {len(fields)} fields from {reference}")
        return fields
