"""
PDF Field Adapter - Canonical fields from PDF descriptor lines.
Owns the local document handle (and temp file) for one extraction.
"""

import asyncio
from pathlib import Path
from typing import BinaryIO, Iterable, List, Optional
from urllib.parse import urlparse
from urllib.request import url2pathname

from form_field_extractor.analyzer.name_normalizer import NameNormalizer
from form_field_extractor.config.settings import Settings
from form_field_extractor.errors import AcquisitionError, FieldExtractionError
from form_field_extractor.models.field import FormField
from form_field_extractor.pdf.descriptor_reader import DescriptorReader
from form_field_extractor.pdf.downloader import Downloader
from form_field_extractor.utils.logger import logger


class PDFFieldAdapter:
    """Extracts form fields from a PDF document."""

    source = "pdf"

    def __init__(self, reference: str, timeout: Optional[int] = None,
                 downloader: Optional[Downloader] = None):
        """
        Initialize the adapter. No I/O happens until open().

        Args:
            reference: URL, file:// URL or local path of the PDF
            timeout: Download deadline in ms
            downloader: Downloader to use for remote references
        """
        self.reference = reference
        self.timeout = timeout or Settings.DEFAULT_TIMEOUT
        self.downloader = downloader or Downloader(timeout=self.timeout)

        self.path: Optional[Path] = None
        self.handle: Optional[BinaryIO] = None
        self._owns_file = False

    async def __aenter__(self):
        """Acquire the document; release anything partial on failure."""
        try:
            await self.open()
        except BaseException:
            await self.close()
            raise
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Release the document."""
        await self.close()

    @staticmethod
    def local_path(reference: str) -> Optional[Path]:
        """Path for local references, None for http(s) URLs."""
        lowered = reference.lower()
        if lowered.startswith(('http://', 'https://')):
            return None
        if lowered.startswith('file://'):
            return Path(url2pathname(urlparse(reference).path))
        return Path(reference)

    async def open(self):
        """
        Make the document locally readable.

        Raises:
            AcquisitionError: download failed or the file cannot be opened
        """
        local = self.local_path(self.reference)
        if local is None:
            self.path = await asyncio.to_thread(self.downloader.download, self.reference)
            self._owns_file = True
        else:
            logger.step(3, f"Opening local document: {local}")
            self.path = local

        try:
            self.handle = open(self.path, 'rb')
        except OSError as e:
            raise AcquisitionError(self.reference, f"cannot open document: {e}") from e

    async def extract(self) -> List[FormField]:
        """
        Read the document's descriptors and normalize them.

        Returns:
            Fields in descriptor order
        """
        if self.handle is None:
            raise FieldExtractionError(self.reference, "document is not open")

        descriptors = await asyncio.to_thread(DescriptorReader.read, self.handle, self.reference)
        return self.from_descriptors(descriptors)

    @staticmethod
    def from_descriptors(descriptors: Iterable[str]) -> List[FormField]:
        """
        Convert descriptor lines into FormField records.

        Token 2 is the type and tokens 3+ are the raw name tail.
        Descriptors with fewer than 3 tokens are skipped; a name or label
        that normalizes to empty is kept and logged.

        Args:
            descriptors: Descriptor lines

        Returns:
            One FormField per well-formed descriptor, input order preserved
        """
        logger.step(5, "Normalizing PDF field names")

        fields = []
        skipped = 0

        for descriptor in descriptors:
            parts = descriptor.split()
            if len(parts) < 3:
                logger.warning(f"Skipped malformed descriptor: {descriptor!r}")
                skipped += 1
                continue

            clean_name, label = NameNormalizer.normalize(" ".join(parts[3:]))
            field = FormField(name=clean_name, type=parts[2], label=label)

            if field.has_anomaly():
                logger.warning(f"Empty name or label after normalization: {descriptor!r}")

            fields.append(field)

        logger.metric("Descriptors skipped", skipped)
        logger.metric("Fields normalized", len(fields))
        return fields

    async def close(self):
        """Close the handle and remove the temp file. Idempotent."""
        handle, self.handle = self.handle, None
        path, self.path = self.path, None
        owns_file, self._owns_file = self._owns_file, False

        if handle is None and path is None:
            return

        logger.step(6, "Cleanup - Releasing PDF document")

        if handle is not None:
            try:
                handle.close()
            except OSError as e:
                logger.warning(f"Error closing PDF file: {e}")

        if path is not None and owns_file:
            Downloader.remove(path)
