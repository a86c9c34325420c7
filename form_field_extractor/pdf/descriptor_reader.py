"""
Descriptor Reader - Turn a PDF's AcroForm into descriptor lines.

Each terminal form field becomes one whitespace-separated line::

    <ordinal> <page> <type> <object-id> <fully.qualified.name>

Consumers rely only on token 2 being the type and tokens 3+ being the
raw name tail (object id first).
"""

from typing import Any, BinaryIO, Dict, List, Optional, Tuple

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from form_field_extractor.errors import StructuralParseError
from form_field_extractor.utils.logger import logger

# Field flag bits (PDF 32000-1:2008, 12.7.4)
FF_RADIO = 1 << 15
FF_PUSHBUTTON = 1 << 16
FF_COMBO = 1 << 17

FIELD_TYPES = {
    '/Tx': 'text',
    '/Sig': 'signature',
}


def _resolve(obj: Any) -> Any:
    """Dereference an indirect PDF object; plain values pass through."""
    return obj.get_object() if hasattr(obj, 'get_object') else obj


class DescriptorReader:
    """Reads per-field descriptor lines from a PDF document."""

    @staticmethod
    def read(handle: BinaryIO, reference: str = "") -> List[str]:
        """
        Read descriptor lines for every terminal field.

        Args:
            handle: Readable binary handle positioned anywhere
            reference: Document reference, for error context

        Returns:
            Descriptor lines in document field order

        Raises:
            StructuralParseError: not a PDF, or no form fields
        """
        logger.step(4, "Reading PDF form fields")

        try:
            handle.seek(0)
            reader = PdfReader(handle)
            fields = reader.get_fields()
            locations = DescriptorReader._widget_locations(reader)
        except (PyPdfError, ValueError) as e:
            raise StructuralParseError(reference, f"error listing form fields: {e}") from e

        if not fields:
            raise StructuralParseError(reference, "document has no form fields")

        descriptors = []
        for name, field in fields.items():
            if not DescriptorReader._is_terminal(field):
                continue

            ordinal = len(descriptors) + 1
            page, object_id = locations.get(name, (0, ordinal))
            field_type = DescriptorReader.field_type(field)
            descriptors.append(f"{ordinal} {page} {field_type} {object_id} {name}")

        logger.metric("Descriptors read", len(descriptors))
        return descriptors

    @staticmethod
    def field_type(field: Dict[str, Any]) -> str:
        """
        Map a field's /FT and /Ff entries to a lowercase type token.

        Args:
            field: Field dictionary

        Returns:
            text, checkbox, radio, pushbutton, combo, listbox, signature,
            or the bare /FT name lowercased
        """
        ft = DescriptorReader._inherited(field, '/FT')
        flags = int(DescriptorReader._inherited(field, '/Ff') or 0)

        if ft == '/Btn':
            if flags & FF_PUSHBUTTON:
                return 'pushbutton'
            if flags & FF_RADIO:
                return 'radio'
            return 'checkbox'

        if ft == '/Ch':
            return 'combo' if flags & FF_COMBO else 'listbox'

        if ft in FIELD_TYPES:
            return FIELD_TYPES[ft]

        return str(ft).lstrip('/').lower() if ft else 'unknown'

    @staticmethod
    def _inherited(field: Dict[str, Any], key: str) -> Optional[Any]:
        """Look up an inheritable field attribute through /Parent."""
        node = field
        while node is not None:
            if key in node:
                return node[key]
            node = _resolve(node.get('/Parent'))
        return None

    @staticmethod
    def _is_terminal(field: Dict[str, Any]) -> bool:
        """A field is terminal when none of its kids is a named field."""
        if DescriptorReader._inherited(field, '/FT') is None:
            return False

        kids = field.get('/Kids')
        if not kids:
            return True

        return not any('/T' in _resolve(kid) for kid in kids)

    @staticmethod
    def _widget_locations(reader: PdfReader) -> Dict[str, Tuple[int, int]]:
        """Map fully qualified field names to (page number, object id)."""
        locations: Dict[str, Tuple[int, int]] = {}

        for page_number, page in enumerate(reader.pages, start=1):
            annots = page.get('/Annots')
            if not annots:
                continue

            for ref in _resolve(annots):
                annotation = _resolve(ref)
                if annotation.get('/Subtype') != '/Widget':
                    continue

                name = DescriptorReader._qualified_name(annotation)
                if name and name not in locations:
                    object_id = getattr(ref, 'idnum', None) or len(locations) + 1
                    locations[name] = (page_number, object_id)

        return locations

    @staticmethod
    def _qualified_name(annotation: Dict[str, Any]) -> Optional[str]:
        """Join /T values up the /Parent chain, as get_fields() keys them."""
        components = []
        node = annotation
        while node is not None:
            partial = node.get('/T')
            if partial:
                components.append(str(partial))
            node = _resolve(node.get('/Parent'))
        return ".".join(reversed(components)) if components else None
