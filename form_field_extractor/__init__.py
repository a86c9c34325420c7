"""
Form Field Extractor.
Canonical form field descriptors from PDF AcroForms and HTML forms.
"""

from .analyzer.dispatcher import ExtractorDispatcher
from .errors import (
    ExtractionError, AcquisitionError, StructuralParseError, FieldExtractionError,
)
from .models.field import FormField, fields_to_json, fields_from_json
from .models.result import ExtractionResult

__all__ = [
    'ExtractorDispatcher',
    'ExtractionError', 'AcquisitionError', 'StructuralParseError', 'FieldExtractionError',
    'FormField', 'fields_to_json', 'fields_from_json',
    'ExtractionResult',
]
