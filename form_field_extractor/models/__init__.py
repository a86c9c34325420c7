"""Data models for Form Field Extractor."""

from .field import FormField, fields_to_json, fields_from_json
from .result import ExtractionResult

__all__ = ['FormField', 'fields_to_json', 'fields_from_json', 'ExtractionResult']
