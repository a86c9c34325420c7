"""Analyzer package for Form Field Extractor."""

from .name_normalizer import NameNormalizer
from .label_resolver import LabelResolver
from .pdf_field_adapter import PDFFieldAdapter
from .html_field_adapter import HTMLFieldAdapter
from .dispatcher import ExtractorDispatcher

__all__ = [
    'NameNormalizer', 'LabelResolver',
    'PDFFieldAdapter', 'HTMLFieldAdapter', 'ExtractorDispatcher',
]
