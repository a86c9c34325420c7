"""Utility functions for Form Field Extractor."""

from .logger import logger, ExtractorLogger
from .dom_utils import DOMUtils

__all__ = ['logger', 'ExtractorLogger', 'DOMUtils']
