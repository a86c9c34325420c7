"""Browser package for Form Field Extractor."""

from .browser_manager import BrowserManager
from .page_loader import PageLoader

__all__ = ['BrowserManager', 'PageLoader']
