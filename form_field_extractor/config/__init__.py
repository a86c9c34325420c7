"""Configuration package for Form Field Extractor."""

from .settings import Settings
from .browser_profiles import BrowserProfiles

__all__ = ['Settings', 'BrowserProfiles']
