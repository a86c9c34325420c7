"""PDF acquisition and structural parsing for Form Field Extractor."""

from .downloader import Downloader
from .descriptor_reader import DescriptorReader

__all__ = ['Downloader', 'DescriptorReader']
