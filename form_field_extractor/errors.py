"""
Extraction errors.

Every failure that aborts an extraction is an ``ExtractionError`` tagged
with the phase it happened in, so callers can decide whether a retry can
help without parsing messages.
"""

from typing import Optional


class ExtractionError(Exception):
    """Base error for a failed extraction of one reference."""
    
    phase: str = "extract"
    retryable: bool = False
    
    def __init__(self, reference: str, message: str, phase: Optional[str] = None):
        self.reference = reference
        self.message = message
        if phase:
            self.phase = phase
        super().__init__(f"[{self.phase}] {reference}: {message}")


class AcquisitionError(ExtractionError):
    """Download, navigation, load-wait or browser launch failed."""
    
    phase = "acquire"
    retryable = True


class StructuralParseError(ExtractionError):
    """The document or page yields no interpretable field list."""
    
    phase = "parse"


class FieldExtractionError(ExtractionError):
    """Unexpected failure while turning raw data into fields."""
    
    phase = "extract"
