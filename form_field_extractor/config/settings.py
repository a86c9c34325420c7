"""
Configuration settings for the Form Field Extractor.
Controls timeouts, retry behavior, and extraction rules.
"""

from typing import Dict, Any


class Settings:
    """Central configuration for the extractor."""
    
    # Browser settings
    HEADLESS: bool = True
    BROWSER_TYPE: str = "chromium"
    
    # Timeouts (in milliseconds)
    DEFAULT_TIMEOUT: int = 30000  # 30 seconds, per acquisition step
    
    # Download settings
    DOWNLOAD_CHUNK_SIZE: int = 64 * 1024
    TEMP_FILE_PREFIX: str = "form-"
    TEMP_FILE_SUFFIX: str = ".pdf"
    
    # Retry policy (used by the CLI, never by the dispatcher)
    MAX_ATTEMPTS: int = 3
    RETRY_DELAY: int = 1000  # 1 second between attempts
    
    # Which tags count as form controls on an HTML page
    FORM_CONTROL_SELECTOR: str = "input, select, textarea"
    
    # Type used for HTML controls without an explicit type attribute
    DEFAULT_FIELD_TYPE: str = "text"
    
    # Controls whose tag name is a better type than the default
    TAG_FIELD_TYPES: set = {'select', 'textarea'}
    
    # Logging
    LOG_LEVEL: str = "INFO"
    DEBUG_MODE: bool = False
    
    @classmethod
    def to_dict(cls) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            key: value for key, value in cls.__dict__.items()
            if not key.startswith('_') and not callable(value)
            and not isinstance(value, classmethod)
        }

    
    @classmethod
    def update(cls, **kwargs):
        """Update settings dynamically. Unknown keys are ignored."""
        for key, value in kwargs.items():
            if hasattr(cls, key.upper()):
                setattr(cls, key.upper(), value)
