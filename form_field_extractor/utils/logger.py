"""
Structured logging for the extractor.
Provides step-by-step tracking of the extraction pipeline.
"""

import logging
import sys
from typing import Any

from form_field_extractor.config.settings import Settings


class ExtractorLogger:
    """Custom logger for the extractor with step tracking."""
    
    def __init__(self, name: str = "FormFieldExtractor", level: str = "INFO"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))
        
        # Remove existing handlers
        self.logger.handlers.clear()
        
        # stdout carries the JSON result, so diagnostics go to stderr
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        self.logger.addHandler(handler)
    
    def set_level(self, level: str):
        """Change the log level (e.g. from the --debug flag)."""
        self.logger.setLevel(getattr(logging, level.upper()))
    
    def step(self, step_number: int, message: str):
        """Log a step in the extraction pipeline."""
        self.logger.info(f"[STEP {step_number:02d}] {message}")
    
    def info(self, message: str):
        """Log info message."""
        self.logger.info(message)
    
    def debug(self, message: str):
        """Log debug message."""
        self.logger.debug(message)
    
    def warning(self, message: str):
        """Log warning message."""
        self.logger.warning(message)
    
    def error(self, message: str):
        """Log error message."""
        self.logger.error(message)
    
    def success(self, message: str):
        """Log success message."""
        self.logger.info(f"[OK] {message}")
    
    def metric(self, name: str, value: Any):
        """Log a metric."""
        self.logger.info(f"[METRIC] {name}: {value}")


# Global logger instance
logger = ExtractorLogger(level=Settings.LOG_LEVEL)
