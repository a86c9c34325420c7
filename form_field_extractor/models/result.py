"""
Extraction result model - One extraction run.
Wraps the canonical field list with run metadata for the CLI.
"""

from dataclasses import dataclass, field as dataclass_field
from typing import List, Dict, Any
from datetime import datetime
from .field import FormField, fields_to_json


@dataclass
class ExtractionResult:
    """Result of extracting one reference."""
    
    # Input
    reference: str
    source: str = "unknown"  # pdf or html
    
    # Output
    fields: List[FormField] = dataclass_field(default_factory=list)
    
    # Run metadata
    attempts: int = 1
    duration_ms: float = 0.0
    notes: List[str] = dataclass_field(default_factory=list)
    timestamp: str = dataclass_field(default_factory=lambda: datetime.now().isoformat())
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (run metadata included)."""
        return {
            'reference': self.reference,
            'source': self.source,
            'fields': [f.to_dict() for f in self.fields],
            'attempts': self.attempts,
            'duration_ms': self.duration_ms,
            'notes': list(self.notes),
            'timestamp': self.timestamp,
        }
    
    def to_json(self, indent: int = 2) -> str:
        """Canonical output: the JSON array of fields."""
        return fields_to_json(self.fields, indent=indent)
    
    def save_to_file(self, filepath: str):
        """Save the canonical JSON array to a file."""
        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(self.to_json())
    
    def anomalies(self) -> List[FormField]:
        """Fields whose name or label came out empty."""
        return [f for f in self.fields if f.has_anomaly()]
    
    def required_count(self) -> int:
        """Number of fields explicitly marked required."""
        return sum(1 for f in self.fields if f.required)
    
    def summary(self) -> str:
        """Get a human-readable summary."""
        return (
            f"Extraction Summary\n"
            f"{'='*50}\n"
            f"Reference: {self.reference}\n"
            f"Source: {self.source}\n"
            f"Total Fields: {len(self.fields)}\n"
            f"Required Fields: {self.required_count()}\n"
            f"Anomalies: {len(self.anomalies())}\n"
            f"Attempts: {self.attempts}\n"
            f"Extraction Time: {self.duration_ms:.2f}ms\n"
            f"{'='*50}\n"
        )
    
    def __repr__(self) -> str:
        """String representation."""
        return (
            f"ExtractionResult(reference={self.reference}, source={self.source}, "
            f"fields={len(self.fields)})"
        )
