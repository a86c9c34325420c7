"""
FormField model - Canonical field record.
Represents a single form field extracted from a PDF or an HTML page.
"""

import json
from dataclasses import dataclass
from typing import Optional, Dict, Any, List, Iterable


@dataclass(frozen=True)
class FormField:
    """Normalized, format-independent field record."""
    
    name: str                        # unique within one extraction result
    type: str                        # text, select, checkbox, ... or a PDF type token
    label: str                       # human-readable, falls back to name
    required: bool = False
    value: Optional[str] = None
    
    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the canonical JSON object.
        
        ``required`` and ``value`` are only emitted when they differ from
        their defaults.
        """
        data: Dict[str, Any] = {
            'name': self.name,
            'type': self.type,
            'label': self.label,
        }
        if self.required:
            data['required'] = True
        if self.value:
            data['value'] = self.value
        return data
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FormField':
        """Build a FormField from its canonical JSON object."""
        return cls(
            name=data['name'],
            type=data['type'],
            label=data['label'],
            required=bool(data.get('required', False)),
            value=data.get('value') or None,
        )
    
    def has_anomaly(self) -> bool:
        """True when normalization left the name or label empty."""
        return not self.name or not self.label
    
    def __repr__(self) -> str:
        """String representation."""
        flag = ", required" if self.required else ""
        return f"FormField({self.name}[{self.type}] - {self.label}{flag})"


def fields_to_json(fields: Iterable[FormField], indent: Optional[int] = 2) -> str:
    """Serialize fields as the canonical JSON array."""
    return json.dumps([f.to_dict() for f in fields], indent=indent)


def fields_from_json(text: str) -> List[FormField]:
    """Parse a canonical JSON array back into FormField records."""
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("Expected a JSON array of field objects")
    return [FormField.from_dict(item) for item in data]
