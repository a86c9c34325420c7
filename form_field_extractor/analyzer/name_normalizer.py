"""
Name Normalizer - Clean raw PDF field identifiers.
Turns the name tail of a PDF descriptor into a stable name and a label.
"""

import re
from typing import Tuple

_SUFFIX_DIGITS = re.compile(r'[0-9]+')


class NameNormalizer:
    """Normalizes raw PDF field names."""
    
    @staticmethod
    def normalize(raw_name: str) -> Tuple[str, str]:
        """
        Split a raw name tail into a clean name and a human-readable label.
        
        The first token is a structural marker and is dropped. A trailing
        ``_<digits>`` suffix is kept in the name for uniqueness and rendered
        as `` (<digits>)`` in the label::
        
            "12 Owner Name_2"  ->  ("Owner Name_2", "Owner Name (2)")
            "7 \\"Zip Code}"    ->  ("Zip Code", "Zip Code")
        
        Args:
            raw_name: Space-joined tokens following the type token
            
        Returns:
            (clean_name, label); both may be empty for degenerate input
        """
        parts = raw_name.split()
        if len(parts) < 2:
            # A lone token may be the name itself, not an ordinal
            return raw_name, raw_name
        
        base_name = " ".join(parts[1:]).strip()
        
        suffix = ""
        idx = base_name.rfind("_")
        if idx != -1 and _SUFFIX_DIGITS.fullmatch(base_name[idx + 1:]):
            suffix = base_name[idx:]
            base_name = base_name[:idx].rstrip()
        
        # Descriptor artifacts, not general punctuation
        base_name = base_name.strip().strip('"').rstrip('}')
        
        if not suffix:
            return base_name, base_name
        
        return base_name + suffix, f"{base_name} ({suffix[1:]})"
