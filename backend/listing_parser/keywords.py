"""
Keyword classification and numeric facts pulled from the raw page text.
"""

import re
from typing import Optional, Tuple

from .models import PropertyType
from .patterns import TYPE_KEYWORDS


UNITS_RE = re.compile(r'(\d+)\s*(units|apartments|flats|homes|villas)', re.IGNORECASE)
# The 99acres site name reads like a size, so it is skipped
SIZE_RE = re.compile(r'(?<![\d.])(?!99acres)(\d+(?:\.\d+)?)\s*(acres|sq\.?\s*ft|sqft|hectares)', re.IGNORECASE)


def detect_property_type(html: str) -> PropertyType:
    """First category with any keyword in the text; RESIDENTIAL if none match."""
    html_lower = html.lower()
    for property_type, keywords in TYPE_KEYWORDS.items():
        for keyword in keywords:
            if keyword in html_lower:
                return property_type
    return PropertyType.RESIDENTIAL


def extract_units(html: str) -> Optional[int]:
    match = UNITS_RE.search(html)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        return None


def _size_unit(raw_unit: str) -> str:
    unit = raw_unit.lower()
    if unit.startswith('sq'):
        return 'sqft'
    return unit


def extract_size_with_unit(html: str) -> Tuple[Optional[float], Optional[str]]:
    """
    Project size and the unit it was stated in.

    Units are reported as 'acres', 'hectares' or 'sqft'. No conversion is
    done between them.
    """
    match = SIZE_RE.search(html)
    if not match:
        return None, None
    try:
        return float(match.group(1)), _size_unit(match.group(2))
    except ValueError:
        return None, None


def extract_size(html: str) -> Optional[float]:
    """Numeric size magnitude only, whatever unit matched."""
    return extract_size_with_unit(html)[0]
