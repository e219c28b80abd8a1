"""
Listing HTML Parser

Turns raw HTML pasted from third-party real-estate sites into a structured,
best-effort listing record. Site-specific selector chains are tried first,
with regex fallbacks so a result is always returned.
"""

from .models import Amenity, ExtractionResult, PropertyType, SitePatternSet
from .parser import parse
from .urls import normalize_image_url, resolve_base_url

__all__ = [
    'Amenity',
    'ExtractionResult',
    'PropertyType',
    'SitePatternSet',
    'parse',
    'normalize_image_url',
    'resolve_base_url',
]
