"""
Data models for listing extraction.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Iterator
from enum import Enum


class PropertyType(Enum):
    """Listing categories, in keyword-matching priority order."""
    RESIDENTIAL = "RESIDENTIAL"
    COMMERCIAL = "COMMERCIAL"
    MIXED_USE = "MIXED_USE"
    INDUSTRIAL = "INDUSTRIAL"


@dataclass(frozen=True)
class SitePatternSet:
    """Selector chains for one site template. First match wins within a chain."""
    key: str
    name: Tuple[str, ...]
    description: Tuple[str, ...]
    location: Tuple[str, ...]
    price: Tuple[str, ...]
    features: Tuple[str, ...]
    images: Tuple[str, ...]

    FIELD_NAMES = ('name', 'description', 'location', 'price', 'features', 'images')

    def fields(self) -> Iterator[Tuple[str, Tuple[str, ...]]]:
        """Yield (field_name, selector_chain) pairs in a fixed order."""
        for name in self.FIELD_NAMES:
            yield name, getattr(self, name)


@dataclass(frozen=True)
class Amenity:
    """A single amenity with its display icon."""
    name: str
    icon: str

    def to_dict(self) -> dict:
        return {"name": self.name, "icon": self.icon}


@dataclass(frozen=True)
class ExtractionResult:
    """Best-effort listing record extracted from one HTML document."""
    name: str
    description: str
    location: str
    type: PropertyType = PropertyType.RESIDENTIAL
    price: Optional[str] = None
    number_of_units: Optional[int] = None
    size: Optional[float] = None
    size_unit: Optional[str] = None  # acres, hectares or sqft
    thumbnail_url: Optional[str] = None
    image_urls: Tuple[str, ...] = field(default_factory=tuple)
    amenities: Tuple[Amenity, ...] = field(default_factory=tuple)
    confidence: int = 0

    # Extraction metadata
    site: Optional[str] = None  # pattern set key, None on the fallback path
    base_url: Optional[str] = None
    fallback: bool = False

    def needs_review(self, threshold: int = 50) -> bool:
        """Low-confidence results should go through manual review."""
        return self.fallback or self.confidence < threshold

    def to_dict(self) -> dict:
        """Serialize with the camelCase keys the listing form expects."""
        return {
            "name": self.name,
            "description": self.description,
            "location": self.location,
            "type": self.type.value,
            "price": self.price,
            "numberOfUnits": self.number_of_units,
            "size": self.size,
            "sizeUnit": self.size_unit,
            "thumbnailUrl": self.thumbnail_url,
            "imageUrls": list(self.image_urls),
            "amenities": [a.to_dict() for a in self.amenities],
            "confidence": self.confidence,
            "site": self.site,
            "baseUrl": self.base_url,
            "fallback": self.fallback,
        }


@dataclass(frozen=True)
class ParseFailure:
    """Structured extraction could not complete."""
    stage: str
    error: str
