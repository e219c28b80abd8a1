"""
Project details scaffold for the listing creation form.

Arranges an ExtractionResult into the sections an operator reviews before
saving: overview, highlights, amenities, gallery and map.
"""

from typing import Any, Dict, List
from urllib.parse import quote

from .models import ExtractionResult
from .patterns import PLACEHOLDER_ICON

MAX_GALLERY = 6
MAPS_EMBED_URL = 'https://maps.google.com/maps?q={query}&t=&z=15&ie=UTF8&iwloc=&output=embed'


def _highlights(result: ExtractionResult) -> List[Dict[str, Any]]:
    highlights = []
    if result.number_of_units:
        highlights.append({
            "value": result.number_of_units,
            "label": "Total Units",
            "icon": PLACEHOLDER_ICON,
        })
    if result.size:
        highlights.append({
            "value": result.size,
            "unit": result.size_unit,
            "label": "Project Area",
            "icon": PLACEHOLDER_ICON,
        })
    highlights.append({
        "value": result.type.value,
        "label": "Property Type",
        "icon": PLACEHOLDER_ICON,
    })
    return highlights


def build_project_details(result: ExtractionResult) -> Dict[str, Any]:
    """Form pre-fill sections derived from an extraction result."""
    amenities = [a.to_dict() for a in result.amenities]
    half = (len(amenities) + 1) // 2

    gallery_urls = [url for url in (result.thumbnail_url, *result.image_urls) if url]
    gallery = []
    for url in gallery_urls:
        if url not in (g["image"] for g in gallery):
            gallery.append({"name": f"Gallery Image {len(gallery) + 1}", "image": url})
        if len(gallery) >= MAX_GALLERY:
            break

    return {
        "overview": {
            "description": result.description,
            "location": result.location,
        },
        "highlights": _highlights(result),
        "amenities": {
            "indoorImages": amenities[:half],
            "outdoorImages": amenities[half:],
        },
        "gallery": gallery,
        "googleMaps": {
            "embedUrl": MAPS_EMBED_URL.format(query=quote(result.location, safe='')),
            "address": result.location,
        },
    }
