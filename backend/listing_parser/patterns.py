"""
Static pattern tables and site detection.

Known real-estate sites get their own selector chains; anything else uses
the generic set. Tables are built once at import and never mutated.
"""

from types import MappingProxyType
from typing import Any, Optional

from .models import PropertyType, SitePatternSet


DEFAULT_BASE_URL = 'https://example.com'
PLACEHOLDER_ICON = '/images/placeholder.webp'

MAX_IMAGES = 10
MAX_AMENITIES = 20

# Hostnames with a hardcoded origin when nothing better is found in the page
KNOWN_HOSTS = (
    ('myhomeconstructions.com', 'https://www.myhomeconstructions.com'),
)

GENERIC = 'generic'

SITE_PATTERNS = MappingProxyType({
    '99acres': SitePatternSet(
        key='99acres',
        name=('.projectName', 'h1.heading', '.project-title'),
        description=('.projectDesc', '.project-overview', '.description'),
        location=('.addressDiv', '.locName', '.address'),
        price=('.priceInfo', '.price', '.cost'),
        features=('.amenities', '.features', '.facilities'),
        images=('img[src*="project"]', '.gallery img', '.slider img'),
    ),
    'housing': SitePatternSet(
        key='housing',
        name=('h1.heading', '.projectName', '.title'),
        description=('.projectDesc', '.overview', '.about'),
        location=('.locName', '.address', '.location'),
        price=('.priceRange', '.price', '.cost'),
        features=('.amenities', '.features'),
        images=('.gallery img', '.project-images img'),
    ),
    'magicbricks': SitePatternSet(
        key='magicbricks',
        name=('.mb-srpL__title', 'h1', '.project-name'),
        description=('.mb-srpL__desc', '.description'),
        location=('.mb-srpL__locality', '.address'),
        price=('.mb-srpL__price', '.price'),
        features=('.amenities', '.features'),
        images=('.gallery img', '.project-gallery img'),
    ),
    GENERIC: SitePatternSet(
        key=GENERIC,
        name=('h1', 'h2.title', '.project-name', '.property-title', 'title'),
        description=('.description', '.overview', '.about', 'meta[name="description"]'),
        location=('.address', '.location', '.locality', '.city'),
        price=('.price', '.cost', '.pricing'),
        features=('.amenities', '.features', '.facilities'),
        images=('img[alt*="project"]', '.gallery img', '.property-images img'),
    ),
})

# Fingerprint substring -> pattern set key, checked in order
SITE_FINGERPRINTS = (
    ('99acres', '99acres'),
    ('housing.com', 'housing'),
    ('magicbricks', 'magicbricks'),
)

# Checked in enum order; first category with any keyword present wins
TYPE_KEYWORDS = MappingProxyType({
    PropertyType.RESIDENTIAL: (
        'apartment', 'residential', 'home', 'villa', 'flat', 'condo', 'townhouse', 'bhk',
    ),
    PropertyType.COMMERCIAL: (
        'commercial', 'office', 'retail', 'shop', 'mall', 'complex', 'business',
    ),
    PropertyType.MIXED_USE: (
        'mixed', 'integrated', 'township', 'development',
    ),
    PropertyType.INDUSTRIAL: (
        'industrial', 'warehouse', 'factory', 'manufacturing',
    ),
})


def classify_site(html: str) -> str:
    """Return the pattern set key for the first known site fingerprint in the HTML."""
    html_lower = html.lower()
    for fingerprint, key in SITE_FINGERPRINTS:
        if fingerprint in html_lower:
            return key
    return GENERIC


def get_pattern_set(key: Optional[str]) -> SitePatternSet:
    return SITE_PATTERNS.get(key or GENERIC, SITE_PATTERNS[GENERIC])


def site_from_hint(template_hint: Any) -> Optional[str]:
    """
    Pick a pattern set key from a caller-supplied template hint.

    Accepts a bare key ('housing') or a mapping with a 'site' entry.
    Anything else is ignored.
    """
    if isinstance(template_hint, dict):
        template_hint = template_hint.get('site')
    if isinstance(template_hint, str) and template_hint.lower() in SITE_PATTERNS:
        return template_hint.lower()
    return None
