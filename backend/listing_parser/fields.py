"""
Per-field extractors.

Each extractor walks the selector chain for its field and applies the
field's sanity bounds, falling back to page-level tags and finally to a
placeholder literal.
"""

import re
from typing import Iterable, List, Optional, Sequence

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from .logger import get_logger, no_trace
from .models import Amenity
from .patterns import MAX_AMENITIES, MAX_IMAGES, PLACEHOLDER_ICON
from .urls import Trace, find_img_sources, normalize_image_url

log = get_logger('fields')

NAME_NOT_FOUND = 'Project Name Not Found'
NO_DESCRIPTION = 'No description available'
LOCATION_NOT_SPECIFIED = 'Location not specified'

PRICE_RE = re.compile(r'\d[\d,.]*(?:\s?(?:crore|cr|lakhs|lakh))?', re.IGNORECASE)
TITLE_SEPARATOR_RE = re.compile(r'[|\-]')

# Substrings that mark site chrome rather than listing photos
EXCLUDED_IMAGE_PATTERNS = ('icon', 'logo', 'localhost')

AMENITY_ITEM_SELECTOR = 'li, .amenity, .feature'


# =============================================================================
# DOM HELPERS
# =============================================================================

def select_first(soup: BeautifulSoup, selector: str) -> Optional[Tag]:
    """select_one that treats an invalid selector as no match."""
    try:
        return soup.select_one(selector)
    except (SelectorSyntaxError, ValueError) as e:
        log.debug(f"Bad selector {selector!r}: {e}")
        return None


def select_all(soup, selector: str) -> List[Tag]:
    try:
        return soup.select(selector)
    except (SelectorSyntaxError, ValueError) as e:
        log.debug(f"Bad selector {selector!r}: {e}")
        return []


def element_text(element: Tag) -> str:
    """Text content, or the content attribute for meta-like elements."""
    return element.get_text() or element.get('content') or ''


def _collapse(text: str) -> str:
    return re.sub(r'\s+', ' ', text).strip()


def _first_segment(text: str) -> str:
    """Drop a trailing site suffix like ' | SiteName' or ' - SiteName'."""
    return TITLE_SEPARATOR_RE.split(text, 1)[0].strip()


def _matches(soup: BeautifulSoup, selectors: Iterable[str]) -> Iterable[Tag]:
    """First element for each selector in the chain that matches."""
    for selector in selectors:
        element = select_first(soup, selector)
        if element is not None:
            yield element


# =============================================================================
# TEXT FIELDS
# =============================================================================

def extract_name(soup: BeautifulSoup, selectors: Sequence[str]) -> str:
    for element in _matches(soup, selectors):
        name = _first_segment(element_text(element).strip())
        if 5 < len(name) < 100:
            return name

    title = soup.find('title')
    if title:
        return _first_segment(title.get_text()) or NAME_NOT_FOUND

    return NAME_NOT_FOUND


def extract_description(soup: BeautifulSoup, selectors: Sequence[str]) -> str:
    for element in _matches(soup, selectors):
        desc = _collapse(element_text(element))
        if 20 < len(desc) < 500:
            return desc

    meta = soup.find('meta', attrs={'name': 'description'})
    if meta:
        return meta.get('content', '').strip() or NO_DESCRIPTION

    return NO_DESCRIPTION


def extract_location(soup: BeautifulSoup, selectors: Sequence[str]) -> str:
    for element in _matches(soup, selectors):
        location = element.get_text().strip()
        if ',' in location or len(location) > 10:
            return location
    return LOCATION_NOT_SPECIFIED


def extract_price(soup: BeautifulSoup, selectors: Sequence[str]) -> Optional[str]:
    """Price text like '1.25 Cr' or '85,00,000'; None if nothing numeric is found."""
    for element in _matches(soup, selectors):
        match = PRICE_RE.search(element.get_text().strip())
        if match:
            return match.group(0)
    return None


# =============================================================================
# IMAGES
# =============================================================================

def _accept_image(src: Optional[str]) -> bool:
    return bool(src) and not any(p in src for p in EXCLUDED_IMAGE_PATTERNS)


def _dom_image_sources(soup: BeautifulSoup, selectors: Sequence[str]) -> List[str]:
    sources = []
    for selector in selectors:
        for img in select_all(soup, selector):
            src = img.get('src')
            if src:
                sources.append(src.strip())
    return sources


def extract_thumbnail(
    soup: BeautifulSoup,
    selectors: Sequence[str],
    base_url: str,
    html: str,
    trace: Trace = no_trace,
) -> Optional[str]:
    """
    First acceptable image in the page.

    The raw HTML is scanned before the DOM because the parsed tree can hand
    back src values that no longer match what was pasted.
    """
    for src in find_img_sources(html):
        if _accept_image(src):
            return normalize_image_url(src, base_url, trace)

    for src in _dom_image_sources(soup, selectors):
        if _accept_image(src):
            return normalize_image_url(src, base_url, trace)

    return None


def extract_images(
    soup: BeautifulSoup,
    selectors: Sequence[str],
    base_url: str,
    html: str,
    trace: Trace = no_trace,
) -> List[str]:
    """Unique normalized image URLs in first-seen order, capped at MAX_IMAGES."""
    images = {}  # insertion-ordered set

    for src in find_img_sources(html):
        if len(images) >= MAX_IMAGES:
            break
        if _accept_image(src):
            images.setdefault(normalize_image_url(src, base_url, trace), None)

    # DOM chain only fills what the raw scan left over
    if len(images) < MAX_IMAGES:
        for src in _dom_image_sources(soup, selectors):
            if len(images) >= MAX_IMAGES:
                break
            if _accept_image(src):
                images.setdefault(normalize_image_url(src, base_url, trace), None)

    return list(images)


# =============================================================================
# AMENITIES
# =============================================================================

def extract_amenities(soup: BeautifulSoup, selectors: Sequence[str]) -> List[Amenity]:
    amenities = []

    for container in _matches(soup, selectors):
        for item in select_all(container, AMENITY_ITEM_SELECTOR):
            text = item.get_text().strip()
            if 3 < len(text) < 50:
                amenities.append(Amenity(name=text, icon=PLACEHOLDER_ICON))
                if len(amenities) >= MAX_AMENITIES:
                    return amenities

    return amenities
