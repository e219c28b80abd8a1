"""
Regex-only extraction used when the document cannot be processed structurally.

Works on the raw string, so it cannot fail on markup the DOM path chokes on.
Results are always marked with a fixed low confidence.
"""

import re
from typing import Optional

from .logger import get_logger, no_trace
from .models import ExtractionResult, PropertyType
from .patterns import MAX_IMAGES
from .urls import Trace, find_img_sources, normalize_image_url

log = get_logger('fallback')

FALLBACK_CONFIDENCE = 20
FALLBACK_NAME = 'Extracted Project'
FALLBACK_DESCRIPTION = 'Project description extracted from HTML'
FALLBACK_LOCATION = 'Location not found'

TITLE_RE = re.compile(r'<title[^>]*>([^<|]+)', re.IGNORECASE)
META_DESCRIPTION_RE = re.compile(
    r'<meta[^>]*name=["\']description["\'][^>]*content="([^"]{20,300})"',
    re.IGNORECASE
)


def fallback_extract(html: str, base_url: Optional[str], trace: Trace = no_trace) -> ExtractionResult:
    """Basic title/meta/img extraction as a last resort."""
    name_match = TITLE_RE.search(html)
    name = name_match.group(1).strip() if name_match else ''

    desc_match = META_DESCRIPTION_RE.search(html)

    image_urls = []
    for src in find_img_sources(html):
        url = normalize_image_url(src, base_url, trace)
        if url not in image_urls:
            image_urls.append(url)
        if len(image_urls) >= MAX_IMAGES:
            break

    log.debug(f"Fallback found {len(image_urls)} images, name={name!r}")

    return ExtractionResult(
        name=name or FALLBACK_NAME,
        description=desc_match.group(1).strip() if desc_match else FALLBACK_DESCRIPTION,
        location=FALLBACK_LOCATION,
        type=PropertyType.RESIDENTIAL,
        thumbnail_url=image_urls[0] if image_urls else None,
        image_urls=tuple(image_urls[1:]),
        confidence=FALLBACK_CONFIDENCE,
        base_url=base_url,
        fallback=True,
    )
