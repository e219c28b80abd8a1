"""
Base URL resolution and image URL normalization.

Relative image references in pasted HTML have lost their page context, so a
base URL is recovered from whatever the markup still carries.
"""

import re
from typing import Callable, List, Optional
from urllib.parse import urlparse

from .logger import get_logger, no_trace
from .patterns import DEFAULT_BASE_URL, KNOWN_HOSTS

log = get_logger('urls')

Trace = Callable[[str, str, str], None]

ABSOLUTE_URL_RE = re.compile(r'https?://([^/\s"\']+)', re.IGNORECASE)

# src attribute of every <img> tag, ignoring data-src and similar
IMG_SRC_RE = re.compile(
    r'<img\b[^>]*?(?<![\w-])src\s*=\s*["\']([^"\']+)["\']',
    re.IGNORECASE
)


def find_img_sources(html: str) -> List[str]:
    """Raw src values of all <img> tags, in document order."""
    return [src.strip() for src in IMG_SRC_RE.findall(html) if src.strip()]


def _origin(url: Optional[str]) -> Optional[str]:
    """scheme://host of an absolute URL, None if it has neither."""
    if not url:
        return None
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return None
    if parsed.scheme not in ('http', 'https') or not parsed.netloc:
        return None
    return f"{parsed.scheme}://{parsed.netloc}"


def resolve_base_url(html: str, soup=None, manual_base_url: Optional[str] = None) -> str:
    """
    Determine the base URL for resolving relative references.

    Order: manual override, <base href>, canonical link origin, og:url origin,
    first absolute URL in the raw text, known-host special cases, default.
    """
    if manual_base_url and manual_base_url.strip():
        return manual_base_url.strip()

    if soup is not None:
        base_tag = soup.find('base', href=True)
        # relative base hrefs need the page URL we don't have
        if base_tag and _origin(base_tag['href']):
            return base_tag['href'].strip()

        canonical = soup.find('link', rel='canonical')
        origin = _origin(canonical.get('href')) if canonical else None
        if origin:
            return origin

        og_url = soup.find('meta', attrs={'property': 'og:url'})
        origin = _origin(og_url.get('content')) if og_url else None
        if origin:
            return origin

    match = ABSOLUTE_URL_RE.search(html)
    if match:
        scheme = match.group(0).split(':', 1)[0].lower()
        return f"{scheme}://{match.group(1)}"

    for host, origin in KNOWN_HOSTS:
        if host in html:
            return origin

    log.debug(f"No base URL found, using {DEFAULT_BASE_URL}")
    return DEFAULT_BASE_URL


def normalize_image_url(src: str, base_url: Optional[str], trace: Trace = no_trace) -> str:
    """Turn an image reference into an absolute URL where possible."""
    if not src or src.startswith(('data:', 'blob:')):
        trace('opaque', src, src)
        return src

    if src.startswith(('http://', 'https://')):
        trace('absolute', src, src)
        return src

    if src.startswith('//'):
        result = f"https:{src}"
        trace('protocol-relative', src, result)
        return result

    if not base_url:
        trace('no-base', src, src)
        return src

    clean_base = base_url.rstrip('/')

    if src.startswith('/'):
        result = f"{clean_base}{src}"
        trace('root-relative', src, result)
        return result

    result = f"{clean_base}/{src}"
    trace('relative', src, result)
    return result
