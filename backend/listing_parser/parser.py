"""
Listing parser - single entry point for HTML extraction.

Runs the structured (DOM) pipeline and swaps in the regex fallback whenever
that pipeline fails, so callers always get a result back.
"""

from typing import Any, Optional, Union

from bs4 import BeautifulSoup

from .confidence import calculate_confidence
from .fallback import fallback_extract
from .fields import (
    extract_amenities, extract_description, extract_images, extract_location,
    extract_name, extract_price, extract_thumbnail,
)
from .keywords import detect_property_type, extract_size_with_unit, extract_units
from .logger import get_logger, no_trace
from .models import ExtractionResult, ParseFailure
from .patterns import classify_site, get_pattern_set, site_from_hint
from .urls import Trace, resolve_base_url

log = get_logger('parser')


class UnparseableDocument(Exception):
    """The input has no element structure to run selectors against."""


def _parse_document(html: str) -> BeautifulSoup:
    soup = BeautifulSoup(html, 'html.parser')
    if soup.find() is None:
        raise UnparseableDocument("no elements found in document")
    return soup


def _extract_structured(
    html: str,
    template_hint: Any,
    manual_base_url: Optional[str],
    trace: Trace,
) -> Union[ExtractionResult, ParseFailure]:
    stage = 'parse'
    try:
        soup = _parse_document(html)

        stage = 'base_url'
        base_url = resolve_base_url(html, soup, manual_base_url)

        stage = 'classify'
        site = site_from_hint(template_hint) or classify_site(html)
        patterns = get_pattern_set(site)

        stage = 'fields'
        name = extract_name(soup, patterns.name)
        description = extract_description(soup, patterns.description)
        location = extract_location(soup, patterns.location)
        price = extract_price(soup, patterns.price)
        thumbnail_url = extract_thumbnail(soup, patterns.images, base_url, html, trace)
        image_urls = extract_images(soup, patterns.images, base_url, html, trace)
        amenities = extract_amenities(soup, patterns.features)

        stage = 'keywords'
        property_type = detect_property_type(html)
        number_of_units = extract_units(html)
        size, size_unit = extract_size_with_unit(html)

        stage = 'confidence'
        confidence = calculate_confidence(soup, patterns)

    except Exception as e:
        return ParseFailure(stage=stage, error=f"{type(e).__name__}: {e}")

    log.debug(f"Parsed {patterns.key} page: name={name!r}, {len(image_urls)} images, confidence={confidence}")

    return ExtractionResult(
        name=name,
        description=description,
        location=location,
        type=property_type,
        price=price,
        number_of_units=number_of_units,
        size=size,
        size_unit=size_unit,
        thumbnail_url=thumbnail_url,
        image_urls=tuple(image_urls),
        amenities=tuple(amenities),
        confidence=confidence,
        site=patterns.key,
        base_url=base_url,
    )


def _fallback(html: str, manual_base_url: Optional[str], trace: Trace) -> ExtractionResult:
    try:
        base_url = resolve_base_url(html, None, manual_base_url)
        return fallback_extract(html, base_url, trace)
    except Exception:
        log.exception("Fallback extraction failed, returning empty result")
        return fallback_extract('', manual_base_url or None)


def _as_text(html: Any) -> str:
    if html is None:
        return ''
    if isinstance(html, bytes):
        return html.decode('utf-8', errors='replace')
    return html if isinstance(html, str) else str(html)


def parse(
    html: str,
    template_hint: Any = None,
    manual_base_url: Optional[str] = None,
    trace: Optional[Trace] = None,
) -> ExtractionResult:
    """
    Extract a listing record from raw HTML.

    Args:
        html: Pasted page HTML, possibly malformed or empty
        template_hint: Optional pattern set key (or {'site': key}) to skip site detection
        manual_base_url: Overrides automatic base URL resolution when non-empty
        trace: Optional hook called as trace(rule, src, result) for each image URL normalization

    Returns:
        ExtractionResult; never raises. Fallback results have confidence 20.
    """
    trace = trace or no_trace
    html = _as_text(html)
    if not isinstance(manual_base_url, str):
        manual_base_url = None

    outcome = _extract_structured(html, template_hint, manual_base_url, trace)
    if isinstance(outcome, ParseFailure):
        log.warning(f"Structured extraction failed at {outcome.stage} ({outcome.error}), using fallback")
        return _fallback(html, manual_base_url, trace)

    return outcome
