"""
Confidence scoring.
"""

from bs4 import BeautifulSoup

from .fields import select_first
from .models import SitePatternSet


def calculate_confidence(soup: BeautifulSoup, patterns: SitePatternSet) -> int:
    """Percentage of fields whose selector chain matched at least one element."""
    score = 0
    total = 0

    for _, selectors in patterns.fields():
        total += 1
        if any(select_first(soup, selector) is not None for selector in selectors):
            score += 1

    if not total:
        return 0
    return round(100 * score / total)
