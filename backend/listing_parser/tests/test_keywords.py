"""
Keyword Classifier Tests
========================
"""

import unittest

from backend.listing_parser.keywords import (
    detect_property_type, extract_size, extract_size_with_unit, extract_units,
)
from backend.listing_parser.models import PropertyType


class TestPropertyType(unittest.TestCase):

    def test_default_residential(self):
        self.assertEqual(detect_property_type('<p>Nothing to see here</p>'), PropertyType.RESIDENTIAL)
        self.assertEqual(detect_property_type(''), PropertyType.RESIDENTIAL)

    def test_commercial(self):
        self.assertEqual(detect_property_type('<p>Prime OFFICE space</p>'), PropertyType.COMMERCIAL)

    def test_mixed_use(self):
        self.assertEqual(detect_property_type('<p>A mixed-use plan</p>'), PropertyType.MIXED_USE)

    def test_industrial(self):
        self.assertEqual(detect_property_type('<p>Logistics warehouse park</p>'), PropertyType.INDUSTRIAL)

    def test_category_priority(self):
        # residential keywords are checked before industrial ones
        self.assertEqual(detect_property_type('A warehouse next to a villa'), PropertyType.RESIDENTIAL)

    def test_substring_match(self):
        # 'township' contains 'shop', and commercial is checked before mixed use
        self.assertEqual(detect_property_type('An integrated township'), PropertyType.COMMERCIAL)


class TestUnits(unittest.TestCase):

    def test_units(self):
        self.assertEqual(extract_units('<p>A total of 312 units across 4 towers</p>'), 312)

    def test_other_unit_words(self):
        self.assertEqual(extract_units('120 Villas'), 120)
        self.assertEqual(extract_units('only 48apartments left'), 48)

    def test_none(self):
        self.assertIsNone(extract_units('<p>no count</p>'))


class TestSize(unittest.TestCase):

    def test_acres(self):
        self.assertEqual(extract_size('Spread over 4.2 acres of greenery'), 4.2)
        self.assertEqual(extract_size_with_unit('Spread over 4.2 acres'), (4.2, 'acres'))

    def test_square_feet_variants(self):
        self.assertEqual(extract_size_with_unit('1500 sq. ft'), (1500.0, 'sqft'))
        self.assertEqual(extract_size_with_unit('1500 Sq Ft'), (1500.0, 'sqft'))
        self.assertEqual(extract_size_with_unit('980sqft'), (980.0, 'sqft'))

    def test_site_name_is_not_a_size(self):
        self.assertEqual(extract_size('<title>Lotus | 99acres</title><p>4.2 acres</p>'), 4.2)
        self.assertIsNone(extract_size('www.99acres.com'))

    def test_hectares(self):
        self.assertEqual(extract_size_with_unit('3 hectares'), (3.0, 'hectares'))

    def test_none(self):
        self.assertIsNone(extract_size('<p>no size</p>'))
        self.assertEqual(extract_size_with_unit(''), (None, None))


if __name__ == '__main__':
    unittest.main()
