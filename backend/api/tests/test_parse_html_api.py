"""
Parser API Tests
================

POST /api/parse-html through the Flask test client.
"""

import unittest
from unittest import mock

from config import Config
from backend.app import create_app


LISTING = (
    '<html><head><title>Skyline Residency | housing.com</title></head><body>'
    '<h1 class="heading">Skyline Residency</h1>'
    '<div class="locName">Whitefield, Bangalore</div>'
    '<img src="/gallery/1.jpg"></body></html>'
)


class TestParseHtmlApi(unittest.TestCase):

    def setUp(self):
        self.client = create_app().test_client()

    def test_parse(self):
        resp = self.client.post('/api/parse-html', json={
            'htmlSource': LISTING,
            'baseUrl': 'https://housing.example',
        })
        self.assertEqual(resp.status_code, 200)
        data = resp.get_json()
        parsed = data['parsedData']
        self.assertEqual(parsed['name'], 'Skyline Residency')
        self.assertEqual(parsed['site'], 'housing')
        self.assertEqual(parsed['location'], 'Whitefield, Bangalore')
        self.assertEqual(parsed['imageUrls'], ['https://housing.example/gallery/1.jpg'])
        self.assertEqual(data['projectDetails']['overview']['location'], 'Whitefield, Bangalore')

    def test_template_structure_hint(self):
        resp = self.client.post('/api/parse-html', json={
            'htmlSource': LISTING,
            'templateStructure': {'site': 'magicbricks'},
        })
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_json()['parsedData']['site'], 'magicbricks')

    def test_unparseable_html_still_200(self):
        resp = self.client.post('/api/parse-html', json={'htmlSource': 'just some text'})
        self.assertEqual(resp.status_code, 200)
        parsed = resp.get_json()['parsedData']
        self.assertEqual(parsed['confidence'], 20)
        self.assertTrue(parsed['fallback'])

    def test_missing_fields(self):
        resp = self.client.post('/api/parse-html', json={})
        self.assertEqual(resp.status_code, 400)
        self.assertIn('htmlSource', resp.get_json()['fields'])

    def test_empty_html(self):
        resp = self.client.post('/api/parse-html', json={'htmlSource': ''})
        self.assertEqual(resp.status_code, 400)

    def test_non_json_body(self):
        resp = self.client.post('/api/parse-html', data='htmlSource=<p>x</p>',
                                content_type='application/x-www-form-urlencoded')
        self.assertEqual(resp.status_code, 400)

    def test_too_large(self):
        with mock.patch.object(Config, 'MAX_HTML_CHARS', 10):
            resp = self.client.post('/api/parse-html', json={'htmlSource': LISTING})
        self.assertEqual(resp.status_code, 413)

    def test_get_not_allowed(self):
        resp = self.client.get('/api/parse-html')
        self.assertEqual(resp.status_code, 405)


class TestHealth(unittest.TestCase):

    def test_health(self):
        resp = create_app().test_client().get('/api/health')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_json()['status'], 'healthy')


if __name__ == '__main__':
    unittest.main()
