"""
URL Resolution Tests
====================

Base URL fallback chain and image URL normalization.
"""

import unittest

from bs4 import BeautifulSoup

from backend.listing_parser.urls import find_img_sources, normalize_image_url, resolve_base_url


def soup_of(html):
    return BeautifulSoup(html, 'html.parser')


class TestNormalizeImageUrl(unittest.TestCase):

    def test_absolute_url_unchanged(self):
        for base in ('https://example.com', '', None):
            self.assertEqual(normalize_image_url('https://cdn.x.com/a.png', base), 'https://cdn.x.com/a.png')
            self.assertEqual(normalize_image_url('http://cdn.x.com/a.png', base), 'http://cdn.x.com/a.png')

    def test_protocol_relative_gets_https(self):
        self.assertEqual(normalize_image_url('//cdn.x.com/a.png', 'http://other.com'), 'https://cdn.x.com/a.png')
        self.assertEqual(normalize_image_url('//cdn.x.com/a.png', None), 'https://cdn.x.com/a.png')

    def test_root_relative(self):
        self.assertEqual(normalize_image_url('/a.png', 'https://example.com/'), 'https://example.com/a.png')
        self.assertEqual(normalize_image_url('/img/a.jpg', 'https://ex.com///'), 'https://ex.com/img/a.jpg')

    def test_bare_relative(self):
        self.assertEqual(normalize_image_url('a.png', 'https://example.com'), 'https://example.com/a.png')
        self.assertEqual(normalize_image_url('img/b.png', 'https://example.com/'), 'https://example.com/img/b.png')

    def test_data_and_blob_unchanged(self):
        data = 'data:image/png;base64,AAA'
        self.assertEqual(normalize_image_url(data, 'https://example.com'), data)
        self.assertEqual(normalize_image_url('blob:https://x.com/123', 'https://example.com'), 'blob:https://x.com/123')

    def test_no_base_leaves_relative(self):
        self.assertEqual(normalize_image_url('/a.png', ''), '/a.png')
        self.assertEqual(normalize_image_url('a.png', None), 'a.png')

    def test_empty_source(self):
        self.assertEqual(normalize_image_url('', 'https://example.com'), '')

    def test_trace_hook_receives_rule(self):
        calls = []
        normalize_image_url('/a.png', 'https://ex.com', trace=lambda *args: calls.append(args))
        self.assertEqual(calls, [('root-relative', '/a.png', 'https://ex.com/a.png')])


class TestResolveBaseUrl(unittest.TestCase):

    def test_manual_override_wins(self):
        html = '<html><head><base href="https://base.com/"></head></html>'
        self.assertEqual(resolve_base_url(html, soup_of(html), 'https://manual.com'), 'https://manual.com')

    def test_blank_manual_is_ignored(self):
        html = '<html><head><base href="https://base.com/"></head></html>'
        self.assertEqual(resolve_base_url(html, soup_of(html), '   '), 'https://base.com/')

    def test_base_tag_before_canonical(self):
        html = ('<html><head><base href="https://base.com/sub/">'
                '<link rel="canonical" href="https://canonical.com/page"></head></html>')
        self.assertEqual(resolve_base_url(html, soup_of(html)), 'https://base.com/sub/')

    def test_relative_base_tag_skipped(self):
        html = ('<html><head><base href="/sub/">'
                '<link rel="canonical" href="https://canonical.com/page"></head></html>')
        self.assertEqual(resolve_base_url(html, soup_of(html)), 'https://canonical.com')

    def test_canonical_origin(self):
        html = '<html><head><link rel="canonical" href="https://www.acme-homes.in/projects/lotus?ref=1"></head></html>'
        self.assertEqual(resolve_base_url(html, soup_of(html)), 'https://www.acme-homes.in')

    def test_og_url_origin(self):
        html = '<html><head><meta property="og:url" content="http://listings.example.org/p/42"></head></html>'
        self.assertEqual(resolve_base_url(html, soup_of(html)), 'http://listings.example.org')

    def test_malformed_canonical_falls_through(self):
        html = ('<html><head><link rel="canonical" href="not a url">'
                '<meta property="og:url" content="https://og.example.net/x"></head></html>')
        self.assertEqual(resolve_base_url(html, soup_of(html)), 'https://og.example.net')

    def test_first_absolute_url_in_text(self):
        html = '<p>See https://cdn.site.io/path/img.jpg and http://later.com</p>'
        self.assertEqual(resolve_base_url(html, soup_of(html)), 'https://cdn.site.io')

    def test_regex_scan_without_document(self):
        html = 'garbage <<< http://raw.host.com/a >>>'
        self.assertEqual(resolve_base_url(html, None), 'http://raw.host.com')

    def test_known_host_special_case(self):
        html = '<p>Visit myhomeconstructions.com for details</p>'
        self.assertEqual(resolve_base_url(html, soup_of(html)), 'https://www.myhomeconstructions.com')

    def test_default(self):
        self.assertEqual(resolve_base_url('<p>nothing</p>', soup_of('<p>nothing</p>')), 'https://example.com')
        self.assertEqual(resolve_base_url('', None), 'https://example.com')


class TestFindImgSources(unittest.TestCase):

    def test_document_order(self):
        html = '<img src="a.jpg"><p>x</p><IMG alt="b" SRC="b.jpg">'
        self.assertEqual(find_img_sources(html), ['a.jpg', 'b.jpg'])

    def test_ignores_data_src(self):
        html = '<img data-src="lazy.jpg" src="real.jpg"><img src=\'single.jpg\'>'
        self.assertEqual(find_img_sources(html), ['real.jpg', 'single.jpg'])

    def test_skips_empty(self):
        self.assertEqual(find_img_sources('<img src=" "><img alt="none">'), [])


if __name__ == '__main__':
    unittest.main()
