"""Tests for wishlist_scraper/utils/parsing.py"""

import pytest

from wishlist_scraper.errors import InvalidUrlError
from wishlist_scraper.utils.parsing import (
    clean_text,
    host_of,
    link_href,
    make_soup,
    meta_content,
    normalize_url,
    select_attr,
    select_text,
)


class TestNormalizeUrl:
    def test_prepends_https(self):
        assert normalize_url("example.com/product") == "https://example.com/product"

    def test_keeps_existing_scheme(self):
        assert normalize_url("http://example.com/a?b=1") == "http://example.com/a?b=1"

    def test_lowercases_scheme_and_strips_fragment(self):
        assert normalize_url("HTTPS://example.com/p#reviews") == "https://example.com/p"

    def test_strips_surrounding_whitespace(self):
        assert normalize_url("  www.amazon.com/dp/B000  ") == "https://www.amazon.com/dp/B000"

    def test_accepts_ports_ips_and_localhost(self):
        assert normalize_url("localhost:8080/item") == "https://localhost:8080/item"
        assert normalize_url("http://127.0.0.1/x") == "http://127.0.0.1/x"

    @pytest.mark.parametrize(
        "raw",
        ["not a url", "", "   ", "https://", "ftp://example.com/file", "http://exa mple.com",
         "https://example.com:99999/", "http://[invalid-ipv6", "https://-bad-.com"],
    )
    def test_rejects_malformed_input(self, raw):
        with pytest.raises(InvalidUrlError):
            normalize_url(raw)

    def test_invalid_url_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            normalize_url("not a url")

    def test_host_of(self):
        assert host_of("https://WWW.Amazon.co.uk/dp/1") == "www.amazon.co.uk"
        assert host_of("not-a-url") == ""


class TestMarkupHelpers:
    HTML = """
    <html><head>
      <title>  Page   Title </title>
      <meta property="og:title" content="OG Title">
      <meta name="description" content="Plain description">
      <meta property="og:empty" content="   ">
      <link rel="image_src" href="/img/main.jpg">
    </head><body>
      <h1 class="empty"> </h1>
      <h1 class="name">Widget <b>Pro</b></h1>
      <img id="hero" src="/small.jpg" data-old-hires="/large.jpg">
    </body></html>
    """

    def setup_method(self):
        self.soup = make_soup(self.HTML)

    def test_clean_text(self):
        assert clean_text("  a \n b ") == "a b"
        assert clean_text("   ") is None
        assert clean_text(None) is None
        assert clean_text(["a", "b"]) == "a b"

    def test_select_text_skips_empty_matches(self):
        assert select_text(self.soup, ["h1.empty", "h1.name"]) == "Widget Pro"
        assert select_text(self.soup, ["h2"]) is None

    def test_select_attr_prefers_earlier_attributes(self):
        assert select_attr(self.soup, [("#hero", ("data-old-hires", "src"))]) == "/large.jpg"
        assert select_attr(self.soup, [("#missing", ("src",)), ("#hero", ("src",))]) == "/small.jpg"

    def test_meta_content_by_property_and_name(self):
        assert meta_content(self.soup, "og:title") == "OG Title"
        assert meta_content(self.soup, "description") == "Plain description"
        assert meta_content(self.soup, "og:empty") is None
        assert meta_content(self.soup, "og:image") is None

    def test_link_href(self):
        assert link_href(self.soup, "image_src") == "/img/main.jpg"
        assert link_href(self.soup, "canonical") is None
