import logging
import re
from unittest.mock import Mock

import requests
from bs4 import BeautifulSoup

from wordcrawl.services.html_text_extractor import HtmlTextExtractor
from wordcrawl.services.http_service import HttpService
from wordcrawl.services.page_parser import HtmlPageParser

PAGE = """
<html>
  <head><title>Ignored Title</title><style>.x { color: red }</style></head>
  <body>
    <script>var hidden = "nope";</script>
    <h1>The Quick fox</h1>
    <p>The lazy dog, the end.</p>
    <a href="/about#team">About</a>
    <a href="https://other.example/page">Other</a>
    <a href="mailto:me@example.com">Mail</a>
  </body>
</html>
"""


def fake_response(status_code=200, text="", content_type="text/html"):
    return Mock(status_code=status_code, text=text, headers={"Content-Type": content_type})


def make_parser(response=None, side_effect=None, ignored_words=(), text_extractor=None):
    http_client = Mock(return_value=response, side_effect=side_effect)
    http_service = HttpService(user_agent="TestAgent", http_client=http_client)
    parser = HtmlPageParser(http_service, text_extractor=text_extractor, ignored_words=ignored_words)
    return parser, http_client


def test_parse_counts_visible_words_and_extracts_links():
    parser, http_client = make_parser(fake_response(200, PAGE, "text/html"))
    result = parser.parse("https://example.com/index.html")

    assert http_client.call_args[0][0] == "https://example.com/index.html"
    assert result.word_counts["the"] == 3
    assert result.word_counts["quick"] == 1
    assert result.word_counts["dog"] == 1
    assert "hidden" not in result.word_counts
    assert "ignored" not in result.word_counts
    assert result.links == ["https://example.com/about", "https://other.example/page"]


def test_parse_drops_ignored_words():
    parser, _ = make_parser(fake_response(200, PAGE, "text/html"), ignored_words=[re.compile(r"^.{1,3}$")])
    result = parser.parse("https://example.com/")
    assert "the" not in result.word_counts
    assert "dog" not in result.word_counts
    assert result.word_counts["quick"] == 1


def test_fetch_error_yields_empty_result(caplog):
    parser, _ = make_parser(side_effect=requests.exceptions.ConnectionError("refused"))
    caplog.set_level(logging.WARNING)
    result = parser.parse("https://down.example")
    assert result.word_counts == {}
    assert result.links == []
    assert "Fetch failed for https://down.example" in caplog.text


def test_non_success_status_yields_empty_result():
    parser, _ = make_parser(fake_response(404, PAGE, "text/html"))
    result = parser.parse("https://example.com/missing")
    assert result.word_counts == {}
    assert result.links == []


def test_non_text_content_yields_empty_result():
    parser, _ = make_parser(fake_response(200, "%PDF-1.4", "application/pdf"))
    assert parser.parse("https://example.com/doc.pdf").word_counts == {}


def test_unexpected_errors_propagate():
    parser, _ = make_parser(side_effect=RuntimeError("bug"))
    try:
        parser.parse("https://example.com")
        assert False, "expected RuntimeError"
    except RuntimeError as e:
        assert "bug" in str(e)


def test_file_urls_are_read_from_disk(tmp_path):
    page = tmp_path / "index.html"
    page.write_text('<p>Local words words</p><a href="next.html">next</a>', encoding="utf-8")
    parser, http_client = make_parser()

    result = parser.parse(page.as_uri())

    assert not http_client.called
    assert result.word_counts == {"local": 1, "words": 2, "next": 1}
    assert result.links == [(tmp_path / "next.html").as_uri()]


def test_missing_file_yields_empty_result(tmp_path):
    parser, _ = make_parser()
    result = parser.parse((tmp_path / "missing.html").as_uri())
    assert result.word_counts == {}
    assert result.links == []


def test_count_words_strips_punctuation_and_lowercases():
    parser, _ = make_parser()
    assert parser.count_words("Hello, hello! HELLO... -- world") == {"hello": 3, "world": 1}


def test_each_page_is_parsed_into_a_soup_once():
    parsed = []

    def soup_factory(html):
        parsed.append(html)
        return BeautifulSoup(html, "html.parser")

    parser, _ = make_parser(fake_response(200, PAGE), text_extractor=HtmlTextExtractor(soup_factory))
    result = parser.parse("https://example.com/index.html")

    assert parsed == [PAGE]
    assert "hidden" not in result.word_counts
    assert result.links == ["https://example.com/about", "https://other.example/page"]
