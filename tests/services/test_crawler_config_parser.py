from datetime import timedelta

import pytest

from wordcrawl.exceptions import InvalidConfigError
from wordcrawl.services.crawler_config_parser import CrawlerConfigParser


def test_parse_camel_case_keys():
    data = {
        "startPages": ["http://example.com", "http://example.org"],
        "ignoredUrls": [r"http://example\.com/private.*"],
        "ignoredWords": ["^.{1,3}$"],
        "parallelism": 4,
        "maxDepth": 3,
        "timeoutSeconds": 2,
        "popularWordCount": 5,
        "profileOutputPath": "profile.txt",
        "resultPath": "result.json",
    }
    cfg = CrawlerConfigParser().parse(data)

    assert cfg.start_pages == ("http://example.com", "http://example.org")
    assert [p.pattern for p in cfg.ignored_urls] == [r"http://example\.com/private.*"]
    assert cfg.ignored_words[0].fullmatch("the")
    assert cfg.parallelism == 4
    assert cfg.max_depth == 3
    assert cfg.timeout == timedelta(seconds=2)
    assert cfg.popular_word_count == 5
    assert cfg.profile_output_path == "profile.txt"
    assert cfg.result_path == "result.json"


def test_parse_snake_case_keys_and_fractional_timeout():
    cfg = CrawlerConfigParser().parse({"start_pages": "http://one", "max_depth": 1, "timeout_seconds": 0.5})
    assert cfg.start_pages == ("http://one",)
    assert cfg.max_depth == 1
    assert cfg.timeout == timedelta(milliseconds=500)


def test_parse_defaults(monkeypatch):
    monkeypatch.setattr("wordcrawl.services.crawler_config_parser.os.cpu_count", lambda: 3)
    cfg = CrawlerConfigParser().parse({})
    assert cfg.start_pages == ()
    assert cfg.parallelism == 3
    assert cfg.max_depth == 0
    assert cfg.timeout == timedelta(seconds=1)
    assert cfg.popular_word_count == 0
    assert cfg.result_path is None


@pytest.mark.parametrize(
    "data",
    [
        {"maxDepth": "3"},
        {"parallelism": True},
        {"parallelism": 0},
        {"timeoutSeconds": "soon"},
        {"startPages": [1, 2]},
        {"ignoredUrls": ["("]},
        {"resultPath": 7},
    ],
)
def test_parse_rejects_invalid_values(data):
    with pytest.raises(InvalidConfigError):
        CrawlerConfigParser().parse(data)


def test_parse_rejects_non_mapping():
    with pytest.raises(InvalidConfigError):
        CrawlerConfigParser().parse(["not", "a", "dict"])
