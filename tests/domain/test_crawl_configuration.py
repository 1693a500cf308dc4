import dataclasses
import re
from datetime import timedelta

import pytest

from wordcrawl.domain.config import CrawlConfiguration
from wordcrawl.exceptions import InvalidConfigError


def test_defaults_are_valid():
    cfg = CrawlConfiguration()
    assert cfg.start_pages == ()
    assert cfg.parallelism == 1
    assert cfg.max_depth == 0
    assert cfg.timeout == timedelta(seconds=1)


def test_sequences_are_normalized_to_tuples():
    cfg = CrawlConfiguration(start_pages=["http://a"], ignored_urls=[re.compile("x")])
    assert cfg.start_pages == ("http://a",)
    assert isinstance(cfg.ignored_urls, tuple)


def test_configuration_is_immutable():
    cfg = CrawlConfiguration()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.max_depth = 3


@pytest.mark.parametrize(
    "kwargs",
    [
        {"parallelism": 0},
        {"max_depth": -1},
        {"popular_word_count": -1},
        {"timeout": timedelta(seconds=-1)},
        {"timeout": 5},
    ],
)
def test_out_of_range_values_are_rejected(kwargs):
    with pytest.raises(InvalidConfigError):
        CrawlConfiguration(**kwargs)
