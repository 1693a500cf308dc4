"""Crawl result data model."""
from typing import Dict, NamedTuple


class CrawlResult(NamedTuple):
    """Result of a crawl operation.

    Built once at the end of a crawl from the settled word-count accumulator
    and visited set.
    """
    word_counts: Dict[str, int]
    """Most popular words, at most `popular_word_count` entries, ordered by count desc then word asc"""

    urls_visited: int
    """Number of distinct URLs claimed during the crawl"""

    def to_dict(self) -> dict:
        return {"wordCounts": dict(self.word_counts), "urlsVisited": self.urls_visited}
