"""Protocol (interface) definitions for services.

Methods marked `@profiled` are timed when an implementation is wrapped by
`wordcrawl.profiler.Profiler`.
"""

from typing import Protocol, Sequence

from wordcrawl.domain.crawl_result import CrawlResult
from wordcrawl.domain.page_parse_result import PageParseResult
from wordcrawl.profiler.profiled import profiled


class PageParser(Protocol):
    """Turns a URL into its word counts and outbound links.

    Implementations must not raise for ordinary fetch failures (timeouts,
    404s); they return `PageParseResult.empty()` instead.
    """

    @profiled
    def parse(self, url: str) -> PageParseResult:
        ...


class WebCrawler(Protocol):
    """Crawls starting URLs and reports the most popular words."""

    @profiled
    def crawl(self, starting_urls: Sequence[str]) -> CrawlResult:
        ...

    def max_parallelism(self) -> int:
        """Return the largest parallelism this crawler can make use of."""
        ...
