"""Domain objects for WordCrawl - explicit re-exports to satisfy linters."""
from .config import CrawlConfiguration as CrawlConfiguration
from .crawl_context import CrawlContext as CrawlContext
from .crawl_deadline import CrawlDeadline as CrawlDeadline
from .crawl_result import CrawlResult as CrawlResult
from .page_parse_result import PageParseResult as PageParseResult
from .visited_tracker import VisitedTracker as VisitedTracker
from .word_counts import WordCountAccumulator as WordCountAccumulator

__all__ = [
    "CrawlConfiguration",
    "CrawlContext",
    "CrawlDeadline",
    "CrawlResult",
    "PageParseResult",
    "VisitedTracker",
    "WordCountAccumulator",
]
