import threading
from typing import Optional

from wordcrawl.domain.config import CrawlConfiguration
from wordcrawl.domain.crawl_deadline import CrawlDeadline
from wordcrawl.domain.visited_tracker import VisitedTracker
from wordcrawl.domain.word_counts import WordCountAccumulator


class CrawlContext:
    """Shared state for one `crawl()` invocation.

    Passed by reference into every task of the crawl and discarded when the
    crawl returns, so independent crawls never see each other's state.
    """

    def __init__(
        self,
        config: CrawlConfiguration,
        deadline: CrawlDeadline,
        visited_tracker: Optional[VisitedTracker] = None,
        word_counts: Optional[WordCountAccumulator] = None,
    ):
        self.config = config
        self.deadline = deadline
        self.visited_tracker = visited_tracker if visited_tracker is not None else VisitedTracker()
        self.word_counts = word_counts if word_counts is not None else WordCountAccumulator()
        # Set when a task fails so no other branch starts a new fetch.
        self.stop_event = threading.Event()

    def claim(self, url: str) -> bool:
        return self.visited_tracker.claim(url)

    def is_stopped(self) -> bool:
        return self.stop_event.is_set()

    def mark_stopped(self) -> None:
        self.stop_event.set()

    @property
    def urls_visited(self) -> int:
        return len(self.visited_tracker)
