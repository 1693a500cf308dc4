import logging
import os
import time
from typing import Callable, Optional, Sequence

from wordcrawl.domain.config import CrawlConfiguration
from wordcrawl.domain.crawl_context import CrawlContext
from wordcrawl.domain.crawl_deadline import CrawlDeadline
from wordcrawl.domain.crawl_result import CrawlResult
from wordcrawl.domain.word_counts import top_word_counts
from wordcrawl.services.crawl_policy import CrawlPolicy
from wordcrawl.services.fork_join_pool import ForkJoinPool, ForkJoinTask
from wordcrawl.services.protocols import PageParser

logger = logging.getLogger(__name__)


class ParallelWebCrawler:
    """Crawls pages in parallel on a fork-join pool and counts their words.

    Every `crawl()` call gets its own `CrawlContext` (visited set, word-count
    accumulator, deadline) and its own pool, so concurrent crawls on the same
    instance never interfere. Collaborators are injected; this class does not
    construct them.
    """

    def __init__(
        self,
        *,
        config: CrawlConfiguration,
        page_parser: PageParser,
        clock: Callable[[], float] = time.monotonic,
        crawl_policy: Optional[CrawlPolicy] = None,
        max_parallelism: Optional[int] = None,
    ):
        if config is None:
            raise ValueError("config is required")
        self.config = config
        self.page_parser = page_parser
        self.clock = clock
        self.crawl_policy = crawl_policy or CrawlPolicy()
        self._max_parallelism = max_parallelism

    def max_parallelism(self) -> int:
        if self._max_parallelism is not None:
            return self._max_parallelism
        return os.cpu_count() or 1

    @property
    def parallelism(self) -> int:
        """Worker count: the configured cap, bounded by hardware concurrency."""
        return max(1, min(self.config.parallelism, self.max_parallelism()))

    def crawl(self, starting_urls: Sequence[str]) -> CrawlResult:
        if starting_urls is None:
            raise ValueError("starting_urls is required")

        context = CrawlContext(
            self.config,
            deadline=CrawlDeadline.start(self.clock, self.config.timeout),
        )
        roots = [CrawlTask(url, self.config.max_depth, context, self.page_parser, self.crawl_policy) for url in starting_urls]

        logger.info(
            "Starting crawl of %d url(s): max_depth=%s timeout=%ss parallelism=%s",
            len(roots),
            self.config.max_depth,
            self.config.timeout.total_seconds(),
            self.parallelism,
        )
        with ForkJoinPool(self.parallelism) as pool:
            pool.invoke_all(roots)

        counts = context.word_counts.snapshot()
        result = CrawlResult(
            word_counts=top_word_counts(counts, self.config.popular_word_count) if counts else {},
            urls_visited=context.urls_visited,
        )
        logger.info(
            "Crawl finished: %d url(s) visited, %d word(s) counted (%d distinct), %.3fs of budget left",
            result.urls_visited,
            context.word_counts.total(),
            len(counts),
            context.deadline.remaining(),
        )
        return result


class CrawlTask(ForkJoinTask):
    """Crawl one URL at a remaining depth, then its links at depth - 1.

    Completes only once every child task (and, transitively, their children)
    has completed.
    """

    def __init__(self, url: str, remaining_depth: int, context: CrawlContext, page_parser: PageParser, crawl_policy: CrawlPolicy):
        super().__init__()
        self.url = url
        self.remaining_depth = remaining_depth
        self.context = context
        self.page_parser = page_parser
        self.crawl_policy = crawl_policy

    def compute(self) -> None:
        url = self.url
        context = self.context
        if self.crawl_policy.should_skip_due_to_depth(self.remaining_depth):
            return
        if self.crawl_policy.should_skip_due_to_deadline(url, context):
            return
        if self.crawl_policy.should_skip_due_to_ignored_url(url, context):
            return
        if not context.claim(url):
            logger.debug("Skipping (visited) %s", url)
            return

        try:
            parsed = self.page_parser.parse(url)
        except Exception:
            logger.error("Unexpected error parsing %s; aborting crawl", url, exc_info=True)
            context.mark_stopped()
            raise

        context.word_counts.merge(parsed.word_counts)
        logger.info("Crawled %s -> %d word(s), %d link(s)", url, len(parsed.word_counts), len(parsed.links))

        self.invoke_all(
            CrawlTask(link, self.remaining_depth - 1, context, self.page_parser, self.crawl_policy)
            for link in parsed.links
        )

    def __repr__(self):
        return f"<CrawlTask url={self.url} remaining_depth={self.remaining_depth}>"
