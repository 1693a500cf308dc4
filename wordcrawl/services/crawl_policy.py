import logging

from wordcrawl.domain.crawl_context import CrawlContext

logger = logging.getLogger(__name__)


class CrawlPolicy:
    """Encapsulates crawl decision rules: depth limits, the crawl deadline and ignored URLs.

    Separates policy decisions from crawl orchestration logic. Every rule is a
    pure read of the crawl context; claiming a URL stays with the engine.
    """

    def should_skip_due_to_depth(self, depth: int) -> bool:
        """Check if URL should be skipped because no link-hops remain."""
        if depth <= 0:
            logger.debug("Skipping (max depth reached) at depth %s", depth)
            return True
        return False

    def should_skip_due_to_deadline(self, url: str, context: CrawlContext) -> bool:
        """Check if the crawl budget is exhausted or the crawl was stopped."""
        if context.is_stopped():
            logger.debug("Skipping (crawl stopped) %s", url)
            return True
        if context.deadline.has_passed():
            logger.debug("Skipping (deadline passed) %s", url)
            return True
        return False

    def should_skip_due_to_ignored_url(self, url: str, context: CrawlContext) -> bool:
        """Check if URL fully matches one of the ignored URL patterns."""
        for pattern in context.config.ignored_urls:
            if pattern.fullmatch(url):
                logger.debug("Skipping (ignored by %s) %s", pattern.pattern, url)
                return True
        return False
