from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional

from wordcrawl.exceptions import InvalidConfigError


@dataclass(frozen=True)
class CrawlConfiguration:
    """Immutable settings for a single crawl invocation.

    Patterns are stored compiled; `CrawlerConfigParser` takes care of turning
    raw strings from a config file into `re.Pattern` objects.
    """

    start_pages: tuple[str, ...] = ()
    ignored_urls: tuple[re.Pattern, ...] = ()
    ignored_words: tuple[re.Pattern, ...] = ()
    parallelism: int = 1
    max_depth: int = 0
    timeout: timedelta = field(default_factory=lambda: timedelta(seconds=1))
    popular_word_count: int = 0
    profile_output_path: Optional[str] = None
    result_path: Optional[str] = None

    def __post_init__(self):
        # Normalize sequences so callers may pass lists.
        object.__setattr__(self, "start_pages", tuple(self.start_pages))
        object.__setattr__(self, "ignored_urls", tuple(self.ignored_urls))
        object.__setattr__(self, "ignored_words", tuple(self.ignored_words))

        if self.parallelism < 1:
            raise InvalidConfigError(f"parallelism must be >= 1, got {self.parallelism}")
        if self.max_depth < 0:
            raise InvalidConfigError(f"max_depth must be >= 0, got {self.max_depth}")
        if self.popular_word_count < 0:
            raise InvalidConfigError(f"popular_word_count must be >= 0, got {self.popular_word_count}")
        if not isinstance(self.timeout, timedelta):
            raise InvalidConfigError("timeout must be a timedelta")
        if self.timeout < timedelta(0):
            raise InvalidConfigError(f"timeout must not be negative, got {self.timeout}")

    def __repr__(self):
        return (
            f"<CrawlConfiguration start_pages={len(self.start_pages)} max_depth={self.max_depth} "
            f"timeout={self.timeout.total_seconds()}s parallelism={self.parallelism}>"
        )
