import logging
import re
from collections import Counter
from typing import Iterable, Optional, Pattern
from urllib.parse import urlparse
from urllib.request import url2pathname

from wordcrawl.domain.page_parse_result import PageParseResult
from wordcrawl.services.html_text_extractor import HtmlTextExtractor
from wordcrawl.services.http_service import HttpService
from wordcrawl.services.link_extractor import LinkExtractor

logger = logging.getLogger(__name__)

_NON_WORD = re.compile(r"\W+")


class HtmlPageParser:
    """Fetches a page and turns it into word counts and outbound links.

    `http(s)` URLs go through `HttpService.fetch_page`; `file:` URLs are read
    from disk. Pages that cannot be loaded (see `fetch_page`) and unreadable
    files all yield an empty result rather than an exception, so a single
    unreachable page never aborts a crawl.
    """

    def __init__(
        self,
        http_service: HttpService,
        text_extractor: Optional[HtmlTextExtractor] = None,
        link_extractor: Optional[LinkExtractor] = None,
        ignored_words: Iterable[Pattern] = (),
    ):
        self.http_service = http_service
        self.text_extractor = text_extractor or HtmlTextExtractor()
        self.link_extractor = link_extractor or LinkExtractor()
        self.ignored_words = tuple(ignored_words)

    def parse(self, url: str) -> PageParseResult:
        body = self._load(url)
        if body is None:
            return PageParseResult.empty()

        soup = self.text_extractor.soup(body)
        # Links first: extract() strips invisible elements from the soup.
        links = self.link_extractor.extract_links(url, soup)
        text = self.text_extractor.extract(soup)
        return PageParseResult(self.count_words(text), links)

    def count_words(self, text: str) -> dict:
        counts: Counter = Counter()
        for token in text.split():
            word = _NON_WORD.sub("", token).lower()
            if not word or self._is_ignored(word):
                continue
            counts[word] += 1
        return dict(counts)

    def _is_ignored(self, word: str) -> bool:
        return any(pattern.fullmatch(word) for pattern in self.ignored_words)

    def _load(self, url: str) -> Optional[str]:
        if url.lower().startswith("file:"):
            return self._read_file(url)
        return self.http_service.fetch_page(url)

    def _read_file(self, url: str) -> Optional[str]:
        path = url2pathname(urlparse(url).path)
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                return f.read()
        except OSError as e:
            logger.warning("Could not read %s: %s", url, e)
            return None
