from typing import List
from urllib.parse import urldefrag, urljoin

from bs4 import BeautifulSoup

_FOLLOWED_SCHEMES = ("http://", "https://", "file:")


class LinkExtractor:
    def extract_links(self, base_url: str, soup: BeautifulSoup) -> List[str]:
        """Return absolute, fragment-free URLs of every anchor in `soup`, in document order.

        Links with schemes the crawler cannot follow (mailto:, javascript:, ...) are dropped.
        """
        urls = []
        for a in soup.find_all("a", href=True):
            href = (a.get("href") or "").strip()
            if not href:
                continue
            abs_url, _ = urldefrag(urljoin(base_url, href))
            if abs_url.lower().startswith(_FOLLOWED_SCHEMES):
                urls.append(abs_url)
        return urls
