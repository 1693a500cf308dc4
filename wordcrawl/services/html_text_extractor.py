from typing import Callable, Optional

from bs4 import BeautifulSoup

# Elements whose text is never shown to a reader.
_INVISIBLE_TAGS = ('script', 'style', 'noscript', 'template', 'head', 'svg', 'canvas')


class HtmlTextExtractor:
    def __init__(
        self,
        soup_factory: Optional[Callable[[str], BeautifulSoup]] = None,
    ):
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    def soup(self, body: str) -> BeautifulSoup:
        return self._soup_factory(body)

    def extract(self, soup: BeautifulSoup) -> str:
        """Return the visible text of `soup`, whitespace separated.

        Invisible elements are decomposed in place, so read anything else
        (links) from `soup` before calling this.
        """
        for tag in _INVISIBLE_TAGS:
            for element in soup.find_all(tag):
                element.decompose()
        return soup.get_text(separator=" ", strip=True)
