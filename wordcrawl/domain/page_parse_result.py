from typing import Dict, List, NamedTuple


class PageParseResult(NamedTuple):
    """Words and outbound links extracted from a single page."""
    word_counts: Dict[str, int]
    links: List[str]

    @classmethod
    def empty(cls) -> "PageParseResult":
        return cls({}, [])
