import threading
from typing import Set


class VisitedTracker:
    """
    Tracks which URLs have been claimed during a crawl.

    Shared by every task of one crawl. `claim` is the only synchronization
    point that keeps a URL from being fetched twice, so the membership test
    and the insert happen under a single lock acquisition.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._visited: Set[str] = set()

    def claim(self, url: str) -> bool:
        """Mark `url` as visited. Returns True only for the first caller."""
        with self._lock:
            if url in self._visited:
                return False
            self._visited.add(url)
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._visited)
