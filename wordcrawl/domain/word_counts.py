import threading
from typing import Dict, Mapping


class WordCountAccumulator:
    """Merges per-page word counts from many concurrent producers.

    Each add is a read-modify-write under the accumulator lock, so totals are
    exact regardless of how tasks interleave.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._counts: Dict[str, int] = {}

    def add(self, word: str, count: int) -> None:
        with self._lock:
            self._counts[word] = self._counts.get(word, 0) + count

    def merge(self, counts: Mapping[str, int]) -> None:
        for word, count in counts.items():
            self.add(word, count)

    def snapshot(self) -> Dict[str, int]:
        """Return a copy of the current totals."""
        with self._lock:
            return dict(self._counts)

    def total(self) -> int:
        with self._lock:
            return sum(self._counts.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)


def top_word_counts(counts: Mapping[str, int], limit: int) -> Dict[str, int]:
    """Return the `limit` most frequent words, ordered by count desc then word asc.

    Pure function of its input: the same mapping always yields the same
    (insertion-ordered) dict, whatever order the entries were accumulated in.
    """
    if limit <= 0:
        return {}
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return dict(ranked[:limit])
