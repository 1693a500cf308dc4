from datetime import timedelta
from typing import Callable


class CrawlDeadline:
    """Absolute instant after which no new page fetch may begin.

    Instants come from `clock`, a zero-argument callable returning seconds
    (`time.monotonic` in production). A deadline is created once per crawl
    and only read afterwards.
    """

    def __init__(self, clock: Callable[[], float], instant: float):
        self._clock = clock
        self.instant = instant

    @classmethod
    def start(cls, clock: Callable[[], float], timeout: timedelta) -> "CrawlDeadline":
        return cls(clock, clock() + timeout.total_seconds())

    def has_passed(self) -> bool:
        return self._clock() >= self.instant

    def remaining(self) -> float:
        return max(0.0, self.instant - self._clock())
