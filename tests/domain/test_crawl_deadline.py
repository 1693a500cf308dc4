from datetime import timedelta

from wordcrawl.domain.crawl_deadline import CrawlDeadline


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now


def test_deadline_is_start_plus_timeout():
    clock = FakeClock(100.0)
    deadline = CrawlDeadline.start(clock, timedelta(seconds=5))
    assert deadline.instant == 105.0
    assert deadline.remaining() == 5.0


def test_deadline_passes_at_the_instant():
    clock = FakeClock(0.0)
    deadline = CrawlDeadline.start(clock, timedelta(seconds=2))
    clock.now = 1.999
    assert not deadline.has_passed()
    clock.now = 2.0
    assert deadline.has_passed()
    assert deadline.remaining() == 0.0


def test_zero_timeout_has_already_passed():
    deadline = CrawlDeadline.start(FakeClock(3.0), timedelta(0))
    assert deadline.has_passed()
