import threading

from wordcrawl.domain.visited_tracker import VisitedTracker


def test_tracker_starts_empty():
    assert len(VisitedTracker()) == 0


def test_different_urls_are_claimed_independently():
    tracker = VisitedTracker()
    assert tracker.claim("https://example.com")
    assert tracker.claim("https://other.com")
    assert len(tracker) == 2


def test_second_claim_of_same_url_is_rejected():
    tracker = VisitedTracker()
    assert tracker.claim("https://example.com")
    assert not tracker.claim("https://example.com")
    assert len(tracker) == 1


def test_concurrent_claims_grant_exactly_one_winner():
    tracker = VisitedTracker()
    barrier = threading.Barrier(16)
    wins = []
    lock = threading.Lock()

    def contend():
        barrier.wait()
        for i in range(200):
            if tracker.claim(f"https://example.com/{i}"):
                with lock:
                    wins.append(i)

    threads = [threading.Thread(target=contend) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(wins) == list(range(200))
    assert len(tracker) == 200
