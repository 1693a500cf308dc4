import threading
from datetime import timedelta
from typing import Dict, TextIO


class ProfilingState:
    """Thread-safe totals of recorded call durations, keyed by `module.Class#method`."""

    def __init__(self):
        self._lock = threading.Lock()
        self._data: Dict[str, timedelta] = {}

    def record(self, callee_type: type, method_name: str, elapsed: timedelta) -> None:
        if elapsed < timedelta(0):
            raise ValueError(f"elapsed time must not be negative, got {elapsed}")
        key = format_method_call(callee_type, method_name)
        with self._lock:
            self._data[key] = self._data.get(key, timedelta(0)) + elapsed

    def totals(self) -> Dict[str, timedelta]:
        with self._lock:
            return dict(self._data)

    def write(self, writer: TextIO) -> None:
        """Write one line per profiled method, sorted by method key."""
        for key, total in sorted(self.totals().items()):
            writer.write(f"{key} took {format_duration(total)}\n")


def format_method_call(callee_type: type, method_name: str) -> str:
    return f"{callee_type.__module__}.{callee_type.__qualname__}#{method_name}"


def format_duration(duration: timedelta) -> str:
    total_ms = duration // timedelta(milliseconds=1)
    minutes, rest = divmod(total_ms, 60_000)
    seconds, millis = divmod(rest, 1000)
    return f"{minutes}m {seconds}s {millis}ms"
