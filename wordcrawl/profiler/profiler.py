from __future__ import annotations

import functools
import logging
import os
import time
from datetime import datetime, timedelta
from typing import Callable, FrozenSet, Optional, TextIO, TypeVar, Union

from wordcrawl.exceptions import ProfilerConfigurationError
from wordcrawl.profiler.profiled import profiled_methods
from wordcrawl.profiler.profiling_state import ProfilingState
from wordcrawl.utils.datetime_utils import format_rfc1123, utc_now

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Profiler:
    """Wraps objects so calls to their `@profiled` interface methods are timed.

    All wrappers created by one profiler share a single `ProfilingState` for
    the profiler's lifetime; `write_data` appends a report of the totals.
    """

    def __init__(self, now: Optional[Callable[[], datetime]] = None, timer: Callable[[], float] = time.perf_counter):
        self._timer = timer
        self.state = ProfilingState()
        self.start_time = (now or utc_now)()

    def wrap(self, interface: type, target: T) -> T:
        """Return a proxy for `target` exposing the methods of `interface`.

        Raises ProfilerConfigurationError if `interface` declares no profiled methods.
        """
        if interface is None or target is None:
            raise ValueError("interface and target are required")
        methods = profiled_methods(interface)
        if not methods:
            raise ProfilerConfigurationError(interface)
        return _ProfilingProxy(interface, target, methods, self.state, self._timer)  # type: ignore[return-value]

    def write_data(self, destination: Union[str, os.PathLike, TextIO]) -> None:
        """Append the profiling report to a file path, or write it to a text stream."""
        if isinstance(destination, (str, os.PathLike)):
            with open(destination, "a", encoding="utf-8") as f:
                self._write_report(f)
            return
        self._write_report(destination)

    def _write_report(self, writer: TextIO) -> None:
        writer.write(f"Run at {format_rfc1123(self.start_time)}\n")
        self.state.write(writer)
        writer.write("\n")


class _ProfilingProxy:
    """Behaves like the wrapped target, restricted to the interface's public methods."""

    def __init__(self, interface: type, target, methods: FrozenSet[str], state: ProfilingState, timer: Callable[[], float]):
        self._interface = interface
        self._target = target
        self._methods = methods
        self._state = state
        self._timer = timer

    def __getattr__(self, name: str):
        if name.startswith("_"):
            raise AttributeError(name)
        if not hasattr(self._interface, name):
            raise AttributeError(f"{self._interface.__qualname__} has no attribute {name!r}")
        attr = getattr(self._target, name)
        if name not in self._methods:
            return attr
        return self._timed(name, attr)

    def _timed(self, name: str, method):
        @functools.wraps(method)
        def call(*args, **kwargs):
            started = self._timer()
            try:
                return method(*args, **kwargs)
            finally:
                elapsed = timedelta(seconds=max(0.0, self._timer() - started))
                self._state.record(type(self._target), name, elapsed)
        return call

    def __repr__(self):
        return f"<profiled {self._interface.__qualname__} for {self._target!r}>"
