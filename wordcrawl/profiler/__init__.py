from .profiled import profiled, profiled_methods
from .profiler import Profiler
from .profiling_state import ProfilingState

__all__ = ["profiled", "profiled_methods", "Profiler", "ProfilingState"]
