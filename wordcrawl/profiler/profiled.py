"""Registry of methods whose calls the profiler should time.

`@profiled` records `(declaring class, method name)` in a static table when
the class body is executed. The profiler consults this table once, when a
wrapper is built, instead of inspecting methods on every call.
"""
from collections import defaultdict
from typing import Callable, DefaultDict, FrozenSet, Set, TypeVar

F = TypeVar("F", bound=Callable)

_PROFILED_METHODS: DefaultDict[str, Set[str]] = defaultdict(set)


def _class_key(module: str, qualname: str) -> str:
    return f"{module}.{qualname}"


def profiled(func: F) -> F:
    """Mark an interface method as profiled."""
    owner, _, name = func.__qualname__.rpartition(".")
    if not owner:
        raise TypeError(f"@profiled must decorate a method, got module-level function {name!r}")
    _PROFILED_METHODS[_class_key(func.__module__, owner)].add(name)
    return func


def profiled_methods(interface: type) -> FrozenSet[str]:
    """Return names of profiled methods declared by `interface` or its bases."""
    names: Set[str] = set()
    for klass in interface.__mro__:
        names.update(_PROFILED_METHODS.get(_class_key(klass.__module__, klass.__qualname__), ()))
    return frozenset(names)
