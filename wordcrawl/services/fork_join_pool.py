from __future__ import annotations

import logging
import threading
from collections import defaultdict, deque
from typing import Deque, Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

_PENDING = "pending"
_RUNNING = "running"
_DONE = "done"


class ForkJoinTask:
    """Unit of work executed by a `ForkJoinPool`.

    Subclasses implement `compute()`. From inside `compute()` a task may call
    `invoke_all(children)` to fork child tasks and wait for all of them; the
    task only finishes once its whole subtree has finished.
    """

    def __init__(self):
        self._state = _PENDING
        self._error: Optional[Exception] = None
        self._pool: Optional[ForkJoinPool] = None
        self._depth = 0

    def compute(self) -> None:
        raise NotImplementedError

    def invoke_all(self, tasks: Iterable["ForkJoinTask"]) -> None:
        if self._pool is None:
            raise RuntimeError("invoke_all() called on a task that is not running in a ForkJoinPool")
        self._pool.join_all(self, tasks)

    @property
    def done(self) -> bool:
        return self._state == _DONE

    @property
    def error(self) -> Optional[Exception]:
        return self._error


class ForkJoinPool:
    """Bounded pool of worker threads for recursive fork/join work.

    Pending tasks are queued by tree depth. A thread joining its children
    does not park while there is deeper work queued: it runs that work inline
    (helping), which lets a handful of workers drive far more logical tasks
    than there are threads without deadlocking. Helping only ever picks tasks
    deeper than the one being joined, so the inline call stack of any worker
    is bounded by the depth of the task tree.

    Idle workers take the oldest task of the shallowest depth; helpers take the
    newest task of the deepest depth, which is usually one of their own
    children.
    """

    def __init__(self, parallelism: int, *, thread_name_prefix: str = "wordcrawl-worker"):
        if parallelism < 1:
            raise ValueError(f"parallelism must be >= 1, got {parallelism}")
        self.parallelism = parallelism
        self._cond = threading.Condition()
        self._queues: Dict[int, Deque[ForkJoinTask]] = defaultdict(deque)
        self._shutdown = False
        self._workers: List[threading.Thread] = []
        for i in range(parallelism):
            worker = threading.Thread(target=self._work, name=f"{thread_name_prefix}-{i}", daemon=True)
            self._workers.append(worker)
            worker.start()

    def __enter__(self) -> "ForkJoinPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    def invoke_all(self, tasks: Iterable[ForkJoinTask]) -> None:
        """Submit root tasks from outside the pool and block until all complete.

        Re-raises the first failure (in submission order) once every task has
        settled.
        """
        tasks = list(tasks)
        self._fork(tasks, depth=0)
        with self._cond:
            while not all(t._state == _DONE for t in tasks):
                self._cond.wait()
        _raise_first_error(tasks)

    def join_all(self, parent: ForkJoinTask, tasks: Iterable[ForkJoinTask]) -> None:
        """Fork `tasks` as children of `parent` and help until all are done."""
        tasks = list(tasks)
        if not tasks:
            return
        self._fork(tasks, depth=parent._depth + 1)
        while True:
            with self._cond:
                if all(t._state == _DONE for t in tasks):
                    break
                task = self._poll_deepest(below=parent._depth)
                if task is None:
                    # Children are running on other threads; wait for a completion.
                    self._cond.wait()
                    continue
            self._run(task)
        _raise_first_error(tasks)

    def shutdown(self, wait: bool = True) -> None:
        with self._cond:
            self._shutdown = True
            self._cond.notify_all()
        if wait:
            current = threading.current_thread()
            for worker in self._workers:
                if worker is not current:
                    worker.join()

    def _fork(self, tasks: List[ForkJoinTask], depth: int) -> None:
        with self._cond:
            if self._shutdown:
                raise RuntimeError("cannot submit tasks to a pool that has been shut down")
            for task in tasks:
                task._pool = self
                task._depth = depth
                self._queues[depth].append(task)
            self._cond.notify_all()

    def _claim(self, task: ForkJoinTask) -> bool:
        # Caller holds self._cond.
        if task._state != _PENDING:
            return False
        task._state = _RUNNING
        return True

    def _poll_shallowest(self) -> Optional[ForkJoinTask]:
        for depth in sorted(d for d, q in self._queues.items() if q):
            queue = self._queues[depth]
            while queue:
                task = queue.popleft()
                if self._claim(task):
                    return task
        return None

    def _poll_deepest(self, below: int) -> Optional[ForkJoinTask]:
        for depth in sorted((d for d, q in self._queues.items() if q and d > below), reverse=True):
            queue = self._queues[depth]
            while queue:
                task = queue.pop()
                if self._claim(task):
                    return task
        return None

    def _run(self, task: ForkJoinTask) -> None:
        try:
            task.compute()
        except Exception as e:
            task._error = e
        finally:
            with self._cond:
                task._state = _DONE
                self._cond.notify_all()

    def _work(self) -> None:
        while True:
            with self._cond:
                task = self._poll_shallowest()
                while task is None:
                    if self._shutdown:
                        return
                    self._cond.wait()
                    task = self._poll_shallowest()
            self._run(task)


def _raise_first_error(tasks: List[ForkJoinTask]) -> None:
    for task in tasks:
        if task._error is not None:
            raise task._error
