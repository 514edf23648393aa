"""
Index-preserving parallel execution for per-frame work.

Each item is processed independently and its result is written to the slot
matching its position in the input, regardless of completion order. The
call returns only after every task has finished (a join barrier), and the
first task failure fails the whole batch.

Functions:
    resolve_worker_count: Bound the thread pool size for a batch
    execute_indexed_tasks: Map a function over items in a thread pool
"""

import concurrent.futures
import logging
import os
from typing import Any, Callable, Dict, List, Optional, Sequence

from RA_Libs.errors import FrameTaskError

logger = logging.getLogger(__name__)


def resolve_worker_count(task_count: int, max_workers: Optional[int] = None) -> int:
    """
    Decide how many worker threads a batch should use.

    Args:
        task_count: Number of tasks in the batch
        max_workers: Requested upper bound (None = CPU count)

    Returns:
        Worker count between 1 and task_count

    Raises:
        ValueError: If max_workers < 1
    """
    if max_workers is not None and max_workers < 1:
        raise ValueError(f"max_workers must be >= 1, got {max_workers}")

    limit = max_workers if max_workers is not None else (os.cpu_count() or 1)
    return max(1, min(limit, task_count))


def execute_indexed_tasks(
    func: Callable[[Any], Any],
    items: Sequence[Any],
    max_workers: Optional[int] = None,
    use_threading: bool = True,
    task_name: str = "task",
) -> List[Any]:
    """
    Run ``func`` on every item and collect results by index.

    Args:
        func: Callable applied to each item
        items: Inputs; ``results[i] == func(items[i])``
        max_workers: Maximum number of threads (default: None = CPU count)
        use_threading: Run in a thread pool (default: True); False runs
                       sequentially with identical results
        task_name: Label used in log and error messages

    Returns:
        List of results, same length and order as ``items``

    Raises:
        FrameTaskError: If any task raises; the original exception is chained
        ValueError: If max_workers < 1

    Example:
        >>> execute_indexed_tasks(lambda n: n * n, [1, 2, 3])
        [1, 4, 9]
    """
    items = list(items)
    results: List[Any] = [None] * len(items)

    if not items:
        return results

    worker_count = resolve_worker_count(len(items), max_workers)

    if not use_threading or worker_count == 1:
        for index, item in enumerate(items):
            try:
                results[index] = func(item)
            except Exception as e:
                raise FrameTaskError(
                    f"Error executing {task_name} {index}: {str(e)}", index=index
                ) from e
        return results

    logger.debug(f"Running {len(items)} {task_name} tasks on {worker_count} threads")

    with concurrent.futures.ThreadPoolExecutor(max_workers=worker_count) as executor:
        futures: Dict[concurrent.futures.Future, int] = {
            executor.submit(func, item): index
            for index, item in enumerate(items)
        }

        # Collect results as they complete
        for future in concurrent.futures.as_completed(futures):
            index = futures[future]
            try:
                results[index] = future.result()
            except Exception as e:
                for pending in futures:
                    pending.cancel()
                raise FrameTaskError(
                    f"Error executing {task_name} {index}: {str(e)}", index=index
                ) from e

    return results
