from typing import Any, Callable

from fastapi import BackgroundTasks

from justmyluck.platform.logger import get_logger

logger = get_logger("background")


def run_best_effort(func: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
    """
    Call `func` and discard the outcome.

    Failures are logged and dropped, never retried or re-raised. Kept synchronous
    so Starlette runs it in the threadpool after the response has been sent.
    """
    try:
        func(*args, **kwargs)
    except Exception as e:
        logger.warning(f"Best-effort task {getattr(func, '__qualname__', func)!s} failed: {e}")


class BestEffortTasks:
    """Schedules side tasks on the request's background context; results are discarded."""

    def __init__(self, background_tasks: BackgroundTasks):
        self.background_tasks = background_tasks

    def add(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        self.background_tasks.add_task(run_best_effort, func, *args, **kwargs)
