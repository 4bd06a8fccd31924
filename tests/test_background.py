import logging
from unittest.mock import MagicMock

from fastapi import BackgroundTasks

from justmyluck.platform.services.background import BestEffortTasks, run_best_effort


def test_run_best_effort_calls_function():
    func = MagicMock()

    assert run_best_effort(func, "a", key="b") is None
    func.assert_called_once_with("a", key="b")


def test_run_best_effort_swallows_and_logs(caplog):
    def explode():
        raise RuntimeError("smtp is down")

    with caplog.at_level(logging.WARNING, logger="background"):
        run_best_effort(explode)

    assert "smtp is down" in caplog.text


def test_best_effort_tasks_schedule_wrapped_call():
    background_tasks = BackgroundTasks()
    func = MagicMock()

    BestEffortTasks(background_tasks).add(func, "new@example.com", "site")

    assert len(background_tasks.tasks) == 1
    task = background_tasks.tasks[0]
    assert task.func is run_best_effort
    assert task.args == (func, "new@example.com", "site")
    func.assert_not_called()
