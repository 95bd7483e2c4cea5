import time

from messages import FilesFound, TaskFailed
from task_runner import TaskRunner


def _drain_until(runner, count, timeout=2.0):
    out = []
    deadline = time.time() + timeout
    while len(out) < count and time.time() < deadline:
        out.extend(runner.drain())
        time.sleep(0.01)
    return out


def test_results_are_queued():
    runner = TaskRunner()
    runner.submit(lambda: FilesFound(["a.parquet"]))
    msgs = _drain_until(runner, 1)
    assert msgs == [FilesFound(["a.parquet"])]
    assert runner.drain() == []


def test_crashing_task_becomes_task_failed():
    runner = TaskRunner()

    def boom():
        raise RuntimeError("boom")

    boom.session = 7
    runner.submit(boom)
    (msg,) = _drain_until(runner, 1)
    assert isinstance(msg, TaskFailed)
    assert msg.session == 7
    assert str(msg.error) == "boom"


def test_none_task_and_none_result():
    runner = TaskRunner()
    assert runner.submit(None) is None
    t = runner.submit(lambda: None)
    t.join(1.0)
    assert runner.drain() == []
