import logging
import queue
import threading

from messages import TaskFailed

logger = logging.getLogger(__name__)


class TaskRunner:
    """Runs background tasks on daemon threads and queues their result messages.

    A task is a zero-argument callable returning one message (or None). Results
    are consumed on the UI thread through `drain()`.
    """

    def __init__(self):
        self._results = queue.Queue()

    def submit(self, task):
        if task is None:
            return
        t = threading.Thread(target=self._run, args=(task,), daemon=True)
        t.start()
        return t

    def _run(self, task):
        try:
            msg = task()
        except Exception as exc:
            logger.exception("background task crashed")
            msg = TaskFailed(getattr(task, "session", None), exc)
        if msg is not None:
            self._results.put(msg)

    def drain(self) -> list:
        out = []
        while True:
            try:
                out.append(self._results.get_nowait())
            except queue.Empty:
                return out
