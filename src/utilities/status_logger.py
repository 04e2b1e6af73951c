import os
import sys
import time
from typing import Optional, TextIO


class StatusLogger:
    """
    Shows start_msg as a status line while the block runs.
    On success, the line is replaced by finish_msg or cleared if there is none.
    """

    def __init__(
        self, start_msg: str, finish_msg: Optional[str] = None, out: Optional[TextIO] = None
    ):
        self.start_msg = start_msg
        self.finish_msg = finish_msg
        self.out = out if out is not None else sys.stdout

    def __enter__(self):
        self.out.write("\r" + self.start_msg)
        self.out.flush()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            self._finish(self.finish_msg)

    def _finish(self, msg: Optional[str]):
        if msg is None:
            self.out.write("\r\033[K\r")
        else:
            self.out.write("\r" + msg + os.linesep)
        self.out.flush()


class TimedStatusLogger(StatusLogger):
    elapsed_secs: Optional[float]

    def __init__(
        self, start_msg: str, finish_msg: Optional[str] = None, out: Optional[TextIO] = None
    ):
        super().__init__(start_msg, finish_msg, out)
        self.elapsed_secs = None

    def __enter__(self):
        self.start_time = time.perf_counter_ns()
        return super().__enter__()

    def __exit__(self, exc_type, exc_value, traceback):
        self.elapsed_secs = (time.perf_counter_ns() - self.start_time) / 1e9
        if exc_type is None:
            msg = None
            if self.finish_msg is not None:
                msg = f"Took {self.elapsed_secs:.2f}s: " + self.finish_msg
            self._finish(msg)
