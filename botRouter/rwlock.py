from __future__ import annotations

import threading
from contextlib import contextmanager


class RWLock:
    """
    Many readers or one writer. Waiting writers block new readers,
    so a steady stream of dispatches cannot starve registration.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waitingWriters = 0

    def acquireRead(self) -> None:
        with self._cond:
            while self._writer or self._waitingWriters:
                self._cond.wait()
            self._readers += 1

    def releaseRead(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquireWrite(self) -> None:
        with self._cond:
            self._waitingWriters += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waitingWriters -= 1
            self._writer = True

    def releaseWrite(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def reading(self):
        self.acquireRead()
        try:
            yield
        finally:
            self.releaseRead()

    @contextmanager
    def writing(self):
        self.acquireWrite()
        try:
            yield
        finally:
            self.releaseWrite()
