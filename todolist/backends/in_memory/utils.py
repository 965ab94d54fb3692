from typing import ContextManager
from todolist.core.utils import BaseStoreLock
import threading


class ThreadingStoreLock(BaseStoreLock):
    def __init__(self):
        self._lock = threading.RLock()

    def lock(self) -> "ContextManager":
        return self._lock
